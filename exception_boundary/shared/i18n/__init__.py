"""
Translation package.

Message texts live in per-locale JSON catalogs. Translation is a
boundary service: domain code only ever deals in translation keys.
"""
