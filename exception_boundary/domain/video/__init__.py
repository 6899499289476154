"""
Video bounded context, domain layer.

Video lookup and thumbnail validation rules, and the error codes they
raise.
"""
