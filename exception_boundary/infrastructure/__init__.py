"""
Infrastructure layer package.

Adapters implementing domain ports. Storage is in memory: the
repositories exist to give the use cases something to fail against.
"""
