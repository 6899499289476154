"""
Shared error handling package.

Semantic error codes, the ApiException base class, the boundary DTO,
the adapter that builds it, and the boundary that logs and renders it.
Domain errors are translated into transport responses in exactly one
place.
"""
