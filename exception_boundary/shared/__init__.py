"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error codes, semantic exceptions and the error boundary
- Transport policy (HTTP status, CLI exit code, gRPC status)
- Presenters per transport
- Translation catalogs
- Rate limiting and correlation ids
- Logging configuration
"""
