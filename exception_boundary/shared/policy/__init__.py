"""
Transport policy package.

Maps error codes to transport outcomes: HTTP status, CLI exit code and
gRPC status. Each bounded context owns a provider for its code family;
the registry consults them in order and falls back to a default.
"""
