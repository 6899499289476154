"""
Exception Boundary: semantic error handling for a FastAPI service.

Application package root. Domain code raises typed failures carrying a
stable response code; a single boundary turns any failure into a
canonical DTO and renders it per transport (HTTP JSON, HTML, CLI, gRPC).

Bounded contexts:
    - user: Account lookup and registration.
    - video: Video lookup and thumbnail validation.

Layers:
    - domain: Error codes, semantic exceptions, guards, ports, policies.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: In-memory adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, gRPC error boundary.
    - shared: Cross-cutting concerns (errors, policy, presentation, i18n).
"""

__version__ = "0.1.0"
