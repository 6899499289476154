"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas, the
console entry points' wiring and the gRPC error boundary. No business
logic belongs here. Routes call use cases and let failures propagate.
"""
