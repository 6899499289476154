"""
Correlation id resolution.

A correlation id ties a client-visible error to its log record. It is
taken from the caller when one is supplied (request headers, process
environment, gRPC metadata) and generated otherwise.
"""

import os
from typing import Iterable, Mapping
from uuid import uuid4

from starlette.requests import Request

HTTP_HEADERS = ("x-request-id", "x-correlation-id", "traceparent")
ENV_VARS = ("X_REQUEST_ID", "X_CORRELATION_ID", "TRACEPARENT")
RESPONSE_HEADER = "X-Request-ID"


def new_correlation_id() -> str:
    return uuid4().hex


def from_headers(headers: Mapping[str, str]) -> str:
    """Resolve from HTTP headers, first match wins."""
    lowered = {key.lower(): value for key, value in headers.items()}
    for name in HTTP_HEADERS:
        value = (lowered.get(name) or "").strip()
        if value:
            return value
    return new_correlation_id()


def from_environ(environ: Mapping[str, str] | None = None) -> str:
    """Resolve from the process environment (console commands)."""
    env = os.environ if environ is None else environ
    for name in ENV_VARS:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return new_correlation_id()


def from_grpc_metadata(
    metadata: Iterable[tuple[str, str | bytes]] | None,
) -> str:
    """Resolve from gRPC invocation metadata."""
    values: dict[str, str] = {}
    for key, value in metadata or ():
        if isinstance(value, bytes):
            # binary (-bin) headers never carry an id
            continue
        values.setdefault(key.lower(), value)
    return from_headers(values)


def for_request(request: Request) -> str:
    """Id assigned by CorrelationIdMiddleware, else resolved from headers."""
    assigned = getattr(request.state, "correlation_id", None)
    if assigned:
        return assigned
    return from_headers(request.headers)
