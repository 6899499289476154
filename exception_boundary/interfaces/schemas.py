"""
Pydantic schemas shared across bounded contexts.

ErrorResponse documents the JSON error envelope in OpenAPI; the
envelope itself is produced by the HTTP error presenter.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """The ``error`` member of every JSON error response."""

    response_code: str = Field(..., description="Stable machine-readable error code")
    log_level: str = Field(..., description="PSR-3 severity of the failure")
    message: str = Field(..., description="Translated, client-safe message")
    meta: dict[str, Any] = Field(default_factory=dict)
    correlation_id: str = Field(..., description="Quote this when reporting the error")


class ErrorResponse(BaseModel):
    """JSON error envelope."""

    success: bool = False
    error: ErrorBody


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
