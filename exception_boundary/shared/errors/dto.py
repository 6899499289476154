"""
Boundary error DTO.

The canonical model every failure is converted into before rendering.
It is built once per failure by the error adapter and consumed by
exactly one presenter. Plain frozen dataclass with no behavior beyond
views on its own fields.
"""

from dataclasses import dataclass, field
from typing import Any

from exception_boundary.shared.errors.codes import ErrorCode
from exception_boundary.shared.logging import LogLevel


@dataclass(frozen=True)
class BoundaryErrorDto:
    """Canonical, transport-agnostic description of a failure.

    Attributes:
        code: The error code the failure maps to.
        message_key: Translation key for the client-facing message.
        message_params: Placeholders for the translated message.
        log_level: PSR-3 severity.
        meta: Structured data safe to return to clients.
        log_context: Structured data for logs only.
        correlation_id: Request/trace id tying the response to the logs.
        category: Semantic category of the failure.
        retryable: Whether retrying unchanged may succeed.
        expected: Whether the failure is part of normal operation.
    """

    code: ErrorCode
    message_key: str
    message_params: dict[str, Any] = field(default_factory=dict)
    log_level: LogLevel = LogLevel.ERROR
    meta: dict[str, Any] = field(default_factory=dict)
    log_context: dict[str, Any] = field(default_factory=dict)
    correlation_id: str = ""
    category: str = "internal"
    retryable: bool = False
    expected: bool = False

    @property
    def response_code(self) -> str:
        return self.code.response_code

    def to_dict(self) -> dict[str, Any]:
        """Prepare a structured dict for logging context."""
        return {
            "response_code": self.response_code,
            "log_level": self.log_level.value,
            "message_key": self.message_key,
            "message_params": self.message_params,
            "meta": self.meta,
            "correlation_id": self.correlation_id,
            "category": self.category,
            "retryable": self.retryable,
            "expected": self.expected,
            "context": self.log_context,
        }
