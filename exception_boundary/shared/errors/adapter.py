"""
Error adapter: any exception in, BoundaryErrorDto out.

Semantic exceptions are copied field by field. Everything else becomes
a generic internal error whose details only reach the logs.
"""

import traceback
from abc import ABC, abstractmethod
from typing import Any

from exception_boundary.shared.errors.codes import PlatformErrorCode
from exception_boundary.shared.errors.dto import BoundaryErrorDto
from exception_boundary.shared.errors.exceptions import ApiException
from exception_boundary.shared.logging import LogLevel


class ErrorAdapter(ABC):
    """Port for converting exceptions into boundary DTOs."""

    @abstractmethod
    def to_dto(self, exc: BaseException, correlation_id: str) -> BoundaryErrorDto:
        """Build the DTO for ``exc`` tagged with ``correlation_id``."""
        raise NotImplementedError


class DefaultErrorAdapter(ErrorAdapter):
    """Adapter used by every transport."""

    def to_dto(self, exc: BaseException, correlation_id: str) -> BoundaryErrorDto:
        if isinstance(exc, ApiException):
            code = type(exc).code
            return BoundaryErrorDto(
                code=code,
                message_key=code.translation_key,
                message_params=dict(exc.message_params()),
                log_level=exc.log_level,
                meta=dict(exc.public_meta()),
                log_context=dict(exc.context()),
                correlation_id=correlation_id,
                category=exc.category,
                retryable=exc.retryable,
                expected=exc.expected,
            )

        # Fallback for any unexpected exception
        code = PlatformErrorCode.INTERNAL_SERVER_ERROR
        return BoundaryErrorDto(
            code=code,
            message_key=code.translation_key,
            log_level=LogLevel.ERROR,
            log_context=_unexpected_context(exc),
            correlation_id=correlation_id,
        )


def _unexpected_context(exc: BaseException) -> dict[str, Any]:
    """Describe an unexpected exception for the logs."""
    exception_class = f"{type(exc).__module__}.{type(exc).__qualname__}"
    frames = traceback.extract_tb(exc.__traceback__)
    if frames:
        filename, lineno = frames[-1].filename, frames[-1].lineno or 0
    else:
        filename, lineno = "<unknown>", 0
    return {
        "exception_class": exception_class,
        "exception_message": str(exc),
        "exception_file": filename,
        "exception_line": lineno,
        "exception_fingerprint": f"{exception_class}@{filename}:{lineno}",
    }
