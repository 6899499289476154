"""
Semantic exception base class and platform exceptions.

Every failure the system expects to happen is an ApiException subclass
bound to one ErrorCode. Subclasses tune the boundary through class
attributes and override the hooks for translation params, internal log
context and client-safe metadata.
No framework imports allowed.
"""

from typing import Any, ClassVar

from exception_boundary.shared.errors.codes import ErrorCode, PlatformErrorCode
from exception_boundary.shared.logging import LogLevel

CATEGORY_VALIDATION = "validation"
CATEGORY_AUTH = "auth"
CATEGORY_NOT_FOUND = "not_found"
CATEGORY_CONFLICT = "conflict"
CATEGORY_RATE_LIMIT = "rate_limit"
CATEGORY_INTERNAL = "internal"
CATEGORY_DEPENDENCY = "dependency"


class ApiException(Exception):
    """Base error for all semantic failures.

    Class attributes:
        code: Domain-owned error code. Required on concrete subclasses.
        log_level: PSR-3 severity used when the boundary logs the error.
        category: Semantic category (validation, auth, not_found,
            conflict, rate_limit, internal, dependency).
        retryable: Whether the operation can be retried unchanged.
        expected: Whether this failure is part of normal operation.
    """

    code: ClassVar[ErrorCode | None] = None
    log_level: ClassVar[LogLevel] = LogLevel.ERROR
    category: ClassVar[str] = CATEGORY_INTERNAL
    retryable: ClassVar[bool] = False
    expected: ClassVar[bool] = False

    def __init__(self, message: str | None = None) -> None:
        code = type(self).code
        if code is None:
            raise TypeError(f"{type(self).__name__} does not declare an error code")
        self.message = message or code.response_code
        super().__init__(self.message)

    def message_params(self) -> dict[str, Any]:
        """Translation placeholders."""
        return {}

    def context(self) -> dict[str, Any]:
        """Extra structured info for logs (internal)."""
        return {}

    def public_meta(self) -> dict[str, Any]:
        """Extra structured info safe for clients."""
        return {}


class ValidationFailedError(ApiException):
    """Raised when request input fails schema validation."""

    code = PlatformErrorCode.VALIDATION_FAILED
    log_level = LogLevel.INFO
    category = CATEGORY_VALIDATION
    expected = True

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"Validation failed on {len(errors)} field(s)")
        self.errors = errors

    def public_meta(self) -> dict[str, Any]:
        return {"errors": self.errors}


class BadRequestError(ApiException):
    """Raised when a request is malformed in a way schemas cannot express."""

    code = PlatformErrorCode.BAD_REQUEST
    log_level = LogLevel.INFO
    category = CATEGORY_VALIDATION
    expected = True

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or None)
        self.detail = detail

    def context(self) -> dict[str, Any]:
        return {"detail": self.detail}


class RouteNotFoundError(ApiException):
    """Raised when no route matches the requested path."""

    code = PlatformErrorCode.NOT_FOUND
    log_level = LogLevel.INFO
    category = CATEGORY_NOT_FOUND
    expected = True

    def __init__(self, path: str) -> None:
        super().__init__(f"No route for {path}")
        self.path = path

    def public_meta(self) -> dict[str, Any]:
        return {"path": self.path}


class MethodNotAllowedError(ApiException):
    """Raised when a route exists but not for the requested method."""

    code = PlatformErrorCode.METHOD_NOT_ALLOWED
    log_level = LogLevel.INFO
    category = CATEGORY_VALIDATION
    expected = True

    def __init__(self, method: str) -> None:
        super().__init__(f"Method not allowed: {method}")
        self.method = method

    def message_params(self) -> dict[str, Any]:
        return {"method": self.method}

    def public_meta(self) -> dict[str, Any]:
        return {"method": self.method}


class UnauthenticatedError(ApiException):
    """Raised when the caller is not authenticated."""

    code = PlatformErrorCode.UNAUTHENTICATED
    log_level = LogLevel.NOTICE
    category = CATEGORY_AUTH
    expected = True


class ForbiddenError(ApiException):
    """Raised when the caller lacks permission for the operation."""

    code = PlatformErrorCode.FORBIDDEN
    log_level = LogLevel.WARNING
    category = CATEGORY_AUTH
    expected = True


class RateLimitedError(ApiException):
    """Raised when the caller exceeded a rate limit."""

    code = PlatformErrorCode.RATE_LIMITED
    log_level = LogLevel.WARNING
    category = CATEGORY_RATE_LIMIT
    retryable = True
    expected = True

    def __init__(self, limit: str) -> None:
        super().__init__(f"Rate limit exceeded: {limit}")
        self.limit = limit

    def public_meta(self) -> dict[str, Any]:
        return {"limit": self.limit}
