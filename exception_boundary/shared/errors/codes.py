"""
Error code contract and platform-level codes.

A response code is the stable, machine-readable identifier of a failure.
It is part of the API contract: it never changes when HTTP statuses,
exit codes or message texts do.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Base for every error code family.

    Concrete families subclass this enum so transport policy providers
    can claim a whole family with ``isinstance``.
    """

    @property
    def response_code(self) -> str:
        """Stable business identifier (API contract)."""
        return self.value

    @property
    def translation_key(self) -> str:
        """Translation key used by the boundary.

        Every concrete family must override this; the base has no catalog
        namespace to derive a key from.
        """
        raise NotImplementedError


class PlatformErrorCode(ErrorCode):
    """Codes owned by the platform rather than a bounded context."""

    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    RATE_LIMITED = "RATE_LIMITED"

    @property
    def translation_key(self) -> str:
        return f"errors.platform.{self.value.lower()}"
