"""
Domain-specific errors for the user bounded context.

All errors raised from the user domain layer are defined here.
They are rendered per transport by the error boundary.
No framework imports allowed.
"""

from typing import Any

from exception_boundary.domain.user.codes import UserErrorCode
from exception_boundary.shared.errors.exceptions import (
    CATEGORY_CONFLICT,
    CATEGORY_NOT_FOUND,
    ApiException,
)
from exception_boundary.shared.logging import LogLevel


class UserNotFoundError(ApiException):
    """Raised when no user exists for the given id."""

    code = UserErrorCode.USER_NOT_FOUND
    log_level = LogLevel.INFO
    category = CATEGORY_NOT_FOUND
    expected = True

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id

    def public_meta(self) -> dict[str, Any]:
        return {"user_id": self.user_id}


class EmailAlreadyTakenError(ApiException):
    """Raised when registering an email that already has an account."""

    code = UserErrorCode.EMAIL_ALREADY_TAKEN
    log_level = LogLevel.INFO
    category = CATEGORY_CONFLICT
    expected = True

    def __init__(self, email: str) -> None:
        super().__init__()
        self.email = email

    def message_params(self) -> dict[str, Any]:
        return {"email": self.email}

    def public_meta(self) -> dict[str, Any]:
        return {"email": self.email}
