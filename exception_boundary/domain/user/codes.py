"""
Error codes owned by the user context.
"""

from exception_boundary.shared.errors.codes import ErrorCode


class UserErrorCode(ErrorCode):
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_ALREADY_TAKEN = "USER_EMAIL_ALREADY_TAKEN"

    @property
    def translation_key(self) -> str:
        return _TRANSLATION_KEYS[self]


_TRANSLATION_KEYS = {
    UserErrorCode.USER_NOT_FOUND: "errors.user.not_found",
    UserErrorCode.EMAIL_ALREADY_TAKEN: "errors.user.email_already_taken",
}
