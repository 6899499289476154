"""
Guard clauses for user rules. Each guard returns quietly or raises.
"""

from exception_boundary.domain.user.errors import EmailAlreadyTakenError


class UserGuards:
    @staticmethod
    def email_is_available(email: str, is_available: bool) -> None:
        if not is_available:
            raise EmailAlreadyTakenError(email)
