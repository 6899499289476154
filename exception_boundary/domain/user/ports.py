"""
Port interfaces (ABCs) for the user bounded context.
"""

from abc import ABC, abstractmethod

from exception_boundary.domain.user.entities import User


class UserRepository(ABC):
    """Port for reading and storing users."""

    @abstractmethod
    def get(self, user_id: str) -> User | None:
        """Return the user with ``user_id``, or None."""
        raise NotImplementedError

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        """Whether an account already uses ``email``."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user."""
        raise NotImplementedError
