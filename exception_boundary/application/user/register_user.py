"""
Use case: Register a new user account.

Input: RegisterUserCommand (email)
Output: UserResult
Side effects: Stores the user.
Failure cases: EmailAlreadyTakenError.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from exception_boundary.application.user.dtos import RegisterUserCommand, UserResult
from exception_boundary.domain.user.entities import User
from exception_boundary.domain.user.guards import UserGuards
from exception_boundary.domain.user.ports import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Registers an account after checking the email is free."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: RegisterUserCommand) -> UserResult:
        """Run the registration use case.

        Args:
            command: The registration request.

        Returns:
            The newly created user.

        Raises:
            EmailAlreadyTakenError: If the email already has an account.
        """
        email = command.email.strip().lower()
        UserGuards.email_is_available(email, not self._user_repo.email_exists(email))

        user = User(id=uuid4().hex, email=email, created_at=datetime.now(timezone.utc))
        self._user_repo.add(user)
        logger.info("Registered user id=%s", user.id)

        return UserResult(id=user.id, email=user.email, created_at=user.created_at)
