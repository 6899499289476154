"""
Use case: Fetch a user by id.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None.
Failure cases: UserNotFoundError.
"""

from exception_boundary.application.user.dtos import GetUserQuery, UserResult
from exception_boundary.domain.user.errors import UserNotFoundError
from exception_boundary.domain.user.ports import UserRepository


class GetUserUseCase:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> UserResult:
        """Return the user or raise UserNotFoundError."""
        user = self._user_repo.get(query.user_id)
        if user is None:
            raise UserNotFoundError(query.user_id)
        return UserResult(id=user.id, email=user.email, created_at=user.created_at)
