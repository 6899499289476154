"""
Data Transfer Objects for the user application layer.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering an account."""

    email: str


@dataclass(frozen=True)
class GetUserQuery:
    user_id: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO describing a user.

    Attributes:
        id: Opaque user id.
        email: Normalized email address.
        created_at: Registration timestamp (UTC).
    """

    id: str
    email: str
    created_at: datetime
