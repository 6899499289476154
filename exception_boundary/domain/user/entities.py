"""
Domain entities for the user bounded context.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered account.

    Attributes:
        id: Opaque user id.
        email: Normalized (lowercase) email address.
        created_at: Registration timestamp (UTC).
    """

    id: str
    email: str
    created_at: datetime
