"""
Pydantic schemas for user API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterUserRequest(BaseModel):
    """Request schema for user registration.

    Attributes:
        email: Email address for the new account.
    """

    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)


class UserResponse(BaseModel):
    id: str
    email: str
    created_at: datetime
