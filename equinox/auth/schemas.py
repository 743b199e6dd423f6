"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from pydantic import BaseModel, EmailStr, Field

from equinox.user.models import UserRole
from equinox.user.schemas import UserPublicRead


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    user: UserPublicRead
    message: str


class AuthMessage(BaseModel):
    """Generic auth message response."""

    message: str


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    """Admin-only account creation."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=1)
    role: UserRole = UserRole.Viewer
