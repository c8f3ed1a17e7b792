"""
Auth request/response schemas.
"""
from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, field_validator

from educonnect.models.types import Role
from educonnect.schemas.common import CamelModel


def _password_length(v: str) -> str:
    if len(v.encode("utf-8")) > 72:
        raise ValueError("Password must be at most 72 bytes (bcrypt limit)")
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    return v


class ProfileFields(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    department: str | None = None
    bio: str | None = None


class RegisterRequest(ProfileFields):
    email: EmailStr
    password: str
    role: Role = Role.STUDENT

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        return _password_length(v)


class LoginRequest(ProfileFields):
    """Credentials plus optional profile fields to refresh on login."""
    email: EmailStr
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"


class UserResponse(CamelModel):
    id: UUID
    email: str
    role: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    department: str | None = None
    bio: str | None = None
    created_at: datetime
