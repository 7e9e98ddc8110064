"""Request/response schemas for auth endpoints."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from app.schemas.user import PreferencesUpdate, Role, UserProfile

# Same shape the dashboard frontend validates against: local@domain.tld
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


def _validate_email(v: str) -> str:
    s = v.strip().lower()
    if not _EMAIL_PATTERN.match(s):
        raise ValueError("Please provide a valid email")
    return s


def _validate_name(v: str) -> str:
    s = v.strip()
    if not (NAME_MIN_LEN <= len(s) <= NAME_MAX_LEN):
        raise ValueError(f"Name must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters")
    return s


class RegisterRequest(BaseModel):
    """New account; role defaults to developer."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Email (case-insensitive)")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    role: Role | None = Field(default=None, description="admin, developer, tester or devops")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_name(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class UpdateProfileRequest(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LEN)
    preferences: PreferencesUpdate | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return None if v is None else _validate_name(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return None if v is None else _validate_email(v)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)
    new_password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)


class RefreshRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Current session token")


class AuthResponse(BaseModel):
    """Profile and bearer token returned by register and login."""

    user: UserProfile
    token: str = Field(..., description="JWT; send as Authorization: Bearer <token>")
    token_type: str = Field(default="bearer", description="Token type")


class ProfileResponse(BaseModel):
    user: UserProfile


class TokenResponse(BaseModel):
    """Rotated token returned by refresh."""

    token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
