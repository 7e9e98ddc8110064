"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UpdateProfileRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.resources import PlaceholderResponse
from app.schemas.user import (
    CurrentUser,
    Preferences,
    PreferencesUpdate,
    Role,
    UserProfile,
)

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PlaceholderResponse",
    "Preferences",
    "PreferencesUpdate",
    "ProfileResponse",
    "RefreshRequest",
    "RegisterRequest",
    "Role",
    "TokenResponse",
    "UpdateProfileRequest",
    "UserProfile",
]
