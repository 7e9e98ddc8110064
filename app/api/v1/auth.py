"""Auth endpoints: register, login, logout, me, profile, password, refresh."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_auth_service, require_auth
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
from app.schemas.user import CurrentUser
from app.services.auth import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """Create an account and return its profile with a session token."""
    result = auth.register(body.name, body.email, body.password, body.role)
    return AuthResponse(user=result.user, token=result.token)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT and replaces any previous session.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = auth.login(body.email, body.password)
    return AuthResponse(user=result.user, token=result.token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[CurrentUser, Depends(require_auth)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    auth.logout(current_user.id)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=ProfileResponse)
def get_me(
    current_user: Annotated[CurrentUser, Depends(require_auth)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> ProfileResponse:
    return ProfileResponse(user=auth.get_profile(current_user.id))


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    body: UpdateProfileRequest,
    current_user: Annotated[CurrentUser, Depends(require_auth)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> ProfileResponse:
    """Update name, email and/or individual preference fields."""
    preferences = body.preferences.model_dump(exclude_none=True) if body.preferences else None
    profile = auth.update_profile(
        current_user.id,
        name=body.name,
        email=body.email,
        preferences=preferences,
    )
    return ProfileResponse(user=profile)


@router.put("/password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(require_auth)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Change password; the current session can no longer be refreshed."""
    auth.change_password(current_user.id, body.current_password, body.new_password)
    return MessageResponse(message="Password updated successfully")


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    body: RefreshRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Exchange the current session token for a new one. Rotated-out tokens are rejected."""
    return TokenResponse(token=auth.refresh_token(body.token))
