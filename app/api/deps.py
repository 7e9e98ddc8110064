"""FastAPI dependencies: injected collaborators, the rate limit and the auth gates (require_auth, require_role, optional_auth)."""

from collections.abc import Callable
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.security import TokenService
from app.core.session_cache import SessionCache
from app.schemas.user import CurrentUser, Role
from app.services.access import authenticate, authorize, try_authenticate
from app.services.auth import AuthService
from app.services.rate_limit import RateLimiter
from app.services.user_store import UserStore


@lru_cache
def get_token_service() -> TokenService:
    """Token service built once from settings."""
    return TokenService.from_settings(get_settings())


def get_session_cache(request: Request) -> SessionCache:
    """The session cache opened by the app lifespan."""
    return request.app.state.session_cache


@lru_cache
def get_rate_limiter() -> RateLimiter:
    return RateLimiter.from_settings(get_settings())


def enforce_rate_limit(
    request: Request,
    sessions: Annotated[SessionCache, Depends(get_session_cache)],
    limiter: Annotated[RateLimiter, Depends(get_rate_limiter)],
) -> None:
    """Dependency: count the request against the caller's window. Raises 429 when over budget."""
    client_id = request.client.host if request.client else "unknown"
    limiter.check(sessions, client_id)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_auth_service(
    users: Annotated[UserStore, Depends(get_user_store)],
    sessions: Annotated[SessionCache, Depends(get_session_cache)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(users=users, sessions=sessions, tokens=tokens)


def require_auth(
    request: Request,
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Dependency: require a valid Bearer token and return the current user. Raises 401 otherwise."""
    user = authenticate(authorization, tokens, users)
    current = CurrentUser.model_validate(user)
    request.state.user = current
    return current


def optional_auth(
    request: Request,
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser | None:
    """Dependency: current user when a valid token is sent, else None (never raises 401)."""
    user = try_authenticate(authorization, tokens, users)
    if user is None:
        return None
    current = CurrentUser.model_validate(user)
    request.state.user = current
    return current


def require_role(*roles: Role) -> Callable[..., CurrentUser]:
    """Dependency factory: require an authenticated user whose role is in roles. Raises 403 otherwise."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(require_auth)],
    ) -> CurrentUser:
        authorize(current_user.role, roles)
        return current_user

    return dependency


require_admin = require_role(Role.ADMIN)
