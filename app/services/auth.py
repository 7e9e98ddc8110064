"""Credential lifecycle: register, login, logout, profile, password change, token refresh.

Every successful register/login/refresh issues a fresh token and overwrites the
user's session entry, so at most one token per user is refreshable at a time.
Logout and password change delete the entry. The database is committed before
the cache is written; a cache failure never fails the operation.
"""

import logging
from typing import Any

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from app.core.errors import (
    AccountDeactivated,
    DuplicateUser,
    EmailTaken,
    IncorrectPassword,
    InvalidCredentials,
    NotFound,
    StaleToken,
    UserInactiveOrMissing,
)
from app.core.security import TokenService, burn_password_check
from app.core.session_cache import SessionCache, session_key
from app.models.user import User
from app.schemas.user import Role, UserProfile
from app.services.user_store import UserStore, normalize_email

logger = logging.getLogger(__name__)


class AuthResult(BaseModel):
    """Public profile plus the newly issued bearer token."""

    user: UserProfile
    token: str


class AuthService:
    """Orchestrates the user store, session cache and token service."""

    def __init__(self, users: UserStore, sessions: SessionCache, tokens: TokenService) -> None:
        self.users = users
        self.sessions = sessions
        self.tokens = tokens

    def _issue_token(self, user: User) -> str:
        """Sign {id, email, role} and make it the user's current session token."""
        role = user.role.value if isinstance(user.role, Role) else str(user.role)
        token = self.tokens.sign(user.id, user.email, role)
        self.sessions.set(session_key(user.id), token, ttl_seconds=self.tokens.ttl_seconds)
        return token

    def _get_user(self, user_id: int | str) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound()
        return user

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Role | str | None = None,
    ) -> AuthResult:
        if self.users.find_by_email(email) is not None:
            raise DuplicateUser()
        try:
            user = self.users.create(name=name, email=email, password=password, role=role)
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            raise DuplicateUser() from e
        token = self._issue_token(user)
        logger.info("User registered", extra={"user_id": user.id, "role": user.role.value})
        return AuthResult(user=user.to_profile(), token=token)

    def login(self, email: str, password: str) -> AuthResult:
        user = self.users.find_by_email(email)
        if user is None:
            burn_password_check(password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()
        if not user.is_active:
            logger.info("Login refused: account deactivated", extra={"user_id": user.id})
            raise AccountDeactivated()
        if not user.compare_password(password):
            logger.info("Login failed: wrong password", extra={"user_id": user.id})
            raise InvalidCredentials()

        user.touch_last_login()
        self.users.save(user)
        token = self._issue_token(user)
        return AuthResult(user=user.to_profile(), token=token)

    def logout(self, user_id: int | str) -> None:
        """Drop the session entry. Idempotent."""
        self.sessions.delete(session_key(user_id))

    def get_profile(self, user_id: int | str) -> UserProfile:
        return self._get_user(user_id).to_profile()

    def update_profile(
        self,
        user_id: int | str,
        *,
        name: str | None = None,
        email: str | None = None,
        preferences: dict[str, Any] | None = None,
    ) -> UserProfile:
        """Apply only the provided fields; preferences merge key by key."""
        user = self._get_user(user_id)

        if email is not None:
            new_email = normalize_email(email)
            if new_email != user.email:
                other = self.users.find_by_email(new_email)
                if other is not None and other.id != user.id:
                    raise EmailTaken()
                user.email = new_email
        if name is not None:
            user.name = name.strip()
        if preferences:
            user.merge_preferences(preferences)

        try:
            self.users.save(user)
        except IntegrityError as e:
            raise EmailTaken() from e
        return user.to_profile()

    def change_password(
        self,
        user_id: int | str,
        current_password: str,
        new_password: str,
    ) -> None:
        """Re-hash the password and revoke the session entry (forces re-login for refresh)."""
        user = self._get_user(user_id)
        if not user.compare_password(current_password):
            raise IncorrectPassword()
        user.password = new_password
        self.users.save(user)
        self.sessions.delete(session_key(user.id))
        logger.info("Password changed; session revoked", extra={"user_id": user.id})

    def refresh_token(self, token: str) -> str:
        """Rotate the current session token. Only the exact cached token is accepted."""
        # verify() folds malformed, expired and bad-signature tokens into InvalidToken.
        claims = self.tokens.verify(token)

        user = self.users.find_by_id(claims.user_id)
        if user is None or not user.is_active:
            raise UserInactiveOrMissing()

        stored = self.sessions.get(session_key(user.id))
        if stored is None or stored != token:
            logger.info("Refresh rejected: stale token", extra={"user_id": user.id})
            raise StaleToken()

        return self._issue_token(user)
