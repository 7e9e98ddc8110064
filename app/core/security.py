"""Password hashing and signed bearer tokens."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings, settings
from app.core.errors import InvalidToken

# Bcrypt cost (rounds); looked up on every hash, so patching it takes effect immediately.
BCRYPT_ROUNDS = settings.BCRYPT_ROUNDS

# Min/max lengths for name and password validation.
NAME_MIN_LEN = 2
NAME_MAX_LEN = 50
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password(secrets.token_hex(16))


def burn_password_check(plain_password: str) -> None:
    """One bcrypt comparison against a throwaway hash, for logins naming no account."""
    verify_password(plain_password, _dummy_hash())


@dataclass(frozen=True)
class TokenClaims:
    """Verified token payload."""

    user_id: int
    email: str
    role: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenService:
    """Signs and verifies time-limited JWT bearer tokens.

    Stateless: output depends only on the secret, algorithm, window and payload.
    Every token carries a random ``jti`` so two tokens issued for the same user
    in the same second still differ.
    """

    secret: str
    algorithm: str = "HS256"
    expire_minutes: int = 30 * 24 * 60

    @classmethod
    def from_settings(cls, s: Settings) -> "TokenService":
        return cls(
            secret=s.JWT_SECRET.get_secret_value(),
            algorithm=s.JWT_ALGORITHM,
            expire_minutes=s.JWT_EXPIRE_MINUTES,
        )

    @property
    def ttl_seconds(self) -> int:
        return self.expire_minutes * 60

    def sign(self, user_id: int | str, email: str, role: str) -> str:
        """Create a token with sub (user id), email, role, exp, iat and jti."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "exp": now + timedelta(minutes=self.expire_minutes),
            "iat": now,
            "jti": secrets.token_hex(16),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.
        Raises InvalidToken on a malformed, expired or badly signed token, or one
        whose payload does not carry a numeric subject.
        """
        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken() from e
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidToken("Invalid token payload") from e
        return TokenClaims(
            user_id=user_id,
            email=str(payload.get("email", "")),
            role=str(payload.get("role", "")),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
