"""ORM model for application users (credentials, role, preferences)."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, Integer, String, func

from app.core.security import hash_password, verify_password
from app.models.base import Base
from app.schemas.user import DEFAULT_ROLE, Preferences, Role, UserProfile


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    Email is stored lower-cased so lookups are case-insensitive. The plaintext
    password is write-only: assigning ``user.password`` re-hashes into
    ``password_hash``. Accounts are soft-disabled through ``is_active``.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=32,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=DEFAULT_ROLE,
        index=True,
    )
    avatar = Column(String(1024), nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
    preferences = Column(JSON, nullable=False, default=lambda: Preferences().model_dump())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    @property
    def password(self) -> str:
        raise AttributeError("password is write-only")

    @password.setter
    def password(self, plain_password: str) -> None:
        self.password_hash = hash_password(plain_password)

    def compare_password(self, candidate: str) -> bool:
        """True if the plaintext candidate matches the stored hash."""
        if not self.password_hash:
            return False
        return verify_password(candidate, self.password_hash)

    def touch_last_login(self) -> None:
        self.last_login = datetime.now(UTC)

    def merge_preferences(self, updates: dict[str, Any]) -> None:
        """Merge preference fields one by one; a new dict so the JSON change is tracked."""
        current = Preferences.model_validate(self.preferences or {}).model_dump()
        current.update(updates)
        self.preferences = Preferences.model_validate(current).model_dump()

    def to_profile(self) -> UserProfile:
        """Public projection without the password hash."""
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            avatar=self.avatar or "",
            is_active=bool(self.is_active),
            last_login=self.last_login,
            preferences=Preferences.model_validate(self.preferences or {}),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
