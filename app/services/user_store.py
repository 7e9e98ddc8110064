"""Credential store: user lookups and writes over a SQLAlchemy session."""

from typing import Any

from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import DEFAULT_ROLE, Role


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; store and compare them lower-cased."""
    return email.strip().lower()


class UserStore:
    """
    find_by_email / find_by_id / create / save over one request-scoped Session.

    Writes commit immediately. A unique-index violation surfaces as
    sqlalchemy.exc.IntegrityError after the session has been rolled back;
    callers translate it into their own error kind.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int | str) -> User | None:
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.db.get(User, pk)

    def create(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Role | str | None = None,
        **fields: Any,
    ) -> User:
        """Insert a user; the plaintext password is hashed by the model setter."""
        user = User(
            name=name.strip(),
            email=normalize_email(email),
            role=Role(role) if role else DEFAULT_ROLE,
            **fields,
        )
        user.password = password
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def save(self, user: User) -> None:
        if user.email:
            user.email = normalize_email(user.email)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
