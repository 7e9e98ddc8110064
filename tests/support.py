"""Shared test fixtures: in-memory SQLite sessions and a dict-backed Redis client."""

from collections.abc import Callable, Generator
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import security
from app.models import Base

TEST_SECRET = "test-secret-key-with-enough-bytes-for-hs256"

# Lowest cost bcrypt accepts; keeps hashing fast in tests.
FAST_BCRYPT_ROUNDS = 4


class FakeRedis:
    """Dict-backed stand-in for the handful of redis.Redis calls SessionCache makes."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    def get(self, key: str) -> str | None:
        return self.store.get(key)

    def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self.store[key] = value
        if ex is not None:
            self.ttls[key] = ex
        else:
            self.ttls.pop(key, None)
        return True

    def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    def incr(self, key: str) -> int:
        count = int(self.store.get(key, "0")) + 1
        self.store[key] = str(count)
        return count

    def expire(self, key: str, seconds: int) -> bool:
        if key not in self.store:
            return False
        self.ttls[key] = seconds
        return True

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        pass


def make_session_factory() -> sessionmaker:
    """Fresh in-memory SQLite database with all tables; one shared connection across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db(factory: sessionmaker) -> Callable[[], Generator[Session, None, None]]:
    """get_db replacement bound to a test session factory."""

    def _get_db() -> Generator[Session, None, None]:
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


def fast_bcrypt():
    """Patch bcrypt cost down for the duration of a test (use with addCleanup)."""
    return patch.object(security, "BCRYPT_ROUNDS", FAST_BCRYPT_ROUNDS)
