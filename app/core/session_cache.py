"""Redis-backed session cache: one current token per user, with a TTL.

Soft-fail policy: the cache is never authoritative, so its failures never reach
the caller. ``get`` returns ``None`` when Redis errors or is not connected;
``set`` and ``delete`` log a warning and return normally. Losing the cache
degrades to "refresh fails, log in again" rather than an outage.
"""

import logging
from typing import Any

from redis import Redis, RedisError

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"


def session_key(user_id: int | str) -> str:
    """Cache key for a user's session entry: ``session:{user_id}``."""
    return f"{SESSION_KEY_PREFIX}{user_id}"


class SessionCache:
    """Thin Redis wrapper with an explicit connect/close lifecycle."""

    def __init__(
        self,
        redis_url: str,
        *,
        socket_timeout: float = 5.0,
        client: Any = None,
    ) -> None:
        self.redis_url = redis_url
        self.socket_timeout = socket_timeout
        # A pre-built client (or test double) skips connect()'s from_url.
        self.client = client
        self._ready = client is not None

    @property
    def is_ready(self) -> bool:
        return self.client is not None and self._ready

    def connect(self) -> bool:
        """Create the client and ping it. Returns readiness; never raises."""
        if self.client is None:
            self.client = Redis.from_url(
                self.redis_url,
                decode_responses=True,
                socket_timeout=self.socket_timeout,
                socket_connect_timeout=self.socket_timeout,
            )
        self._ready = self.ping()
        if self._ready:
            logger.info("Session cache connected")
        else:
            logger.warning("Session cache unavailable; running degraded (refresh will fail)")
        return self._ready

    def close(self) -> None:
        if self.client is None:
            return
        try:
            self.client.close()
            logger.info("Session cache disconnected")
        except RedisError as e:
            logger.warning("Error closing session cache: %s", e)
        finally:
            self.client = None
            self._ready = False

    def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.warning("Session cache ping failed: %s", e)
            return False

    def get(self, key: str) -> str | None:
        if self.client is None:
            return None
        try:
            return self.client.get(key)
        except RedisError as e:
            logger.warning("Session cache get failed", extra={"key": key, "reason": str(e)[:200]})
            return None

    def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        if self.client is None:
            logger.warning("Session cache not connected; dropping set", extra={"key": key})
            return
        try:
            if ttl_seconds:
                self.client.set(key, value, ex=ttl_seconds)
            else:
                self.client.set(key, value)
        except RedisError as e:
            logger.warning("Session cache set failed", extra={"key": key, "reason": str(e)[:200]})

    def delete(self, key: str) -> None:
        if self.client is None:
            logger.warning("Session cache not connected; dropping delete", extra={"key": key})
            return
        try:
            self.client.delete(key)
        except RedisError as e:
            logger.warning(
                "Session cache delete failed", extra={"key": key, "reason": str(e)[:200]}
            )

    def incr_window(self, key: str, window_seconds: int) -> int | None:
        """Increment a fixed-window counter, starting its TTL on the first hit.

        Returns the new count, or ``None`` when Redis errors or is not connected.
        """
        if self.client is None:
            return None
        try:
            count = int(self.client.incr(key))
            if count == 1:
                self.client.expire(key, window_seconds)
            return count
        except RedisError as e:
            logger.warning(
                "Session cache incr failed", extra={"key": key, "reason": str(e)[:200]}
            )
            return None
