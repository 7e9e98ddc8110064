"""Fixed-window request limiting per client, counted in the session cache's Redis.

Fails open: when the counter cannot be read the request is allowed.
"""

import logging
from dataclasses import dataclass

from app.core.config import Settings
from app.core.errors import RateLimited
from app.core.session_cache import SessionCache

logger = logging.getLogger(__name__)

RATE_LIMIT_KEY_PREFIX = "ratelimit:"


def rate_limit_key(client_id: str) -> str:
    return f"{RATE_LIMIT_KEY_PREFIX}{client_id}"


@dataclass(frozen=True)
class RateLimiter:
    max_requests: int = 100
    window_seconds: int = 15 * 60

    @classmethod
    def from_settings(cls, s: Settings) -> "RateLimiter":
        return cls(max_requests=s.RATE_LIMIT_MAX, window_seconds=s.RATE_LIMIT_WINDOW_SEC)

    def check(self, sessions: SessionCache, client_id: str) -> None:
        """Count one request for client_id. Raises RateLimited once the window's budget is spent."""
        count = sessions.incr_window(rate_limit_key(client_id), self.window_seconds)
        if count is None:
            return
        if count > self.max_requests:
            logger.warning(
                "Rate limit exceeded",
                extra={"client": client_id, "count": count, "limit": self.max_requests},
            )
            raise RateLimited()
