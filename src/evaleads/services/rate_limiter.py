"""
Fixed-window rate limiter for lead submissions

State lives in the limiter instance and is process-local: nothing is
persisted, nothing is shared between workers, and stale keys are only
replaced, never evicted. Concurrent requests from one client may race on
the counter. A multi-instance deployment therefore under-enforces the limit.
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from evaleads.core.config import RateLimitConfig


@dataclass
class RateLimitEntry:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Allows ``max_requests`` per client within each ``window_seconds`` window"""

    def __init__(
        self,
        window_seconds: float = 15 * 60,
        max_requests: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}

    @classmethod
    def from_config(cls, config: RateLimitConfig, **kwargs) -> "FixedWindowRateLimiter":
        return cls(
            window_seconds=config.window_seconds,
            max_requests=config.max_requests,
            **kwargs,
        )

    def check(self, client_id: str) -> bool:
        """
        Record a request from ``client_id`` and report whether it is allowed.

        Blocked requests do not increase the count.
        """
        now = self._clock()
        entry = self._entries.get(client_id)
        if entry is None or now >= entry.reset_at:
            self._entries[client_id] = RateLimitEntry(count=1, reset_at=now + self.window_seconds)
            return True
        if entry.count >= self.max_requests:
            return False
        entry.count += 1
        return True

    def get(self, client_id: str) -> Optional[RateLimitEntry]:
        return self._entries.get(client_id)

    def reset(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
