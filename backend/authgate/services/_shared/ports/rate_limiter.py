from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class RateLimitResult:
    """
    Outcome of a fixed-window rate limit check.

    :ivar allowed: Whether this hit is within the limit.
    :ivar remaining: Hits left in the current window (never negative).
    :ivar limit: Configured limit for the window.
    :ivar reset_after: Seconds until the window resets.
    """

    allowed: bool
    remaining: int
    limit: int
    reset_after: int


class RateLimiter(Protocol):
    """Fixed-window counter keyed by caller identifier."""

    def hit(self, identifier: str, *, limit: int, window: int) -> RateLimitResult: ...


def build_result(count: int, *, limit: int, reset_after: int) -> RateLimitResult:
    """Turn a window counter into a :class:`RateLimitResult`."""
    return RateLimitResult(
        allowed=count <= limit,
        remaining=max(0, limit - count),
        limit=limit,
        reset_after=max(0, reset_after),
    )


class InMemoryRateLimiter(RateLimiter):
    """Thread-safe in-process limiter for unit tests and single-worker dev runs."""

    def __init__(self) -> None:
        self._windows: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()

    def hit(self, identifier: str, *, limit: int, window: int) -> RateLimitResult:
        now = time.monotonic()
        with self._lock:
            count, deadline = self._windows.get(identifier, (0, 0.0))
            if deadline <= now:
                count, deadline = 0, now + window
            count += 1
            self._windows[identifier] = (count, deadline)
        return build_result(count, limit=limit, reset_after=int(deadline - now))
