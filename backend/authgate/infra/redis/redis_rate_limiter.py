from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import redis  # type: ignore[import-untyped]

from authgate.services._shared.errors import STORE_FAILURES, StoreUnavailableError
from authgate.services._shared.ports import RateLimiter, RateLimitResult
from authgate.services._shared.ports.rate_limiter import build_result


@dataclass(slots=True)
class RedisRateLimiter(RateLimiter):
    """
    Fixed-window limiter: ``INCR`` a per-identifier counter and arm its
    expiry on the first hit of each window.

    :param r: A Redis client (already connected).
    """

    r: redis.Redis
    prefix: str = "ratelimit:"

    def _k(self, identifier: str) -> str:
        return f"{self.prefix}{identifier}"

    def hit(self, identifier: str, *, limit: int, window: int) -> RateLimitResult:
        key = self._k(identifier)
        try:
            count = cast(int, self.r.incr(key))
            if count == 1:
                self.r.expire(key, window)
                reset_after = window
            else:
                ttl = cast(int, self.r.ttl(key))
                if ttl < 0:
                    # counter lost its expiry (e.g. crash between INCR and EXPIRE)
                    self.r.expire(key, window)
                    ttl = window
                reset_after = ttl
        except STORE_FAILURES as exc:
            raise StoreUnavailableError("INCR") from exc
        return build_result(count, limit=limit, reset_after=reset_after)
