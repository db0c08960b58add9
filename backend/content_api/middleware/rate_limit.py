"""
Site Content API — Contact Form Rate Limiting
==============================================

What:  Per-IP sliding window limit on POST /api/contact (default 5 per 60s).
How:   `SlidingWindowLimiter` keeps a list of request timestamps per key.
       On each hit, timestamps older than the window are dropped; if the
       remaining count is at the limit the hit is refused with the number of
       seconds until the oldest one expires.
Who:   `limit_contact_submissions` is a FastAPI dependency on the contact
       route only. The admin API is authenticated and is not limited.

State is in process memory, so each worker process counts separately.
"""

import logging
import time
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from fastapi import Request

from content_api.config import settings
from content_api.exceptions import RateLimitExceededError
from content_api.middleware.logging import client_ip_of

logger = logging.getLogger(__name__)


class SlidingWindowLimiter:
    """
    Args:
        max_requests:  hits allowed per window
        window:        window length in seconds
        clock:         time source, injectable for tests
    """

    CLEANUP_EVERY = 1000

    def __init__(
        self,
        max_requests: int,
        window: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window = window
        self._clock = clock
        self._hits: Dict[str, List[float]] = defaultdict(list)
        self._calls = 0

    def hit(self, key: str) -> Optional[int]:
        """Record a hit for `key`. Returns None if allowed, else retry-after seconds."""
        now = self._clock()
        window_start = now - self.window

        recent = [ts for ts in self._hits[key] if ts > window_start]
        self._hits[key] = recent

        if len(recent) >= self.max_requests:
            return int(recent[0] + self.window - now) + 1

        recent.append(now)

        self._calls += 1
        if self._calls % self.CLEANUP_EVERY == 0:
            self._cleanup(window_start)
        return None

    def reset(self) -> None:
        self._hits.clear()
        self._calls = 0

    def _cleanup(self, window_start: float) -> None:
        inactive = [
            key for key, stamps in self._hits.items()
            if not stamps or stamps[-1] <= window_start
        ]
        for key in inactive:
            del self._hits[key]
        if inactive:
            logger.debug("Dropped %d idle rate-limit entries", len(inactive))


contact_limiter = SlidingWindowLimiter(
    max_requests=settings.contact_rate_limit_requests,
    window=settings.contact_rate_limit_window,
)


async def limit_contact_submissions(request: Request) -> None:
    """FastAPI dependency: raise 429 once an IP exceeds the contact form limit."""
    client_ip = client_ip_of(request)
    retry_after = contact_limiter.hit(client_ip)
    if retry_after is not None:
        logger.warning(
            "Contact form rate limit exceeded for %s: %d submissions in %ds",
            client_ip,
            contact_limiter.max_requests,
            contact_limiter.window,
        )
        raise RateLimitExceededError(retry_after=retry_after)
