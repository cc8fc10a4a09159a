"""Per-client throttling for the yield endpoints.

Every estimate may trigger an outbound NASA POWER request, so each client
gets a fixed budget of requests per sliding window. Clients are identified
by the socket peer address. ``X-Forwarded-For`` is only honoured when
``trust_forwarded_for`` is set, i.e. when the service runs behind a proxy
that overwrites the header.
"""

from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable

from fastapi import HTTPException, Request, status

from app.config import settings


class RateLimiter:
    """Sliding-window limiter keyed by client address.

    Clients whose window has emptied are forgotten, so memory is bounded by
    the number of clients active within one window.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float = 60.0,
        trust_forwarded_for: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.trust_forwarded_for = trust_forwarded_for
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}

    @property
    def tracked_clients(self) -> int:
        return len(self._hits)

    def client_key(self, request: Request) -> str:
        if self.trust_forwarded_for:
            forwarded = request.headers.get("x-forwarded-for", "")
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop
        return request.client.host if request.client else "unknown"

    def _prune(self, now: float) -> None:
        cutoff = now - self.window_seconds
        for key in list(self._hits):
            hits = self._hits[key]
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if not hits:
                del self._hits[key]

    def check(self, request: Request) -> None:
        """Record one request, or raise 429 with ``Retry-After`` if over budget."""
        now = self._clock()
        self._prune(now)

        key = self.client_key(request)
        hits = self._hits.setdefault(key, deque())
        if len(hits) >= self.max_requests:
            retry_after = max(1, math.ceil(hits[0] + self.window_seconds - now))
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Too many estimate requests. Max {self.max_requests} per "
                f"{self.window_seconds:g}s, retry in {retry_after}s.",
                headers={"Retry-After": str(retry_after)},
            )
        hits.append(now)

    def reset(self) -> None:
        self._hits.clear()


estimate_limiter = RateLimiter(
    max_requests=settings.estimate_rate_limit,
    window_seconds=60.0,
    trust_forwarded_for=settings.trust_forwarded_for,
)
