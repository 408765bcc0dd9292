"""
Request logging and per-client rate limiting for the resolver API
"""

import logging
import time
from collections import deque
from typing import Callable, Deque, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Paths never counted against the rate limit
UNLIMITED_PATHS = frozenset(
    ["/api/v1/health", "/api/v1/", "/docs", "/openapi.json"]
)


class SlidingWindowLimiter:
    """Per-key sliding window of request timestamps.

    A key is dropped as soon as its window empties, and every ``period``
    seconds all keys are swept, so clients that went quiet do not accumulate.
    """

    def __init__(
        self,
        calls: int,
        period: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.calls = calls
        self.period = period
        self._clock = clock
        self._windows: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._windows)

    def allow(self, key: str) -> bool:
        """Record a request for ``key``; False when it is over the limit."""
        now = self._clock()
        if now - self._last_sweep >= self.period:
            self._sweep(now)

        window = self._windows.get(key)
        if window is not None:
            self._trim(window, now)
            if not window:
                del self._windows[key]
                window = None

        if window is not None and len(window) >= self.calls:
            return False

        if window is None:
            window = self._windows[key] = deque()
        window.append(now)
        return True

    def _trim(self, window: Deque[float], now: float) -> None:
        while window and window[0] <= now - self.period:
            window.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._windows):
            window = self._windows[key]
            self._trim(window, now)
            if not window:
                del self._windows[key]
        self._last_sweep = now
        logger.debug("Rate limiter sweep: %d active clients", len(self._windows))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients exceeding ``calls`` requests per ``period`` seconds"""

    def __init__(self, app, calls: int = 60, period: int = 60):
        super().__init__(app)
        self.limiter = SlidingWindowLimiter(calls, period)

    async def dispatch(self, request: Request, call_next):
        if request.url.path in UNLIMITED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client is not None else "unknown"
        if not self.limiter.allow(client_ip):
            logger.warning("Rate limit exceeded for IP: %s", client_ip)
            return JSONResponse(
                status_code=429,
                content={
                    "detail": {
                        "error": "Rate limit exceeded",
                        "details": (
                            f"Maximum {self.limiter.calls} requests per "
                            f"{self.limiter.period} seconds"
                        ),
                    }
                },
            )
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        client_host = request.client.host if request.client is not None else "unknown"
        logger.info(
            "%s %s from %s -> %d in %.3fs",
            request.method,
            request.url.path,
            client_host,
            response.status_code,
            time.perf_counter() - start,
        )
        return response
