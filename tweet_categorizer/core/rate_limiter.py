"""
Token bucket used to throttle calls to the remote classifier.

The bucket starts full. Tokens accrue continuously at ``capacity / window``
per millisecond and are kept as a float, so fractional accrual between rapid
calls is never lost.
"""
import logging
import math
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


def _sleep_ms(duration_ms: float) -> None:
    time.sleep(duration_ms / 1000)


class RateLimiter:
    """Thread-safe token bucket.

    ``clock`` returns the current time in milliseconds and ``sleep`` suspends
    the caller for a number of milliseconds; both default to the real
    monotonic clock and ``time.sleep`` and are injectable for tests.

    A caller that has to wait keeps the lock while sleeping, so concurrent
    callers queue behind it instead of racing for the same token. Other
    threads are not blocked. Waiters are served in the order the underlying
    lock hands them out, which is usually but not strictly arrival order.
    """

    def __init__(self, max_requests: int, window_ms: float = 60 * 1000,
                 clock: Optional[Callable[[], float]] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_ms <= 0:
            raise ValueError("window_ms must be positive")

        self._clock = clock or _monotonic_ms
        self._sleep = sleep or _sleep_ms
        self._lock = threading.Lock()

        self.capacity = max_requests
        self.refill_rate = max_requests / window_ms  # tokens per ms
        self._tokens = float(max_requests)
        self._last_refill = self._clock()

    @classmethod
    def per_minute(cls, max_requests: int, **kwargs) -> 'RateLimiter':
        return cls(max_requests, window_ms=60 * 1000, **kwargs)

    @property
    def tokens(self) -> float:
        return self._tokens

    def available(self) -> float:
        """Refill, then report the current balance without consuming"""
        with self._lock:
            self._refill()
            return self._tokens

    def acquire(self) -> bool:
        """Block until a token is available, then consume it"""
        with self._lock:
            self._refill()

            # Normally a single pass; loops only if the clock lags the sleep
            while self._tokens < 1:
                wait_ms = math.ceil((1 - self._tokens) / self.refill_rate)
                logger.info(f"Rate limit reached. Waiting {wait_ms}ms for next token")
                self._sleep(wait_ms)
                self._refill()

            self._tokens -= 1
            return True

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        tokens_to_add = elapsed * self.refill_rate

        if tokens_to_add > 0:
            self._tokens = min(float(self.capacity), self._tokens + tokens_to_add)
            self._last_refill = now
