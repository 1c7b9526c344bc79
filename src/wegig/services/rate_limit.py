"""Fixed-interval throttle for outbound calls to a single dependency."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

_logger = logging.getLogger(__name__)


@dataclass
class RateLimiter:
    """Keep successive calls at least ``min_interval_seconds`` apart.

    The check and the update of ``last_request_at`` happen under one lock, so
    coroutines that call ``throttle`` concurrently wait their turn in call
    order and each sees the reservation made by the one before it.
    """

    min_interval_seconds: float = 1.0
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    last_request_at: float | None = None
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    async def throttle(self) -> None:
        """Wait until the next call is allowed, then reserve the slot."""
        async with self._lock:
            if self.last_request_at is not None:
                elapsed = self.clock() - self.last_request_at
                if elapsed < self.min_interval_seconds:
                    delay = self.min_interval_seconds - elapsed
                    _logger.debug("Throttling outbound call for %.3fs", delay)
                    await self.sleep(delay)
            self.last_request_at = self.clock()
