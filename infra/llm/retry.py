import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from app.settings import settings
from domain.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 5
    base_delay: float = 1.0
    multiplier: float = 2.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.multiplier < 1:
            raise ValueError("base_delay must be >= 0 and multiplier >= 1")

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after failed attempt ``attempt`` (1-based)."""
        return self.base_delay * (self.multiplier ** (attempt - 1))

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        return cls(
            max_attempts=settings.RETRY_MAX_ATTEMPTS,
            base_delay=settings.RETRY_BASE_DELAY,
            multiplier=settings.RETRY_MULTIPLIER,
        )


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    retry_on: Tuple[Type[BaseException], ...] = (UpstreamUnavailableError,),
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    sleep = sleep or asyncio.sleep
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await operation()
        except retry_on as exc:
            if attempt == policy.max_attempts:
                logger.error("Giving up after %d attempts: %s", attempt, exc)
                raise
            delay = policy.delay_for(attempt)
            logger.warning("Attempt %d/%d failed (%s); retrying in %.1fs",
                           attempt, policy.max_attempts, exc, delay)
        await sleep(delay)
    raise RuntimeError("Unexpected retry exhaustion")
