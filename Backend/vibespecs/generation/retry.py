# vibespecs/generation/retry.py
"""
Caller-supplied retry policy for generation.

Rules:
- Only the configured error kinds are retried (UpstreamError by default)
- ConfigurationError is never retried
- Linear backoff between attempts
"""
import asyncio
from typing import Awaitable, Callable, Tuple, Type, TypeVar

from vibespecs.core.exceptions import ConfigurationError, UpstreamError
from vibespecs.core.logging import log

T = TypeVar("T")


class RetryPolicy:
    """
    Wraps a generation coroutine with bounded retries.

    The generator itself is one-shot; this is how a caller opts in to
    retrying transient upstream failures with identical input.
    """

    def __init__(
        self,
        max_retries: int = 0,
        base_delay: float = 2.0,
        retry_on: Tuple[Type[Exception], ...] = (UpstreamError,),
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.retry_on = retry_on

    def get_retry_delay(self, attempt: int) -> float:
        """Delay before retry number ``attempt + 1`` (0-indexed)."""
        return self.base_delay * (attempt + 1)

    def should_retry(self, error: Exception) -> bool:
        if isinstance(error, ConfigurationError):
            return False
        return isinstance(error, self.retry_on)

    async def run(self, fn: Callable[..., Awaitable[T]], *args, **kwargs) -> T:
        attempt = 0
        while True:
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                if attempt >= self.max_retries or not self.should_retry(e):
                    raise
                delay = self.get_retry_delay(attempt)
                log("RETRY", f"{type(e).__name__}: {e}. Waiting {delay}s before retry...")
                await asyncio.sleep(delay)
            attempt += 1
            log("RETRY", f"Retry {attempt}/{self.max_retries}")
