"""Opt-in retry helpers.

Nothing in the SDK retries on its own; callers wrap operations explicitly.
"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, TypeVar, cast

# Get logger
logger = logging.getLogger(__name__)

T = TypeVar('T')
AsyncF = TypeVar('AsyncF', bound=Callable[..., Awaitable[Any]])


async def sleep(ms: float) -> None:
    """Suspend the caller for ``ms`` milliseconds."""
    await asyncio.sleep(ms / 1000)


async def retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1000,
    retryable_exceptions: Optional[Tuple[Type[BaseException], ...]] = None,
    log_level: int = logging.WARNING
) -> T:
    """Run an async operation, retrying on failure with a linear delay.

    After the n-th failed attempt the caller sleeps ``base_delay * n``
    milliseconds. The operation is always attempted at least once, so
    ``max_attempts`` values below 1 behave like 1.

    Args:
        operation: Zero-argument callable returning an awaitable
        max_attempts: Total number of attempts
        base_delay: Delay unit in milliseconds
        retryable_exceptions: Exception types that trigger a retry, all
            exceptions by default
        log_level: Logging level for retry attempts

    Returns:
        The operation's result

    Raises:
        Exception: The last error once attempts are exhausted, or the first
            non-retryable error

    Example:
        >>> balance = await retry(lambda: client.get_balance(key), max_attempts=5)
    """
    attempts = max(1, max_attempts)
    retryable = retryable_exceptions or (Exception,)

    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except retryable as e:
            if attempt >= attempts:
                logger.log(log_level, f"Max attempts ({attempts}) reached with error: {e}")
                raise

            delay = base_delay * attempt
            logger.log(
                log_level,
                f"Attempt {attempt}/{attempts} failed: {e}. Retrying in {delay:.0f}ms"
            )
            await sleep(delay)

    # Unreachable: the loop either returns or raises
    raise RuntimeError("retry exhausted without a result")


def async_retry(
    max_attempts: int = 3,
    base_delay: float = 1000,
    retryable_exceptions: Optional[Tuple[Type[BaseException], ...]] = None
) -> Callable[[AsyncF], AsyncF]:
    """Decorator form of retry for async functions.

    Example:
        @async_retry(max_attempts=5, base_delay=250)
        async def fetch_blockhash(client):
            return await client.get_latest_blockhash()
    """
    def decorator(func: AsyncF) -> AsyncF:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return await retry(
                lambda: func(*args, **kwargs),
                max_attempts=max_attempts,
                base_delay=base_delay,
                retryable_exceptions=retryable_exceptions
            )

        return cast(AsyncF, wrapper)

    return decorator
