"""
Error handling utilities for the LicenseChain Solana SDK.

This module provides the decorator that every public operation uses to keep
the error taxonomy closed: typed SDK errors pass through untouched, anything
else is wrapped into the operation's error kind.
"""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, cast

from licensechain_solana.utils.errors import ErrorCode, SolanaError

# Get logger
logger = logging.getLogger(__name__)

AsyncF = TypeVar('AsyncF', bound=Callable[..., Awaitable[Any]])


def describe_exception(exc: BaseException) -> Dict[str, Any]:
    """Build the details payload describing a wrapped cause.

    Args:
        exc: The original exception

    Returns:
        Dictionary with the cause's type and message
    """
    details: Dict[str, Any] = {
        "original_exception": type(exc).__name__,
        "original_message": exc.message if isinstance(exc, SolanaError) else str(exc),
    }
    code = getattr(exc, "code", None)
    if isinstance(code, ErrorCode):
        details["original_code"] = code.value
    return details


def handle_async_exceptions(
    error_type: Type[SolanaError],
    message: str,
    code: Optional[ErrorCode] = None,
    context: Optional[Dict[str, str]] = None,
    log_level: int = logging.WARNING
) -> Callable[[AsyncF], AsyncF]:
    """Decorator mapping failures of an async operation into the error taxonomy.

    SolanaError instances raised inside the operation are re-raised unchanged.
    Any other exception is logged and re-raised as ``error_type`` with the
    original exception chained as ``__cause__`` and described in ``details``.

    Args:
        error_type: SolanaError subclass to wrap unknown failures into
        message: Message for the wrapping error
        code: Error code for the wrapping error, when error_type accepts one
        context: Mapping of error attribute name to the decorated function's
            parameter supplying its value, e.g. ``{"account": "public_key"}``
        log_level: Logging level for wrapped failures

    Returns:
        Decorated async function

    Example:
        @handle_async_exceptions(
            AccountError,
            "Failed to get balance",
            context={"account": "public_key"}
        )
        async def get_balance(self, public_key):
            ...
    """
    def decorator(func: AsyncF) -> AsyncF:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SolanaError:
                raise
            except Exception as e:
                logger.log(
                    log_level,
                    f"Caught exception in {func.__name__}: {type(e).__name__}: {e}"
                )

                error_kwargs: Dict[str, Any] = {"details": describe_exception(e)}
                if code is not None:
                    error_kwargs["code"] = code
                if context:
                    bound = signature.bind_partial(*args, **kwargs)
                    for attribute, parameter in context.items():
                        error_kwargs[attribute] = bound.arguments.get(parameter)

                raise error_type(message, **error_kwargs) from e

        return cast(AsyncF, wrapper)

    return decorator
