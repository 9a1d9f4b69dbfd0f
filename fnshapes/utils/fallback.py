"""
Soft-fail wrappers for expected runtime failures.

A soft-failing callable catches a named set of exceptions locally and
returns a documented default instead. Anything outside that set still
propagates.
"""

import functools
from typing import Any, Callable, TypeVar

from ..logging.config import get_logger

R = TypeVar("R")

logger = get_logger(__name__)


def soft_fail(
    default: R,
    exceptions: tuple[type[BaseException], ...] = (ValueError, TypeError),
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """
    Decorate a callable so the listed exceptions yield ``default``.

    Args:
        default: Value returned when one of ``exceptions`` is raised
        exceptions: Exception types treated as expected failures

    Returns:
        Decorator producing the soft-failing callable
    """

    def decorate(fn: Callable[..., R]) -> Callable[..., R]:
        @functools.wraps(fn)
        def wrapper(*args: Any) -> R:
            try:
                return fn(*args)
            except exceptions as e:
                logger.debug(
                    "Soft-fail fallback",
                    function=getattr(fn, "__qualname__", repr(fn)),
                    error_type=type(e).__name__,
                    fallback=default,
                )
                return default

        return wrapper

    return decorate
