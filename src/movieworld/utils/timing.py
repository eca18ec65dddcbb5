"""Timing decorator for service operations."""

import functools
import logging
import time
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """
    Log how long an async operation takes.

    Successful calls are logged at DEBUG. Failures are logged at ERROR with
    the exception type and then re-raised unchanged.
    """
    name = f"service.{func.__qualname__}"

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(
                f"{name} failed after {elapsed_ms:.1f} ms with {type(e).__name__}: {e}"
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{name} completed in {elapsed_ms:.1f} ms")
        return result

    return wrapper
