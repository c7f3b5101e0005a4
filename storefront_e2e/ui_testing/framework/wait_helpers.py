# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling used by the page layer for every explicit wait.
#
# Key Features:
#   - Fixed-interval polling against a deadline
#   - Deterministic timeout outcome (WaitTimeoutError), never an open-ended loop
#   - Last observed value and last error kept for diagnostics
#
# Usage:
#   async def visible():
#       return await locator.is_visible(), None
#
#   await poll_until(visible, timeout_ms=5000, description="'#login' visible")
#
# ================================================================================

import asyncio
from typing import Any, Awaitable, Callable, Optional, Tuple, TypeVar

from loguru import logger


T = TypeVar("T")


class WaitTimeoutError(Exception):
    """Raised when a polled condition is not met before the deadline."""

    def __init__(
        self,
        description: str,
        elapsed_ms: float,
        attempts: int,
        last_result: Any = None,
        last_error: Optional[BaseException] = None,
    ):
        super().__init__(
            f"Timeout after {elapsed_ms:.0f}ms ({attempts} attempts) waiting for: "
            f"{description}. Last result: {last_result!r}, Last error: {last_error}"
        )
        self.description = description
        self.elapsed_ms = elapsed_ms
        self.attempts = attempts
        self.last_result = last_result
        self.last_error = last_error


async def poll_until(
    check_fn: Callable[[], Awaitable[Tuple[bool, T]]],
    timeout_ms: int,
    interval_ms: int = 100,
    description: str = "condition",
) -> T:
    """
    Poll an async condition until it holds or the deadline passes.

    Args:
        check_fn: Coroutine function returning (success, result)
        timeout_ms: Time budget in milliseconds
        interval_ms: Delay between checks in milliseconds
        description: Human-readable description for logging

    Returns:
        Result from check_fn when successful

    Raises:
        WaitTimeoutError: If the deadline passes without success
    """
    loop = asyncio.get_running_loop()
    start = loop.time()
    deadline = start + timeout_ms / 1000
    attempt = 0
    last_result: Any = None
    last_error: Optional[BaseException] = None

    while True:
        attempt += 1
        try:
            success, result = await check_fn()
            last_result = result
            if success:
                logger.debug(
                    f"Wait successful after {attempt} attempts "
                    f"({(loop.time() - start) * 1000:.0f}ms): {description}"
                )
                return result
        except Exception as e:
            last_error = e
            logger.debug(f"Attempt {attempt} for {description} raised: {e}")

        remaining = deadline - loop.time()
        if remaining <= 0:
            raise WaitTimeoutError(
                description,
                elapsed_ms=(loop.time() - start) * 1000,
                attempts=attempt,
                last_result=last_result,
                last_error=last_error,
            )
        await asyncio.sleep(min(interval_ms / 1000, remaining))


__all__ = [
    "WaitTimeoutError",
    "poll_until",
]
