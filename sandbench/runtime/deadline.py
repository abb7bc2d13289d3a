"""Deadline-bounded awaitables.

``with_deadline`` races an operation against a timer. When the timer wins the
operation is cancelled, which is how an in-flight HTTP request gets abandoned
instead of being left running in the background, and a step-labelled
``OperationTimeoutError`` is raised in its place. A ``TimeoutError`` raised by
the operation itself before the deadline passes through unchanged.
"""

from __future__ import annotations

import asyncio
from typing import TypeVar
from collections.abc import Awaitable

from sandbench.errors import OperationTimeoutError

T = TypeVar("T")


async def with_deadline(operation: Awaitable[T], timeout_s: float | None, message: str) -> T:
    """Await ``operation``, raising OperationTimeoutError(message) on overrun.

    Args:
        operation: Coroutine or future to bound.
        timeout_s: Deadline in seconds; None or a non-positive value disables it.
        message: Step-specific failure text, e.g. "Sandbox creation timed out".
    """
    if timeout_s is None or timeout_s <= 0:
        return await operation
    scope = asyncio.timeout(timeout_s)
    try:
        async with scope:
            return await operation
    except OperationTimeoutError:
        # an inner deadline already fired and named its own step
        raise
    except TimeoutError as exc:
        if not scope.expired():
            raise
        raise OperationTimeoutError(message) from exc


__all__ = ["with_deadline"]
