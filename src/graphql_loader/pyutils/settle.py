"""Settle an awaitable via an error-first callback"""

from __future__ import annotations

from inspect import isawaitable
from typing import Any, Awaitable, Callable, Optional, TypeVar

__all__ = ["Callback", "settle"]

T = TypeVar("T")

Callback = Callable[[Optional[BaseException], Optional[T]], Any]


async def settle(
    awaitable: Awaitable[T], callback: Callback[T] | None = None
) -> T | None:
    """Await the given awaitable and report the outcome.

    Without a callback, the result is returned and errors are raised as usual.

    With a callback, the callback is called with ``(None, result)`` on success or
    with ``(error, None)`` on failure, and the error is not raised. The callback
    may be a coroutine function. The result is returned as well, or None on
    failure. Errors raised by the callback itself are not caught.
    """
    if callback is None:
        return await awaitable
    try:
        result = await awaitable
    except Exception as error:
        outcome = callback(error, None)
        if isawaitable(outcome):
            await outcome
        return None
    outcome = callback(None, result)
    if isawaitable(outcome):
        await outcome
    return result
