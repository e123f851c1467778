"""Structured concurrency helpers built on AnyIO."""

import functools
from typing import Any, Awaitable, Callable, TypeVar

import anyio

T = TypeVar("T")


async def shield(func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
    """Run a coroutine function with protection from cancellation.

    Used for cleanup that must finish even when the surrounding scope has
    timed out, such as closing a terminal connection.
    """
    with anyio.CancelScope(shield=True):
        return await func(*args, **kwargs)


def run_blocking(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    backend: str = "asyncio",
    **kwargs: Any,
) -> T:
    """Run a coroutine function to completion on a dedicated event loop.

    Must not be called from inside a running event loop.
    """
    return anyio.run(functools.partial(func, *args, **kwargs), backend=backend)
