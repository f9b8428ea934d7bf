"""Invoke helpers — call sync or async post sources uniformly.

A post source can be ``def`` or ``async def``. Blocking sources run in
an anyio worker thread so they never stall the event loop.

Usage::

    from level._internal.invoke import invoke

    posts = await invoke(source, "acme")
"""

import functools
import inspect
from typing import Any

import anyio


async def invoke(func: Any, *args: Any) -> Any:
    """Call *func* and return its result, awaiting when needed.

    Coroutine functions are awaited on the event loop. Anything else runs
    via ``anyio.to_thread.run_sync``; an awaitable it returns is awaited.
    """
    if inspect.iscoroutinefunction(func):
        return await func(*args)
    result = await anyio.to_thread.run_sync(functools.partial(func, *args))
    if inspect.isawaitable(result):
        result = await result
    return result
