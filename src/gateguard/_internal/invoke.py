"""Call sync or async authenticators uniformly.

Async callables are awaited on the event loop. Plain functions run in an
anyio worker thread so a blocking token check (JWT verification, a
database lookup) never stalls the gateway.
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(func: Any, *args: Any) -> Any:
    """Call *func* with *args* and return its (awaited) result."""
    if inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    ):
        return await func(*args)
    result = await anyio.to_thread.run_sync(functools.partial(func, *args))
    if inspect.isawaitable(result):
        result = await result
    return result
