"""Invoke helper — call sync or async route handlers uniformly.

Route handlers can be ``def`` or ``async def``. The navigator is the
only caller, but the sync/async check lives here so handlers written
either way receive ``(params, query)`` identically.

Usage::

    from wren._internal.invoke import invoke

    output = await invoke(match.handler, match.params, match.query)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and await the result if it is awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
