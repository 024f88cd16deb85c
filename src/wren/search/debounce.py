"""Debounced query submission.

Typing fires ``submit`` on every keystroke; the ranking routine runs
once per pause in typing, ``delay`` seconds after the last keystroke.
"""

import logging
from collections.abc import Callable
from typing import Any

import anyio
from anyio.abc import TaskGroup

from wren._internal.invoke import invoke
from wren.search.index import SearchIndex, SearchResults

logger = logging.getLogger("wren.search")


class Debouncer:
    """Call *func* once, *delay* seconds after the last trigger.

    Each trigger cancels the pending call and schedules a new one in
    *task_group*. *func* may be sync or async. An exception from *func*
    is logged and dropped so the task group keeps running.
    """

    __slots__ = ("_pending", "_task_group", "delay", "func")

    def __init__(self, task_group: TaskGroup, func: Callable[..., Any], delay: float = 0.2) -> None:
        self._task_group = task_group
        self.func = func
        self.delay = delay
        self._pending: anyio.CancelScope | None = None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        scope = anyio.CancelScope()
        self._pending = scope
        self._task_group.start_soon(self._fire, scope, args)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    async def _fire(self, scope: anyio.CancelScope, args: tuple[Any, ...]) -> None:
        with scope:
            await anyio.sleep(self.delay)
            if self._pending is scope:
                self._pending = None
            try:
                await invoke(self.func, *args)
            except Exception:
                logger.exception("Debounced call failed for %r", args)


class SearchSession:
    """Incremental search over a ``SearchIndex``.

    Usage::

        async with anyio.create_task_group() as tg:
            session = SearchSession(index, tg, on_results=show)
            session.submit("p")
            session.submit("py")
            session.submit("pyt")   # only "pyt" is ranked, 0.2s later
    """

    __slots__ = ("_debouncer", "index", "last_results", "on_results", "runs")

    def __init__(
        self,
        index: SearchIndex,
        task_group: TaskGroup,
        on_results: Callable[[SearchResults], Any] | None = None,
        *,
        delay: float = 0.2,
    ) -> None:
        self.index = index
        self.on_results = on_results
        self.last_results: SearchResults | None = None
        self.runs = 0
        self._debouncer = Debouncer(task_group, self._run, delay)

    def submit(self, keyword: str) -> None:
        """Schedule a query for *keyword*, replacing any pending one."""
        self._debouncer(keyword)

    def cancel(self) -> None:
        self._debouncer.cancel()

    async def _run(self, keyword: str) -> None:
        results = self.index.query(keyword.strip())
        self.runs += 1
        self.last_results = results
        logger.debug("Search %r: %d results", keyword, len(results))
        if self.on_results is not None:
            await invoke(self.on_results, results)
