"""Navigation state machine.

Turns fragment changes into handler invocations, one per navigation
event, and hands each handler's output to the render surface.

States::

    IDLE / RENDERED / NOT_FOUND --navigation--> LOADING
    LOADING --handler returns--> RENDERED
    LOADING --no match or handler raises--> NOT_FOUND

Overlapping navigations are not queued: each event starts its own
handler execution. A generation counter fences stale executions, so a
slow handler that finishes after a newer navigation started neither
renders nor overwrites ``current_route``.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

import anyio
from anyio.abc import TaskStatus

from wren._internal.invoke import invoke
from wren.rendering.surface import RenderSurface
from wren.routing.location import Location, split_fragment
from wren.routing.query import QueryParams
from wren.routing.route import RouteMatch
from wren.routing.router import Router

logger = logging.getLogger("wren.navigation")


class NavigationState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    NOT_FOUND = "not_found"


def is_active_link(href: str, path: str) -> bool:
    """Whether a navigation link should be highlighted for *path*.

    ``href`` may carry the leading ``#``. The root link is active only on
    the root path; any other link is active on itself and below it.
    """
    route = href.replace("#", "", 1)
    if path == route:
        return True
    return route not in ("", "/") and path.startswith(route)


class Navigator:
    """Drive a ``Router`` from a ``Location``.

    Usage::

        navigator = Navigator(router, surface)
        async with anyio.create_task_group() as tg:
            await tg.start(navigator.run)
            navigator.navigate("/post/hello")
    """

    __slots__ = (
        "_generation",
        "active_links",
        "current_route",
        "discard_stale",
        "location",
        "nav_links",
        "router",
        "state",
        "surface",
    )

    def __init__(
        self,
        router: Router,
        surface: RenderSurface,
        *,
        location: Location | None = None,
        nav_links: Iterable[str] = (),
        discard_stale: bool = True,
    ) -> None:
        self.router = router
        self.surface = surface
        self.location = location or Location()
        self.nav_links: tuple[str, ...] = tuple(nav_links)
        self.discard_stale = discard_stale
        self.state = NavigationState.IDLE
        self.current_route: RouteMatch | None = None
        self.active_links: frozenset[str] = frozenset()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of navigations started so far."""
        return self._generation

    def navigate(self, path: str) -> None:
        """Set the fragment to *path*.

        Returns immediately; the running loop handles the change event.
        """
        self.location.assign(path)

    async def handle_navigation(self) -> NavigationState | None:
        """Resolve the current fragment and run its handler.

        Returns the state this navigation ended in, or None when its
        result was discarded because a newer navigation had started.
        Handler exceptions never propagate.
        """
        self._generation += 1
        generation = self._generation

        path, query_string = split_fragment(self.location.fragment)
        query = QueryParams(query_string)

        self.active_links = frozenset(
            href for href in self.nav_links if is_active_link(href, path)
        )
        self.state = NavigationState.LOADING
        self.surface.show_loading()

        match = self.router.match(path, query)
        if match is None:
            logger.debug("No route matches %r", path)
            return self._not_found(generation)

        self.current_route = match
        try:
            output = await invoke(match.handler, match.params, match.query)
            if self._is_stale(generation):
                logger.debug("Discarding stale render of %r", path)
                return None
            self.surface.render(output)
        except Exception:
            logger.exception("Route handler failed for %r", path)
            return self._not_found(generation)

        self.state = NavigationState.RENDERED
        return self.state

    def _is_stale(self, generation: int) -> bool:
        return self.discard_stale and generation != self._generation

    def _not_found(self, generation: int) -> NavigationState | None:
        if self._is_stale(generation):
            return None
        self.surface.show_not_found()
        self.state = NavigationState.NOT_FOUND
        return self.state

    async def run(self, *, task_status: TaskStatus[Any] = anyio.TASK_STATUS_IGNORED) -> None:
        """Handle the initial fragment, then every fragment change.

        Each navigation runs in its own task so a slow handler does not
        delay the next event. Returns once the location is closed and all
        started navigations have finished.
        """
        changes = self.location.changes()
        async with anyio.create_task_group() as tg:
            tg.start_soon(self.handle_navigation)
            task_status.started()
            async with changes:
                async for _fragment in changes:
                    tg.start_soon(self.handle_navigation)
