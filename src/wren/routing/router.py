"""Compiled fragment router.

Patterns are compiled into segment tuples at registration time and
resolved against concrete fragment paths without re-parsing.

Match precedence:

1. A fully static pattern equal to the path always wins.
2. Otherwise the first registered parameterized pattern whose segment
   count and static segments agree with the path wins.
"""

import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import unquote

from wren.errors import ConfigurationError, NotFound
from wren.routing.query import QueryParams
from wren.routing.route import PARAM_SENTINEL, PathSegment, Route, RouteMatch

logger = logging.getLogger("wren.routing")


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    The pattern is split on ``/`` verbatim, so the leading empty segment
    is kept and ``"/tags"`` and ``"/tags/"`` are different patterns.

    Examples::

        "/"             -> (PathSegment(""), PathSegment(""))
        "/tags"         -> (PathSegment(""), PathSegment("tags"))
        "/tag/:name"    -> (..., PathSegment(":name", is_param=True, param_name="name"))
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in pattern.split("/"):
        if not part.startswith(PARAM_SENTINEL):
            segments.append(PathSegment(value=part))
            continue
        name = part[len(PARAM_SENTINEL) :]
        if not name:
            msg = f"Route pattern {pattern!r} has a parameter segment without a name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route pattern {pattern!r} binds parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))
    return tuple(segments)


def _bind(route: Route, parts: list[str]) -> dict[str, str] | None:
    """Bind path parts to a parameterized route, or return None."""
    if len(route.segments) != len(parts):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(route.segments, parts, strict=True):
        if seg.is_param:
            try:
                params[seg.param_name or ""] = unquote(part, errors="strict")
            except UnicodeDecodeError:
                return None
        elif seg.value != part:
            return None
    return params


class Router:
    """Fragment router with deterministic match precedence.

    Usage::

        router = Router()
        router.register("/", home)
        router.register("/tag/:name", tag_page)
        match = router.resolve("/tag/C%2B%2B")
        match.params  # {"name": "C++"}
    """

    __slots__ = ("_dynamic", "_routes", "_static")

    def __init__(self) -> None:
        # Registration order across all patterns
        self._routes: list[Route] = []
        # Exact lookup for patterns without parameters
        self._static: dict[str, Route] = {}
        # Parameterized routes in registration order
        self._dynamic: list[Route] = []

    def __len__(self) -> int:
        return len(self._routes)

    def register(
        self,
        pattern: str,
        handler: Callable[..., Any],
        *,
        name: str | None = None,
    ) -> Route:
        """Compile *pattern* and add it to the table.

        Registering the same pattern twice replaces the earlier handler
        but keeps the pattern's original position in the table.
        """
        route = Route(
            pattern=pattern,
            handler=handler,
            segments=parse_pattern(pattern),
            name=name,
        )
        self.add(route)
        return route

    def add(self, route: Route) -> None:
        """Add an already-compiled route."""
        for index, existing in enumerate(self._routes):
            if existing.pattern == route.pattern:
                self._routes[index] = route
                break
        else:
            self._routes.append(route)

        if route.is_static:
            self._static[route.pattern] = route
        else:
            self._dynamic = [r for r in self._routes if not r.is_static]

    def route(self, pattern: str, *, name: str | None = None) -> Callable[[Any], Any]:
        """Register a handler via decorator.

        Usage::

            @router.route("/post/:id")
            async def post(params, query): ...
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(pattern, func, name=name)
            return func

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def match(self, path: str, query: QueryParams | None = None) -> RouteMatch | None:
        """Resolve *path*, returning None when nothing matches."""
        path = path or "/"
        query = query if query is not None else QueryParams()

        static = self._static.get(path)
        if static is not None:
            return RouteMatch(route=static, path=path, params={}, query=query)

        parts = path.split("/")
        for route in self._dynamic:
            params = _bind(route, parts)
            if params is not None:
                logger.debug("%r matched %r", path, route.pattern)
                return RouteMatch(route=route, path=path, params=params, query=query)
        return None

    def resolve(self, path: str, query: QueryParams | None = None) -> RouteMatch:
        """Resolve a fragment path against the table.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        """
        result = self.match(path, query)
        if result is None:
            raise NotFound(path or "/")
        return result
