"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren.routing.query import QueryParams

# Leading character of a parameter segment: "/tag/:name"
PARAM_SENTINEL = ":"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:  ``/tags``       (is_param=False)
    Param:   ``/:name``      (is_param=True, param_name="name")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route pattern.

    Built once at registration; navigation never re-parses the pattern.
    """

    pattern: str
    handler: Callable[..., Any]
    segments: tuple[PathSegment, ...]
    name: str | None = None

    @property
    def is_static(self) -> bool:
        """True when the pattern has no parameter segments."""
        return not any(seg.is_param for seg in self.segments)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.param_name for seg in self.segments if seg.param_name)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of resolving a concrete fragment path."""

    route: Route
    path: str
    params: dict[str, str]
    query: QueryParams

    @property
    def handler(self) -> Callable[..., Any]:
        return self.route.handler
