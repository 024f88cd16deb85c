"""Fragment routing — compiled patterns, parameter extraction, query parsing."""

from wren.routing.query import QueryParams, parse_query
from wren.routing.route import PathSegment, Route, RouteMatch
from wren.routing.router import Router, parse_pattern

__all__ = [
    "PathSegment",
    "QueryParams",
    "Route",
    "RouteMatch",
    "Router",
    "parse_pattern",
    "parse_query",
]
