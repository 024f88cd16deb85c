"""Wren exception hierarchy.

Shared across the router, the navigator, the post store and the search
layer so every module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route pattern or site configuration is invalid.

    Typically raised at registration time, before navigation starts.
    """


@dataclass(frozen=True, slots=True)
class NotFound(WrenError):  # noqa: N818
    """No registered route matches the requested fragment path."""

    path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path!r}: {self.detail}"
        return f"No route matches {self.path!r}"


class ResourceError(WrenError):
    """A resource could not be fetched (transport failure or non-2xx status)."""


class IndexLoadError(ResourceError):
    """The post index resource is unreachable or unparsable."""


class ContentLoadError(ResourceError):
    """An article content resource could not be fetched."""


class InvalidPostError(WrenError):
    """A post record in the index is malformed (missing id or date)."""
