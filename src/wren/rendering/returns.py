"""Template and InlineTemplate return types.

Frozen dataclasses that route handlers return. The render surface
inspects these to dispatch to the kida renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Template:
    """Render a kida template into the main area.

    A ``page_title`` context value becomes the document title.

    Usage::

        return Template("filtered.html", page_title=name, posts=posts)
    """

    name: str
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(self, name: str, /, **context: Any) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "context", context)

    @property
    def page_title(self) -> str | None:
        return self.context.get("page_title")

    @staticmethod
    def inline(source: str, /, **context: Any) -> InlineTemplate:
        """Create a template from a string.  For prototyping only.

        Usage::

            return Template.inline("<h1>{{ title }}</h1>", title="Hello")

        """
        return InlineTemplate(source, **context)


@dataclass(frozen=True, slots=True)
class InlineTemplate:
    """A template rendered from a string source."""

    source: str
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(self, source: str, /, **context: Any) -> None:
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "context", context)

    @property
    def page_title(self) -> str | None:
        return self.context.get("page_title")
