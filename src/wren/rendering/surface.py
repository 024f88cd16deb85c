"""Render surfaces — the sole mutators of what is displayed.

The navigator talks to a ``RenderSurface``; ``TemplateSurface`` is the
bundled implementation that renders content descriptions through kida
into an in-memory main area and document title.
"""

import logging
from typing import Any, Protocol, runtime_checkable

from kida import Environment

from wren.errors import ConfigurationError
from wren.rendering.returns import InlineTemplate, Template

logger = logging.getLogger("wren.rendering")

LOADING_TEMPLATE = "loading.html"
NOT_FOUND_TEMPLATE = "not_found.html"


@runtime_checkable
class RenderSurface(Protocol):
    """Where the navigator puts placeholders and handler output."""

    def show_loading(self) -> None: ...

    def show_not_found(self) -> None: ...

    def render(self, output: Any) -> None: ...


class TemplateSurface:
    """Render handler output with kida.

    Dispatch order for ``render``:

    1. ``Template``        -> named template, ``page_title`` sets the title
    2. ``InlineTemplate``  -> template compiled from its source
    3. ``str``             -> markup used as-is
    4. ``None``            -> empty main area
    """

    __slots__ = ("_env", "main", "site_title", "title")

    def __init__(self, env: Environment, *, site_title: str = "My Blog") -> None:
        self._env = env
        self.site_title = site_title
        self.main = ""
        self.title = site_title

    def show_loading(self) -> None:
        self.main = self._env.get_template(LOADING_TEMPLATE).render({})

    def show_not_found(self) -> None:
        self.main = self._env.get_template(NOT_FOUND_TEMPLATE).render({})

    def render(self, output: Any) -> None:
        match output:
            case Template():
                html = self._env.get_template(output.name).render(output.context)
                logger.debug("Rendered template %s", output.name)
                self._set_title(output.page_title)
            case InlineTemplate():
                html = self._env.from_string(output.source).render(output.context)
                self._set_title(output.page_title)
            case str():
                html = output
            case None:
                html = ""
            case _:
                msg = f"Cannot render handler output of type {type(output).__name__}."
                raise ConfigurationError(msg)
        self.main = html

    def _set_title(self, page_title: str | None) -> None:
        self.title = f"{page_title} - {self.site_title}" if page_title else self.site_title
