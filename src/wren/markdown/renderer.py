"""Core markdown renderer wrapping patitas."""

from patitas import Markdown

from wren.config import SiteConfig


class MarkdownRenderer:
    """Render Markdown source to HTML via patitas.

    Args:
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    __slots__ = ("_md",)

    def __init__(
        self,
        *,
        plugins: list[str] | None = None,
        highlight: bool = False,
    ) -> None:
        self._md: Markdown = Markdown(plugins=plugins or ["all"], highlight=highlight)

    @classmethod
    def from_config(cls, config: SiteConfig) -> "MarkdownRenderer":
        return cls(highlight=config.markdown_highlight)

    def render(self, source: str) -> str:
        """Render Markdown source to an HTML string."""
        if not source:
            return ""
        return self._md(source)
