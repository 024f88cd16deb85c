"""Markdown rendering for article bodies via patitas.

Treated as an opaque renderer: the article route hands it the body of a
content payload and embeds the HTML it returns.

Basic usage::

    from wren.markdown import MarkdownRenderer

    md = MarkdownRenderer()
    html = md.render("# Hello")
"""

from wren.markdown.renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
