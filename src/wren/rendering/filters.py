"""Built-in wren template filters.

Auto-registered on every wren kida Environment.
"""

from typing import Any
from urllib.parse import quote

from kida.template import Markup

from wren.content.text import truncate_text
from wren.formatting import format_date
from wren.search.highlight import highlight


def url_segment(value: Any) -> str:
    """Percent-encode a value for use as one fragment path segment.

    Example:
        <a href="#/tag/{{ tag | url_segment }}">  → "#/tag/C%2B%2B"

    """
    return quote(str(value), safe="!~*'()")


def highlight_filter(value: Any, keyword: str) -> Markup:
    """Wrap literal keyword occurrences in ``<mark>``.

    Example:
        {{ post.title | highlight(keyword) }}

    """
    return Markup(highlight(str(value), keyword))


def truncate(value: Any, max_length: int = 150) -> str:
    """Shorten listing text, appending ``...`` when cut.

    Example:
        {{ post.description | truncate(80) }}

    """
    return truncate_text(str(value), max_length)


BUILTIN_FILTERS: dict[str, Any] = {
    "format_date": format_date,
    "highlight": highlight_filter,
    "truncate": truncate,
    "url_segment": url_segment,
}
