"""Literal keyword highlighting for search result markup.

Independent of the fuzzy scorer: only exact, case-insensitive
occurrences of the keyword are marked.
"""

import html
import re


def highlight(text: str, keyword: str, *, tag: str = "mark") -> str:
    """Return *text* as HTML with each occurrence of *keyword* wrapped.

    Text outside and inside the marks is HTML-escaped::

        highlight("Go & Rust", "go")  -> "<mark>Go</mark> &amp; Rust"
    """
    if not keyword:
        return html.escape(text)

    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    parts: list[str] = []
    last = 0
    for match in pattern.finditer(text):
        parts.append(html.escape(text[last : match.start()]))
        parts.append(f"<{tag}>{html.escape(match.group())}</{tag}>")
        last = match.end()
    parts.append(html.escape(text[last:]))
    return "".join(parts)
