"""Small text helpers for article bodies and listings."""

import math
import re

_WHITESPACE_RE = re.compile(r"\s+")


def calculate_read_time(content: str, words_per_minute: int = 300) -> int:
    """Estimate reading time in minutes, never less than one.

    Counts non-whitespace characters, which suits CJK text where words
    are not space separated.
    """
    count = len(_WHITESPACE_RE.sub("", content))
    return max(1, math.ceil(count / words_per_minute))


def truncate_text(text: str, max_length: int = 150) -> str:
    """Cut *text* to *max_length* characters, appending ``...`` when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."
