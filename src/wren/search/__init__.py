"""Ranked fuzzy search over the post index."""

from wren.search.debounce import Debouncer, SearchSession
from wren.search.fuzzy import Alignment, best_alignment
from wren.search.highlight import highlight
from wren.search.index import FIELD_WEIGHTS, FieldMatch, SearchIndex, SearchResult, SearchResults

__all__ = [
    "FIELD_WEIGHTS",
    "Alignment",
    "Debouncer",
    "FieldMatch",
    "SearchIndex",
    "SearchResult",
    "SearchResults",
    "SearchSession",
    "best_alignment",
    "highlight",
]
