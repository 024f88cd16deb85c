"""Weighted fuzzy search over the post index.

Each post is scored on four fields with fixed weights. A keyword is
split into tokens; every token must match some field for the post to be
a result. Scores follow a distance convention: lower is better, and 0.0
means every token occurred verbatim in a matched field.

Combining field scores::

    score = ∏ max(field_score, ε) ** weight     over matched fields

so a verbatim title hit outranks a verbatim tag hit, and matching in
more fields lowers (improves) the score further.
"""

import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from wren.config import SiteConfig
from wren.content.models import Post
from wren.search.fuzzy import token_score

logger = logging.getLogger("wren.search")

FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("title", 0.4),
    ("description", 0.3),
    ("category", 0.15),
    ("tags", 0.15),
)

_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True, slots=True)
class FieldMatch:
    """Where the tokens matched inside one field value.

    ``indices`` are ``(start, end)`` spans into ``value``.
    """

    field: str
    value: str
    indices: tuple[tuple[int, int], ...]


@dataclass(frozen=True, slots=True)
class SearchResult:
    post: Post
    score: float
    matches: tuple[FieldMatch, ...]


class SearchResults(Sequence[SearchResult]):
    """Ranked results for one keyword.

    ``is_blank`` is True when the keyword was empty or whitespace, which
    callers show as a hint rather than as "no results".
    """

    __slots__ = ("_results", "is_blank", "keyword")

    def __init__(self, keyword: str, results: Iterable[SearchResult] = (), *, is_blank: bool = False) -> None:
        self.keyword = keyword
        self.is_blank = is_blank
        self._results: tuple[SearchResult, ...] = tuple(results)

    @overload
    def __getitem__(self, index: int) -> SearchResult: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[SearchResult]: ...

    def __getitem__(self, index: int | slice) -> SearchResult | Sequence[SearchResult]:
        return self._results[index]

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"SearchResults({self.keyword!r}, {len(self)} results, is_blank={self.is_blank})"

    @property
    def posts(self) -> list[Post]:
        return [result.post for result in self._results]


@dataclass(frozen=True, slots=True)
class _Document:
    post: Post
    # field name -> (original values, lowercased values)
    fields: dict[str, tuple[tuple[str, ...], tuple[str, ...]]]


def _document(post: Post) -> _Document:
    raw = {
        "title": (post.title,),
        "description": (post.description,) if post.description else (),
        "category": (post.category,) if post.category else (),
        "tags": post.tags,
    }
    return _Document(
        post=post,
        fields={name: (values, tuple(v.lower() for v in values)) for name, values in raw.items()},
    )


class SearchIndex:
    """Fuzzy, field-weighted search over a snapshot of posts.

    The index is built once; it does not follow later changes to the
    post store.

    Usage::

        index = SearchIndex(store.get_all())
        results = index.query("pyhton")
        if results.is_blank:
            ...  # show the hint
        elif not results:
            ...  # show "no results"
    """

    __slots__ = ("_documents", "min_match_length", "threshold")

    def __init__(
        self,
        posts: Iterable[Post] = (),
        *,
        threshold: float = 0.3,
        min_match_length: int = 2,
    ) -> None:
        self.threshold = threshold
        self.min_match_length = min_match_length
        self._documents: tuple[_Document, ...] = ()
        self.build(posts)

    @classmethod
    def from_config(cls, posts: Iterable[Post], config: SiteConfig) -> "SearchIndex":
        return cls(
            posts,
            threshold=config.search_threshold,
            min_match_length=config.search_min_match_length,
        )

    def __len__(self) -> int:
        return len(self._documents)

    def build(self, posts: Iterable[Post]) -> None:
        """Index *posts*, replacing any previous snapshot."""
        self._documents = tuple(_document(post) for post in posts)
        logger.debug("Indexed %d posts", len(self._documents))

    def query(self, keyword: str, *, limit: int | None = None) -> SearchResults:
        """Rank posts against *keyword*, best (lowest score) first.

        Ties keep index order. Tokens shorter than ``min_match_length``
        are ignored, so a keyword made only of such tokens matches
        nothing.
        """
        if not keyword.strip():
            return SearchResults(keyword, is_blank=True)

        tokens = [t for t in keyword.lower().split() if len(t) >= self.min_match_length]
        if not tokens:
            return SearchResults(keyword)

        scored: list[tuple[float, int, SearchResult]] = []
        for position, document in enumerate(self._documents):
            result = self._score(document, tokens)
            if result is not None:
                scored.append((result.score, position, result))

        scored.sort(key=lambda item: (item[0], item[1]))
        results = [item[2] for item in scored]
        if limit is not None:
            results = results[:limit]
        return SearchResults(keyword, results)

    def _score(self, document: _Document, tokens: list[str]) -> SearchResult | None:
        matched_tokens: set[int] = set()
        matches: list[FieldMatch] = []
        total = 1.0
        any_field = False

        for field, weight in FIELD_WEIGHTS:
            originals, lowered = document.fields[field]
            token_scores: list[float] = []
            spans: dict[int, list[tuple[int, int]]] = {}

            for token_index, token in enumerate(tokens):
                best: tuple[float, int, tuple[int, int]] | None = None
                for value_index, value in enumerate(lowered):
                    hit = token_score(
                        token,
                        value,
                        threshold=self.threshold,
                        min_match_length=self.min_match_length,
                    )
                    if hit is None:
                        continue
                    score, alignment = hit
                    if best is None or score < best[0]:
                        best = (score, value_index, (alignment.start, alignment.end))
                if best is None:
                    token_scores.append(1.0)
                    continue
                matched_tokens.add(token_index)
                token_scores.append(best[0])
                spans.setdefault(best[1], []).append(best[2])

            if not spans:
                continue

            any_field = True
            field_score = sum(token_scores) / len(token_scores)
            total *= max(field_score, _EPSILON) ** weight
            for value_index, value_spans in sorted(spans.items()):
                matches.append(
                    FieldMatch(
                        field=field,
                        value=originals[value_index],
                        indices=tuple(sorted(value_spans)),
                    )
                )

        if not any_field or len(matched_tokens) != len(tokens):
            return None
        return SearchResult(post=document.post, score=total, matches=tuple(matches))
