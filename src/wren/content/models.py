"""Post, ContentPayload and derived view types."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, NamedTuple

from wren.errors import InvalidPostError
from wren.formatting import parse_date

_TEXT_FIELDS = ("title", "filename", "category", "description")


def _optional_str(post_id: Any, data: Mapping[str, Any], name: str) -> str | None:
    """Return the string field *name*, or None when absent or empty."""
    value = data.get(name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        msg = f"Post {post_id!r} field {name!r} must be a string, got {type(value).__name__}"
        raise InvalidPostError(msg)
    return value


@dataclass(frozen=True, slots=True)
class Post:
    """One entry of the post index. Immutable once loaded."""

    id: str
    title: str
    date: date
    filename: str = ""
    category: str | None = None
    tags: tuple[str, ...] = ()
    description: str | None = None
    read_time: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        """Build a Post from an index record.

        Raises ``InvalidPostError`` when ``id`` or ``date`` is missing, the
        date is not an ISO-8601 string, or a field has the wrong type:
        text fields must be strings and ``tags`` a list of strings.
        """
        post_id = data.get("id")
        if post_id is None or str(post_id) == "":
            msg = f"Post record has no id: {dict(data)!r}"
            raise InvalidPostError(msg)

        raw_date = data.get("date")
        if not raw_date:
            msg = f"Post {post_id!r} has no date"
            raise InvalidPostError(msg)
        if not isinstance(raw_date, str):
            msg = f"Post {post_id!r} has an invalid date: {raw_date!r}"
            raise InvalidPostError(msg)
        try:
            post_date = parse_date(raw_date)
        except ValueError as exc:
            msg = f"Post {post_id!r} has an invalid date: {raw_date!r}"
            raise InvalidPostError(msg) from exc

        text = {name: _optional_str(post_id, data, name) for name in _TEXT_FIELDS}

        tags = data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            msg = f"Post {post_id!r} field 'tags' must be a list of strings, got {tags!r}"
            raise InvalidPostError(msg)

        read_time = data.get("readTime", data.get("read_time"))
        if read_time is not None:
            try:
                read_time = int(read_time)
            except (TypeError, ValueError):
                read_time = None
            else:
                read_time = read_time if read_time > 0 else None

        return cls(
            id=str(post_id),
            title=text["title"] or "",
            date=post_date,
            filename=text["filename"] or "",
            category=text["category"],
            tags=tuple(dict.fromkeys(tags)),
            description=text["description"],
            read_time=read_time,
        )


@dataclass(frozen=True, slots=True)
class ContentPayload:
    """A parsed article: front-matter metadata plus Markdown body."""

    metadata: Mapping[str, Any] = field(default_factory=dict)
    content: str = ""


class Adjacent(NamedTuple):
    """Neighbours of a post in date order.

    ``prev`` is the older post, ``next`` the newer one.
    """

    prev: Post | None
    next: Post | None


class StatEntry(NamedTuple):
    name: str
    count: int


class TimelineMonth(NamedTuple):
    """One month of the timeline; ``first_day`` carries year and month."""

    first_day: date
    posts: list[Post]


class TimelineYear(NamedTuple):
    year: int
    months: list[TimelineMonth]


@dataclass(frozen=True, slots=True)
class SiteStats:
    """Totals over the loaded collection."""

    total_posts: int = 0
    total_categories: int = 0
    total_tags: int = 0
    years: tuple[int, ...] = ()
