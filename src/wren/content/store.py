"""The post store — canonical post collection and memoized article content.

Loaded once per session from the index resource, then read-only. Article
content is fetched lazily and cached by filename for the whole session;
there is no eviction and no invalidation.
"""

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any

import anyio

from wren.config import SiteConfig
from wren.content.frontmatter import parse_front_matter
from wren.content.loader import ResourceLoader
from wren.content.models import Adjacent, ContentPayload, Post, SiteStats
from wren.errors import ContentLoadError, IndexLoadError, InvalidPostError, ResourceError

logger = logging.getLogger("wren.content")


def _name_list(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    values = data.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        msg = f"Index {key!r} must be a list of strings"
        raise IndexLoadError(msg)
    return tuple(values)


def parse_index(data: Any) -> tuple[tuple[Post, ...], tuple[str, ...], tuple[str, ...]]:
    """Validate an index document and return ``(posts, categories, tags)``.

    Posts are sorted by date, newest first. ``sorted`` is stable, so
    posts sharing a date keep their index-file order.

    Raises ``IndexLoadError`` for a malformed document, a malformed post
    record, or a duplicate post id.
    """
    if not isinstance(data, Mapping):
        msg = f"Index must be a JSON object, got {type(data).__name__}"
        raise IndexLoadError(msg)

    records = data.get("posts") or []
    if not isinstance(records, list):
        msg = "Index 'posts' must be a list"
        raise IndexLoadError(msg)

    posts: list[Post] = []
    seen: set[str] = set()
    for record in records:
        if not isinstance(record, Mapping):
            msg = f"Post record must be an object, got {type(record).__name__}"
            raise IndexLoadError(msg)
        try:
            post = Post.from_dict(record)
        except InvalidPostError as exc:
            raise IndexLoadError(str(exc)) from exc
        if post.id in seen:
            msg = f"Duplicate post id {post.id!r}"
            raise IndexLoadError(msg)
        seen.add(post.id)
        posts.append(post)

    ordered = tuple(sorted(posts, key=lambda p: p.date, reverse=True))
    return ordered, _name_list(data, "categories"), _name_list(data, "tags")


class PostStore:
    """Sorted post collection plus a per-filename content cache.

    Usage::

        store = PostStore(loader)
        if await store.load():
            posts = store.get_all()
            payload = await store.load_content(posts[0].filename)
    """

    __slots__ = (
        "_by_id",
        "_cache",
        "_in_flight",
        "_posts",
        "categories",
        "config",
        "fetch_count",
        "loader",
        "tags",
    )

    def __init__(self, loader: ResourceLoader, config: SiteConfig | None = None) -> None:
        self.loader = loader
        self.config = config or loader.config
        self._posts: tuple[Post, ...] = ()
        self._by_id: dict[str, Post] = {}
        self._cache: dict[str, ContentPayload] = {}
        self._in_flight: dict[str, anyio.Event] = {}
        self.categories: tuple[str, ...] = ()
        self.tags: tuple[str, ...] = ()
        # Content fetches actually sent to the loader
        self.fetch_count = 0

    def __len__(self) -> int:
        return len(self._posts)

    # -- Loading --

    async def load(self, index_path: str | None = None) -> bool:
        """Fetch and parse the post index.

        Returns False, leaving the collection empty, when the index is
        unreachable or malformed. Never raises for those failures.
        """
        path = index_path or self.config.index_path
        self._posts = ()
        self._by_id = {}
        self.categories = ()
        self.tags = ()
        try:
            data = await self.loader.fetch_json(path)
            posts, categories, tags = parse_index(data)
        except ResourceError as exc:
            logger.error("Error loading posts from %s: %s", path, exc)
            return False

        self._posts = posts
        self._by_id = {post.id: post for post in posts}
        self.categories = categories
        self.tags = tags
        logger.info("Loaded %d posts from %s", len(posts), path)
        return True

    async def load_content(self, filename: str) -> ContentPayload | None:
        """Return the parsed article at *filename*, fetching it at most once.

        Concurrent calls for a filename that is already being fetched wait
        for that fetch instead of starting another. Returns None when the
        fetch fails; failures are not cached.
        """
        cached = self._cache.get(filename)
        if cached is not None:
            logger.debug("Content cache hit for %s", filename)
            return cached

        pending = self._in_flight.get(filename)
        if pending is not None:
            await pending.wait()
            return self._cache.get(filename)

        done = anyio.Event()
        self._in_flight[filename] = done
        try:
            payload = await self._fetch_content(filename)
        except ContentLoadError as exc:
            logger.error("Error loading article %s: %s", filename, exc)
            return None
        finally:
            del self._in_flight[filename]
            done.set()

        self._cache[filename] = payload
        return payload

    async def _fetch_content(self, filename: str) -> ContentPayload:
        self.fetch_count += 1
        try:
            document = await self.loader.fetch_text(filename)
        except ResourceError as exc:
            raise ContentLoadError(str(exc)) from exc
        return parse_front_matter(document)

    def is_cached(self, filename: str) -> bool:
        return filename in self._cache

    # -- Queries --

    def get_all(self) -> Sequence[Post]:
        """Return every post, newest first."""
        return self._posts

    def get_by_id(self, post_id: str) -> Post | None:
        return self._by_id.get(post_id)

    def get_by_category(self, category: str) -> list[Post]:
        return [post for post in self._posts if post.category == category]

    def get_by_tag(self, tag: str) -> list[Post]:
        return [post for post in self._posts if tag in post.tags]

    def search(self, keyword: str) -> list[Post]:
        """Case-insensitive substring filter over title, description,
        category and tags. An empty keyword matches nothing.
        """
        if not keyword:
            return []
        needle = keyword.lower()

        def matches(post: Post) -> bool:
            fields = [post.title, post.description or "", post.category or "", *post.tags]
            return any(needle in value.lower() for value in fields)

        return [post for post in self._posts if matches(post)]

    def get_adjacent_posts(self, post_id: str) -> Adjacent:
        """Return the older (``prev``) and newer (``next``) neighbours."""
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                older = self._posts[index + 1] if index + 1 < len(self._posts) else None
                newer = self._posts[index - 1] if index > 0 else None
                return Adjacent(prev=older, next=newer)
        return Adjacent(prev=None, next=None)

    # -- Aggregates --

    def get_category_stats(self) -> dict[str, int]:
        """Post count per category, in first-seen order."""
        return dict(Counter(post.category for post in self._posts if post.category))

    def get_tag_stats(self) -> dict[str, int]:
        """Post count per tag, in first-seen order."""
        return dict(Counter(tag for post in self._posts for tag in post.tags))

    def group_by_date(self) -> dict[int, dict[int, list[Post]]]:
        """Posts grouped by year, then month, newest first at every level.

        Within a month posts keep collection order, so ties on the same
        date keep index-file order.
        """
        grouped: dict[int, dict[int, list[Post]]] = {}
        for post in self._posts:
            grouped.setdefault(post.date.year, {}).setdefault(post.date.month, []).append(post)
        return {
            year: {month: grouped[year][month] for month in sorted(grouped[year], reverse=True)}
            for year in sorted(grouped, reverse=True)
        }

    def get_stats(self) -> SiteStats:
        categories = {post.category for post in self._posts if post.category}
        tags = {tag for post in self._posts for tag in post.tags}
        years = sorted({post.date.year for post in self._posts}, reverse=True)
        return SiteStats(
            total_posts=len(self._posts),
            total_categories=len(categories),
            total_tags=len(tags),
            years=tuple(years),
        )
