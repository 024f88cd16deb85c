"""Content resolution — the post index, article payloads and their cache."""

from wren.content.frontmatter import parse_front_matter
from wren.content.loader import DirectoryTransport, ResourceLoader
from wren.content.models import (
    Adjacent,
    ContentPayload,
    Post,
    SiteStats,
    StatEntry,
    TimelineMonth,
    TimelineYear,
)
from wren.content.store import PostStore, parse_index

__all__ = [
    "Adjacent",
    "ContentPayload",
    "DirectoryTransport",
    "Post",
    "PostStore",
    "ResourceLoader",
    "SiteStats",
    "StatEntry",
    "TimelineMonth",
    "TimelineYear",
    "parse_front_matter",
    "parse_index",
]
