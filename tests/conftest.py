"""Shared fixtures: a small site served through httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from wren.config import SiteConfig
from wren.content.loader import ResourceLoader
from wren.content.store import PostStore

POSTS: list[dict[str, Any]] = [
    {
        "id": "intro",
        "title": "Intro to Python",
        "date": "2024-01-01",
        "category": "Tech",
        "tags": ["python", "beginner"],
        "description": "Getting started with Python",
        "filename": "posts/intro.md",
        "readTime": 5,
    },
    {
        "id": "followup",
        "title": "Follow-up on Go",
        "date": "2024-06-01",
        "category": "Tech",
        "tags": ["go"],
        "description": "Concurrency in Go Lang",
        "filename": "posts/followup.md",
    },
    {
        "id": "travel",
        "title": "Travel notes",
        "date": "2024-03-15",
        "category": "Life",
        "tags": ["travel"],
        "description": "A trip to the mountains",
        "filename": "posts/travel.md",
    },
    {
        "id": "same-day",
        "title": "Same day post",
        "date": "2024-03-15",
        "category": "Life",
        "tags": [],
        "filename": "posts/same.md",
    },
]

ARTICLES: dict[str, str] = {
    "posts/intro.md": "---\ntitle: Intro to Python\nauthor: Ada\n---\n# Intro\n\nHello **Python**.\n",
    "posts/followup.md": "# Follow-up\n\nNo front matter here.",
    "posts/travel.md": "---\ntitle: Travel\n---\nMountains.",
}


def site_files(**overrides: str) -> dict[str, str]:
    """Index plus articles, keyed by path relative to the site root."""
    files = {
        "data/posts.json": json.dumps({"posts": POSTS, "categories": ["Tech", "Life"], "tags": ["python", "go"]}),
        **ARTICLES,
    }
    files.update(overrides)
    return files


def make_transport(files: dict[str, str], calls: list[str] | None = None) -> httpx.MockTransport:
    """Serve *files* by path; record requested paths in *calls*."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.lstrip("/")
        if calls is not None:
            calls.append(path)
        if path not in files:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=files[path])

    return httpx.MockTransport(handler)


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig()


@pytest.fixture
def loader(config: SiteConfig, calls: list[str]) -> ResourceLoader:
    return ResourceLoader(config, transport=make_transport(site_files(), calls))


@pytest.fixture
def store(loader: ResourceLoader) -> PostStore:
    return PostStore(loader)


@pytest.fixture
def files() -> dict[str, str]:
    """A mutable copy of the site's files; edit before calling ``make_loader``."""
    return site_files()


@pytest.fixture
def make_loader(calls: list[str]):
    def factory(files: dict[str, str], config: SiteConfig | None = None) -> ResourceLoader:
        return ResourceLoader(config or SiteConfig(), transport=make_transport(files, calls))

    return factory
