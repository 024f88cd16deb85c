"""Tests for wren.content.loader — httpx-backed resource fetching."""

from pathlib import Path

import httpx
import pytest

from wren.config import SiteConfig
from wren.content.loader import DirectoryTransport, ResourceLoader
from wren.errors import ResourceError


class TestResourceLoader:
    @pytest.mark.anyio
    async def test_fetch_text(self, make_loader, calls: list[str]) -> None:
        async with make_loader({"posts/a.md": "# A"}) as loader:
            assert await loader.fetch_text("posts/a.md") == "# A"
        assert calls == ["posts/a.md"]

    @pytest.mark.anyio
    async def test_fetch_json(self, make_loader) -> None:
        async with make_loader({"data/posts.json": '{"posts": []}'}) as loader:
            assert await loader.fetch_json("data/posts.json") == {"posts": []}

    @pytest.mark.anyio
    async def test_missing_resource_raises(self, make_loader) -> None:
        async with make_loader({}) as loader:
            with pytest.raises(ResourceError, match="HTTP 404"):
                await loader.fetch_text("nope.md")

    @pytest.mark.anyio
    async def test_invalid_json_raises(self, make_loader) -> None:
        async with make_loader({"data/posts.json": "{not json"}) as loader:
            with pytest.raises(ResourceError, match="Invalid JSON"):
                await loader.fetch_json("data/posts.json")

    @pytest.mark.anyio
    async def test_transport_error_raises(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with ResourceLoader(transport=httpx.MockTransport(refuse)) as loader:
            with pytest.raises(ResourceError, match="refused"):
                await loader.fetch_text("a.md")

    @pytest.mark.anyio
    async def test_base_path_prefix(self, make_loader, calls: list[str]) -> None:
        config = SiteConfig(base_path="/blog")
        async with make_loader({"blog/posts/a.md": "A"}, config) as loader:
            assert await loader.fetch_text("/posts/a.md") == "A"
        assert calls == ["blog/posts/a.md"]

    @pytest.mark.anyio
    async def test_base_url(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text="ok")

        config = SiteConfig(base_url="https://example.org/site/")
        async with ResourceLoader(config, transport=httpx.MockTransport(handler)) as loader:
            await loader.fetch_text("data/posts.json")
        assert seen == ["https://example.org/site/data/posts.json"]


class TestDirectoryTransport:
    @pytest.mark.anyio
    async def test_reads_files(self, tmp_path: Path) -> None:
        (tmp_path / "posts").mkdir()
        (tmp_path / "posts" / "a.md").write_text("# 你好", encoding="utf-8")

        async with ResourceLoader.from_directory(tmp_path) as loader:
            assert await loader.fetch_text("posts/a.md") == "# 你好"

    @pytest.mark.anyio
    async def test_missing_file(self, tmp_path: Path) -> None:
        async with ResourceLoader.from_directory(tmp_path) as loader:
            with pytest.raises(ResourceError, match="HTTP 404"):
                await loader.fetch_text("missing.md")

    @pytest.mark.anyio
    async def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        (tmp_path / "posts").mkdir()
        async with ResourceLoader.from_directory(tmp_path) as loader:
            with pytest.raises(ResourceError, match="HTTP 404"):
                await loader.fetch_text("posts")

    @pytest.mark.anyio
    async def test_rejects_links_escaping_root(self, tmp_path: Path) -> None:
        site = tmp_path / "site"
        site.mkdir()
        (tmp_path / "secret.txt").write_text("secret")
        (site / "link.txt").symlink_to(tmp_path / "secret.txt")

        async with ResourceLoader(transport=DirectoryTransport(site)) as loader:
            with pytest.raises(ResourceError, match="HTTP 403"):
                await loader.fetch_text("link.txt")
