"""Resource fetching over httpx.

``ResourceLoader`` owns one ``httpx.AsyncClient`` for the session and
turns every transport failure or non-2xx status into ``ResourceError``.
``DirectoryTransport`` serves resources from a local directory so the
same loader works for a checked-out site.
"""

import json
import logging
from pathlib import Path
from types import TracebackType
from typing import Any

import anyio
import httpx

from wren.config import SiteConfig
from wren.errors import ResourceError

logger = logging.getLogger("wren.content")

LOCAL_BASE_URL = "http://site.local/"


class DirectoryTransport(httpx.AsyncBaseTransport):
    """Serve ``GET`` requests from files under *root*."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        target = (self.root / request.url.path.lstrip("/")).resolve()
        if not target.is_relative_to(self.root):
            return httpx.Response(403, request=request)
        path = anyio.Path(target)
        if not await path.is_file():
            return httpx.Response(404, request=request)
        return httpx.Response(200, content=await path.read_bytes(), request=request)


class ResourceLoader:
    """Fetch site resources relative to a base URL.

    Usage::

        async with ResourceLoader(config) as loader:
            data = await loader.fetch_json("data/posts.json")
    """

    __slots__ = ("_client", "config")

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or SiteConfig()
        base_url = self.config.base_url
        if not base_url and transport is not None:
            base_url = LOCAL_BASE_URL
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=self.config.request_timeout,
        )

    @classmethod
    def from_directory(cls, root: str | Path, config: SiteConfig | None = None) -> "ResourceLoader":
        """Create a loader that reads resources from a local directory."""
        return cls(config, transport=DirectoryTransport(root))

    async def __aenter__(self) -> "ResourceLoader":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_text(self, path: str) -> str:
        """Fetch *path* and return its body as text.

        Raises ``ResourceError`` on transport failure or non-2xx status.
        """
        url = self.config.resource_path(path)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            msg = f"Failed to fetch {url!r}: {exc}"
            raise ResourceError(msg) from exc

        if not response.is_success:
            msg = f"Failed to fetch {url!r}: HTTP {response.status_code}"
            raise ResourceError(msg)

        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return response.text

    async def fetch_json(self, path: str) -> Any:
        """Fetch *path* and decode it as JSON.

        Raises ``ResourceError`` on transport failure, non-2xx status, or
        a body that is not valid JSON.
        """
        text = await self.fetch_text(path)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path!r}: {exc}"
            raise ResourceError(msg) from exc
