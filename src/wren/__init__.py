"""Wren — navigation and content resolution for single-page content sites.

Turns a URL fragment into rendered content, loads and caches article
payloads, and ranks posts with weighted fuzzy search.

Basic usage::

    import anyio
    from wren import Site, SiteConfig

    site = Site(SiteConfig(base_url="https://example.org/"))

    async def main():
        async with anyio.create_task_group() as tg:
            await tg.start(site.run)
            site.navigator.navigate("/tag/python")

Lower-level pieces are usable on their own::

    from wren import Router
    router = Router()
    router.register("/tag/:name", handler)
    router.resolve("/tag/C%2B%2B").params   # {"name": "C++"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "NavigationState",
    "Navigator",
    "NotFound",
    "Post",
    "PostStore",
    "ResourceLoader",
    "Router",
    "SearchIndex",
    "Site",
    "SiteConfig",
    "Template",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Site":
        from wren.site import Site

        return Site

    if name == "SiteConfig":
        from wren.config import SiteConfig

        return SiteConfig

    if name == "Router":
        from wren.routing.router import Router

        return Router

    if name in ("Navigator", "NavigationState"):
        from wren import navigation as _nav

        return getattr(_nav, name)

    if name in ("Post", "PostStore", "ResourceLoader"):
        from wren import content as _content

        return getattr(_content, name)

    if name == "SearchIndex":
        from wren.search.index import SearchIndex

        return SearchIndex

    if name == "Template":
        from wren.rendering.returns import Template

        return Template

    if name in ("ConfigurationError", "NotFound", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
