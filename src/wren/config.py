"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(base_path="/blog-asset", site_title="Notes")
    """

    # Resources
    base_url: str = ""
    base_path: str = ""  # Deploy sub-path, e.g. "/blog-asset" on a project page
    index_path: str = "data/posts.json"
    request_timeout: float | None = None

    # Presentation
    site_title: str = "My Blog"
    template_dir: str | Path | None = None  # Searched before the bundled templates
    autoescape: bool = True
    markdown_highlight: bool = False

    # Search
    search_threshold: float = 0.3
    search_min_match_length: int = 2
    search_debounce: float = 0.2  # seconds

    # Navigation
    discard_stale_navigations: bool = True

    # Logging
    log_level: str = "info"

    def resource_path(self, path: str) -> str:
        """Return *path* relative to the deploy sub-path.

        A leading slash is dropped so the path stays relative to
        ``base_url``::

            SiteConfig().resource_path("/data/posts.json")        -> "data/posts.json"
            SiteConfig(base_path="/blog").resource_path("a.md")   -> "/blog/a.md"
        """
        clean = path.removeprefix("/")
        if self.base_path:
            return f"{self.base_path.rstrip('/')}/{clean}"
        return clean
