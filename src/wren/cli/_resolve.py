"""Build a ``Site`` from a command-line site argument.

A value starting with ``http://`` or ``https://`` is a base URL; anything
else is a local directory served through ``DirectoryTransport``.
"""

import argparse
import sys
from pathlib import Path

from wren.config import SiteConfig
from wren.content.loader import ResourceLoader
from wren.site import Site


def resolve_site(args: argparse.Namespace) -> Site:
    """Create a site for ``args.site``, exiting with status 1 if it is unusable."""
    source: str = args.site
    if source.startswith(("http://", "https://")):
        config = SiteConfig(base_url=source.rstrip("/") + "/", base_path=args.base_path, log_level=args.log_level)
        return Site(config)

    root = Path(source)
    if not root.is_dir():
        print(f"Error: {source!r} is not a directory or URL", file=sys.stderr)
        raise SystemExit(1)
    config = SiteConfig(base_path=args.base_path, log_level=args.log_level)
    return Site(config, loader=ResourceLoader.from_directory(root, config))


async def start_site(site: Site) -> None:
    """Load the site's index, exiting with status 1 on failure."""
    if not await site.start():
        await site.aclose()
        print(f"Error: could not load {site.config.index_path}", file=sys.stderr)
        raise SystemExit(1)
