"""``wren render`` — navigate to a fragment and print the rendered HTML."""

import argparse

import anyio

from wren.cli._resolve import resolve_site, start_site
from wren.navigation import NavigationState


def run_render(args: argparse.Namespace) -> None:
    """Print the main area for ``args.fragment``; exit 1 if it is not found."""
    anyio.run(_render, args)


async def _render(args: argparse.Namespace) -> None:
    site = resolve_site(args)
    await start_site(site)
    try:
        site.navigator.navigate(args.fragment)
        state = await site.navigator.handle_navigation()
    finally:
        await site.aclose()

    print(getattr(site.surface, "main", ""))
    if state is NavigationState.NOT_FOUND:
        raise SystemExit(1)
