"""``wren search`` — rank a site's posts against a keyword."""

import argparse

import anyio

from wren.cli._resolve import resolve_site, start_site
from wren.formatting import format_date


def run_search(args: argparse.Namespace) -> None:
    anyio.run(_search, args)


async def _search(args: argparse.Namespace) -> None:
    site = resolve_site(args)
    await start_site(site)
    try:
        results = site.search_index.query(args.keyword, limit=args.limit)
    finally:
        await site.aclose()

    if results.is_blank:
        print("Enter a keyword to search.")
        return
    if not results:
        print(f"No posts match {args.keyword!r}.")
        return

    for result in results:
        post = result.post
        fields = ", ".join(dict.fromkeys(m.field for m in result.matches))
        print(f"{result.score:.4f}  {format_date(post.date)}  {post.id}  {post.title}  [{fields}]")
