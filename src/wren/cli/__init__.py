"""Wren CLI — inspect and query a site from the terminal.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — fragment routing, post store and search for single-page content sites.",
    )
    parser.add_argument("--log-level", default="warning", help="Logging level (default: warning)")
    parser.add_argument(
        "--base-path",
        default="",
        help="Deploy sub-path prefixed to resource paths (e.g. /blog-asset)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    subparsers.add_parser("routes", help="List the site's route patterns")

    # -- wren search ------------------------------------------------------
    search_parser = subparsers.add_parser("search", help="Rank posts against a keyword")
    search_parser.add_argument("site", help="Site directory or base URL")
    search_parser.add_argument("keyword", help="Search keyword")
    search_parser.add_argument("--limit", type=int, default=None, help="Maximum results")

    # -- wren render ------------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a fragment to HTML")
    render_parser.add_argument("site", help="Site directory or base URL")
    render_parser.add_argument("fragment", help="Fragment, e.g. '#/post/hello'")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "search":
        from wren.cli._search import run_search

        run_search(args)
    elif args.command == "render":
        from wren.cli._render import run_render

        run_render(args)
