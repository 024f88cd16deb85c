"""``wren routes`` — list the site's route patterns in match order."""

import argparse

from wren.site import Site


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, KIND and HANDLER."""
    site = Site()
    rows: list[tuple[str, str, str]] = []
    for route in site.router.routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.pattern, "static" if route.is_static else "param", handler_name))

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    fmt = f"{{:<{max_pattern}}}  {{:<6}}  {{}}"
    print(fmt.format("PATTERN", "KIND", "HANDLER"))
    print("-" * min(max_pattern + 8 + max(len(r[2]) for r in rows), 80))
    for pattern, kind, handler_name in rows:
        print(fmt.format(pattern, kind, handler_name))
