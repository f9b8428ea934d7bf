"""``level parse`` — resolve a URL and print its canonical form.

Exits with status 1 when the URL matches no route.
"""

import argparse
import sys
from dataclasses import fields

from level.routes import Posts, parse, to_string


def run_parse(args: argparse.Namespace) -> None:
    """Print the route name, its fields, and the canonical URL."""
    route = parse(args.url)
    if route is None:
        print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"route: {type(route).__name__}")
    if isinstance(route, Posts):
        params = route.params
        print(f"space_slug: {params.space_slug}")
        print(f"view: {params.view.value}")
        print(f"state: {params.state.value}")
        print(f"inbox_state: {params.inbox_state.value}")
        print(f"last_activity: {params.last_activity.value}")
    else:
        for field in fields(route):
            print(f"{field.name}: {getattr(route, field.name)}")
    print(f"canonical: {to_string(route)}")
