"""``level routes`` — list the application route table.

Prints every registered route with its methods, path template and name.
"""

import argparse

from level.routes import ROUTER


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH and NAME for the app routes."""
    rows: list[tuple[str, str, str]] = [
        (", ".join(sorted(route.methods)), route.path, route.name or "")
        for route in ROUTER.routes
    ]

    # Column widths
    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "NAME"))
    sep_len = max_methods + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for methods_str, path, name in rows:
        print(fmt.format(methods_str, path, name))
