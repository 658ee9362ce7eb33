"""``perch routes`` — list the auth routes a config produces.

Resolves an import string to an AuthConfig, builds the requested group
in a fresh router definition, and prints method, path, and endpoint.
"""

import argparse
import sys

from perch.cli._resolve import resolve_config
from perch.errors import PerchError
from perch.routing.builder import RouterDefinition


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for ``args.config``."""
    try:
        config = resolve_config(args.config)
    except (ImportError, AttributeError, TypeError, ValueError, PerchError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    definition = RouterDefinition(config=config)
    routes = definition.build_routes(args.mode, {"custom_routes": dict(args.custom_routes)})
    if not routes:
        print("No routes enabled.")
        return

    rows = [(route.http_method, route.path, route.endpoint) for route in routes]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, endpoint in rows:
        print(fmt.format(method, path, endpoint))
