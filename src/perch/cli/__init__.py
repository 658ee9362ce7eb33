"""Perch CLI — inspect the auth route table.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def _route_override(value: str) -> tuple[str, str]:
    key, sep, path = value.partition("=")
    if not sep or not key or not path:
        msg = f"expected KEY=PATH, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — auth route tables from enabled capabilities.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the auth routes a config produces")
    routes_parser.add_argument(
        "config",
        help="Import string (e.g. myapp.auth:auth_config)",
    )
    routes_parser.add_argument(
        "--mode",
        choices=("public", "protected", "all"),
        default="all",
        help="Which route group to list (default: all)",
    )
    routes_parser.add_argument(
        "--route",
        dest="custom_routes",
        type=_route_override,
        action="append",
        default=[],
        metavar="KEY=PATH",
        help="Override a path template (repeatable), e.g. sessions=/login",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
