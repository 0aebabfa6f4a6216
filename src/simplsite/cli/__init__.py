"""Simplsite CLI — render single pages or run a development server.

Entry point registered as ``simplsite`` in ``pyproject.toml``::

    [project.scripts]
    simplsite = "simplsite.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``simplsite`` command."""
    parser = argparse.ArgumentParser(
        prog="simplsite",
        description="Simplsite — markdown content rendered through plugins and templates.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- simplsite render -------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render one request path to stdout")
    render_parser.add_argument("site", help="Import string (e.g. mysite:site)")
    render_parser.add_argument("path", nargs="?", default="/", help="Request path (default: /)")

    # -- simplsite run ----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start a development server")
    run_parser.add_argument("site", help="Import string (e.g. mysite:site)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        from simplsite.cli._render import render_page

        render_page(args)
    elif args.command == "run":
        from simplsite.cli._run import run_server

        run_server(args)
