"""``simplsite run`` — development server command."""

import argparse
import sys

from simplsite.cli._resolve import resolve_site


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.site`` and serve it until interrupted.

    CLI flags override the site's configured host and port.
    """
    try:
        site = resolve_site(args.site)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from simplsite.server.dev import run_dev_server

    run_dev_server(
        site,
        args.host or site.config.host,
        args.port or site.config.port,
        reload=site.config.debug,
    )
