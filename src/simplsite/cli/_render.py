"""``simplsite render`` — render a single request path to stdout."""

import argparse
import sys

import anyio

from simplsite.cli._resolve import resolve_site


def render_page(args: argparse.Namespace) -> None:
    """Render ``args.path`` and write the body to stdout.

    Exits 0 for a 200 response and 1 otherwise.
    """
    try:
        site = resolve_site(args.site)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    page = anyio.run(site.handle_request, args.path)

    if isinstance(page.content, bytes):
        sys.stdout.buffer.write(page.content)
    else:
        sys.stdout.write(page.content)
    sys.stdout.flush()

    if page.status != 200:
        print(f"{page.status} {args.path}", file=sys.stderr)
        raise SystemExit(1)
