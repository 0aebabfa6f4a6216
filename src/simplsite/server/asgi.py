"""ASGI adapter — translates ASGI scope/messages to ``Site`` calls.

The only module that touches raw ASGI.  HTTP scopes are served with
``Site.handle_request``; lifespan scopes are acknowledged.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from simplsite.site import Page, Site

logger = logging.getLogger("simplsite.server")

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

_ALLOWED_METHODS = ("GET", "HEAD")


def _content_type_header(content_type: str) -> bytes:
    if content_type.startswith("text/") and "charset" not in content_type:
        content_type += "; charset=utf-8"
    return content_type.encode("latin-1")


async def send_page(page: Page, send: Send, *, head: bool = False) -> None:
    """Translate a ``Page`` into ASGI send() calls."""
    body = page.content.encode("utf-8") if isinstance(page.content, str) else page.content
    await send(
        {
            "type": "http.response.start",
            "status": page.status,
            "headers": [
                (b"content-type", _content_type_header(page.content_type)),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})


async def _send_method_not_allowed(send: Send) -> None:
    body = b"Method Not Allowed"
    await send(
        {
            "type": "http.response.start",
            "status": 405,
            "headers": [
                (b"content-type", b"text/plain; charset=utf-8"),
                (b"content-length", str(len(body)).encode("latin-1")),
                (b"allow", ", ".join(_ALLOWED_METHODS).encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


async def handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge startup and shutdown; the site is built before serving."""
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


async def handle_asgi(site: Site, scope: Scope, receive: Receive, send: Send) -> None:
    """Serve one ASGI connection scope."""
    if scope["type"] == "lifespan":
        await handle_lifespan(receive, send)
        return

    if scope["type"] != "http":
        return

    method = scope.get("method", "GET")
    if method not in _ALLOWED_METHODS:
        await _send_method_not_allowed(send)
        return

    page = await site.handle_request(scope["path"])
    logger.debug("%d %s %s", page.status, method, scope["path"])
    await send_page(page, send, head=method == "HEAD")
