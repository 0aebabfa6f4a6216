"""Development server.

Starts a pounce ASGI server with a live ``Site`` object.
"""


def run_dev_server(site: object, host: str, port: int, *, reload: bool = False) -> None:
    """Start a single-worker pounce server for ``site``.

    Pounce's ``run()`` takes an import string, but the CLI already holds
    a resolved ``Site``, so ``pounce.Server`` is driven directly with the
    ASGI callable.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload)
    Server(config, site).run()
