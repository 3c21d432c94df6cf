"""Production server.

Starts a pounce ASGI server with the live redirector App object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vanity.app import App
    from vanity.config import ServerConfig


def run_production_server(app: App, server: ServerConfig) -> None:
    """Run the redirector under pounce.

    Pounce's ``run()`` takes an import string, but the redirector is built
    from command-line arguments at startup, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Args:
        app: Redirector App instance.
        server: Bind address, worker count, TLS files, and logging settings.

    Example:
        >>> from vanity import App, ServerConfig, parse_mapping
        >>> from vanity.server.production import run_production_server
        >>> app = App(parse_mapping("rsc.io/*", "https://github.com/rsc/*"))
        >>> run_production_server(app, ServerConfig(port=8080))
    """
    from pounce.config import ServerConfig as PounceConfig
    from pounce.server import Server

    config = PounceConfig(
        host=server.host,
        port=server.port,
        workers=server.workers,
        lifecycle_logging=server.lifecycle_logging,
        log_format=server.log_format,
        log_level=server.log_level,
        ssl_certfile=server.ssl_certfile,
        ssl_keyfile=server.ssl_keyfile,
        # The redirector answers every path under its root itself
        health_check_path=None,
    )

    Server(config, app).run()
