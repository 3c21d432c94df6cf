"""The redirector application.

Built once from an immutable RedirectConfig; no setup phase, no freeze
step. Everything it holds is read-only after ``__init__``, so the same
App can serve requests from any number of worker threads.
"""

import logging
from typing import Any

from kida import Environment

from vanity._internal.asgi import Receive, Scope, Send
from vanity.config import RedirectConfig, ServerConfig
from vanity.server.handler import handle_request
from vanity.templating.integration import compile_redirect_template, create_environment

logger = logging.getLogger("vanity.server")


class App:
    """ASGI application answering go-import discovery requests.

    Usage::

        from vanity import App, parse_mapping

        app = App(parse_mapping("9fans.net/go", "https://github.com/9fans/go"))
        app.run(ServerConfig(port=8080))
    """

    __slots__ = ("_kida_env", "_template", "config")

    def __init__(self, config: RedirectConfig, *, kida_env: Environment | None = None) -> None:
        self.config = config
        self._kida_env = kida_env if kida_env is not None else create_environment()
        self._template: Any = compile_redirect_template(self._kida_env)

    def __repr__(self) -> str:
        cfg = self.config
        return f"App({cfg.import_root!r} -> {cfg.repo_root!r}, wildcard={cfg.wildcard}, vcs={cfg.vcs!r})"

    # -- Server --

    def run(self, server: ServerConfig | None = None) -> None:
        """Start serving with pounce (blocks until shutdown)."""
        from vanity.server.production import run_production_server

        run_production_server(self, server or ServerConfig())

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            config=self.config,
            template=self._template,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        There is nothing to open or close; startup only announces the
        mapping being served.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                cfg = self.config
                logger.info(
                    "serving %s -> %s (%s, wildcard=%d)",
                    cfg.import_root,
                    cfg.repo_root,
                    cfg.vcs,
                    cfg.wildcard,
                )
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
