"""Turn parsed arguments into configuration and start the server.

Configuration errors are fatal: they are logged and the process exits
with status 1 before any socket is bound.
"""

import argparse
import logging
from pathlib import Path

from vanity.config import RedirectConfig, ServerConfig, certificate_files, parse_addr, parse_mapping
from vanity.errors import ConfigurationError

logger = logging.getLogger("vanity.cli")


def build_config(args: argparse.Namespace) -> tuple[RedirectConfig, ServerConfig]:
    """Validate arguments into the redirect mapping and server settings.

    Raises:
        ConfigurationError: If the roots or the listen address are invalid.
    """
    redirect = parse_mapping(args.import_path, args.repo_path, vcs=args.vcs)

    addr = args.addr or (":https" if args.tls else ":http")
    host, port = parse_addr(addr)

    certfile = keyfile = None
    if args.tls:
        certfile, keyfile = certificate_files(redirect)
        for path in (certfile, keyfile):
            if not Path(path).is_file():
                msg = f"cannot load TLS key pair: {path} not found"
                raise ConfigurationError(msg)

    server = ServerConfig(
        host=host,
        port=port,
        workers=args.workers,
        tls=args.tls,
        ssl_certfile=certfile,
        ssl_keyfile=keyfile,
        log_level=args.log_level,
        log_format=args.log_format,
    )
    return redirect, server


def run_server(args: argparse.Namespace) -> None:
    """Build the App from *args* and serve it with pounce."""
    try:
        redirect, server = build_config(args)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    from vanity.app import App
    from vanity.server.production import run_production_server

    scheme = "https" if server.tls else "http"
    logger.info("listening on %s://%s:%d", scheme, server.host, server.port)
    run_production_server(App(redirect), server)
