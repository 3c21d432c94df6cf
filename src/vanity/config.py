"""Redirector configuration.

Both config types are frozen dataclasses: built once from the command
line, immutable for the lifetime of the process, safe to share across
worker threads without locking.
"""

from dataclasses import dataclass
from pathlib import Path

from vanity.errors import ConfigurationError

WILDCARD = "/*"

# Service names accepted in place of a numeric port (":http", ":https").
_SERVICE_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """The import root → repository root mapping. Immutable after creation.

    ``wildcard`` counts the trailing ``/*`` segments that were stripped
    from both roots; each request supplies that many path elements::

        config = parse_mapping("rsc.io/*", "https://github.com/rsc/*")
        assert config == RedirectConfig("rsc.io", "https://github.com/rsc", wildcard=1)
    """

    import_root: str
    repo_root: str
    wildcard: int = 0
    vcs: str = "git"

    @property
    def ping_path(self) -> str:
        """Non-redirecting URL used to check reachability (e.g. TLS setup)."""
        return f"{self.import_root}/.ping"

    @property
    def import_host(self) -> str:
        """Host part of the import root (``rsc.io`` for ``rsc.io/x``)."""
        return self.import_root.split("/", 1)[0]


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """How the redirector is served. Forwarded to pounce."""

    host: str = "0.0.0.0"
    port: int = 80
    workers: int = 1

    # TLS (optional)
    tls: bool = False
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    # Logging
    log_level: str = "info"
    log_format: str = "text"
    lifecycle_logging: bool = True


def parse_mapping(import_path: str, repo_path: str, vcs: str = "git") -> RedirectConfig:
    """Validate command-line roots and strip their wildcard suffixes.

    Raises:
        ConfigurationError: If the repo is not a full URL, only one side
            ends in ``/*``, or the import root is empty.
    """
    if "://" not in repo_path:
        msg = "repo path must be full URL"
        raise ConfigurationError(msg)
    if import_path.endswith(WILDCARD) != repo_path.endswith(WILDCARD):
        msg = "either both import and repo must have /* or neither"
        raise ConfigurationError(msg)

    wildcard = 0
    while import_path.endswith(WILDCARD):
        wildcard += 1
        import_path = import_path.removesuffix(WILDCARD)
        repo_path = repo_path.removesuffix(WILDCARD)

    import_path = import_path.rstrip("/")
    if not import_path:
        msg = "import path must not be empty"
        raise ConfigurationError(msg)

    return RedirectConfig(
        import_root=import_path,
        repo_root=repo_path,
        wildcard=wildcard,
        vcs=vcs,
    )


def parse_addr(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host binds every interface. The port may be a number or
    one of the service names ``http``/``https``::

        parse_addr(":http")          # ("0.0.0.0", 80)
        parse_addr("127.0.0.1:8080") # ("127.0.0.1", 8080)
        parse_addr("[::1]:443")      # ("::1", 443)
    """
    host, sep, port_str = addr.rpartition(":")
    if not sep:
        msg = f"address {addr!r} is missing a port"
        raise ConfigurationError(msg)

    host = host.removeprefix("[").removesuffix("]") or "0.0.0.0"

    if port_str in _SERVICE_PORTS:
        return host, _SERVICE_PORTS[port_str]
    try:
        port = int(port_str)
    except ValueError:
        msg = f"unknown port {port_str!r} in address {addr!r}"
        raise ConfigurationError(msg) from None
    if not 0 <= port <= 65535:
        msg = f"port {port} out of range in address {addr!r}"
        raise ConfigurationError(msg)
    return host, port


def certificate_files(config: RedirectConfig, directory: str | Path = ".") -> tuple[str, str]:
    """Certificate and key paths named after the import host.

    ``rsc.io/*`` loads ``rsc.io.crt`` and ``rsc.io.key``. The certificate
    file should hold the server certificate followed by the issuing CA's.
    """
    base = Path(directory)
    host = config.import_host
    return str(base / f"{host}.crt"), str(base / f"{host}.key")
