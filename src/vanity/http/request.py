"""Immutable HTTP request.

Only the metadata the redirector looks at: method, host, and path.
The body is never read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    host: str
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, value in self.headers:
            if raw_name.lower() == key:
                return value.decode("latin-1")
        return default

    @property
    def target(self) -> str:
        """Host and path as one string — what the resolver matches against."""
        return self.host + self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope.

        The host comes from the ``Host`` header verbatim (port included,
        if the client sent one). Without a header, the server address
        from the scope is used.
        """
        headers = tuple(scope.get("headers", ()))
        server = scope.get("server")
        client = scope.get("client")

        host = ""
        for name, value in headers:
            if name.lower() == b"host":
                host = value.decode("latin-1")
                break
        else:
            if server:
                host = server[0]

        return cls(
            method=scope["method"],
            path=scope["path"],
            host=host,
            headers=headers,
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
