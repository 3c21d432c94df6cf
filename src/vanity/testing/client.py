"""Async test client for the redirector.

Uses the same Response type as production. Sends requests through the
ASGI interface directly — no sockets involved.
"""

from __future__ import annotations

from typing import Any

from vanity.app import App
from vanity.http.response import Response


class TestClient:
    """Async test client for vanity applications.

    The ``Host`` header matters to the redirector, so every request takes
    a full ``host/path`` target::

        async with TestClient(app) as client:
            response = await client.get("rsc.io/x86/x86asm")
            assert response.status == 200
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, target: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request for ``host/path``."""
        return await self.request("GET", target, headers=headers)

    async def head(self, target: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a HEAD request for ``host/path``."""
        return await self.request("HEAD", target, headers=headers)

    async def request(
        self,
        method: str,
        target: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app.

        *target* is split at the first ``/`` into the Host header and the
        path (``"rsc.io"`` alone requests ``/``).
        """
        host, slash, path = target.partition("/")
        path = slash + path if slash else "/"
        if "?" in path:
            path, query_string = path.split("?", 1)
        else:
            query_string = ""

        # Build raw ASGI headers
        merged = {"host": host, **(headers or {})}
        raw_headers: list[tuple[bytes, bytes]] = [
            (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in merged.items()
        ]

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path,
            "raw_path": path.encode("utf-8"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": b"", "more_body": False}
            return {"type": "http.disconnect"}

        response_status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        content_type = "text/html; charset=utf-8"
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name_str = name_b.decode("latin-1")
            value_str = value_b.decode("latin-1")
            if name_str == "content-type":
                content_type = value_str
            else:
                extra_headers.append((name_str, value_str))

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
