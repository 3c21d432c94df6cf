"""Vanity exception hierarchy.

Shared across the resolver, handler, and CLI so every module raises
and catches the same types.
"""

from dataclasses import dataclass


class VanityError(Exception):
    """Base for all vanity-specific errors."""


class ConfigurationError(VanityError):
    """Raised when the import/repo mapping is invalid.

    Only raised at startup, before the server binds a socket.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(VanityError):
    """An error that maps directly to an HTTP status code.

    Raised by the resolver or handler. The ASGI handler catches these
    and turns them into plain-text responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818  (conventional name in web frameworks)
    """404 — the request path lies outside the configured import root."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
