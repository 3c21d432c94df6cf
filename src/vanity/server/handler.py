"""ASGI handler — translates ASGI scope/messages to vanity types.

The only component that touches raw HTTP scopes directly. Converts the
scope to a typed Request, answers the ping endpoint, resolves the path,
and sends the Response back through ASGI send().
"""

from typing import Any

from vanity._internal.asgi import Receive, Scope, Send
from vanity.config import RedirectConfig
from vanity.errors import HTTPError
from vanity.http.request import Request
from vanity.http.response import Redirect
from vanity.resolver import Resolution, is_ping, resolve
from vanity.server.errors import handle_http_error, handle_internal_error
from vanity.server.negotiation import negotiate
from vanity.server.sender import send_response

PONG = "pong"


def dispatch(request: Request, config: RedirectConfig) -> Resolution | Redirect | str:
    """Decide what a request gets: pong, a redirect, or a page to render.

    Raises ``NotFound`` for paths outside the import root.
    """
    if is_ping(request.host, request.path, config):
        return PONG
    return resolve(request.host, request.path, config)


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001  (request bodies are never read)
    send: Send,
    *,
    config: RedirectConfig,
    template: Any,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = negotiate(dispatch(request, config), template=template, vcs=config.vcs)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, method=request.method)
