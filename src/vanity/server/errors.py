"""Error handling pipeline.

Maps HTTPError exceptions and unexpected failures to plain-text
Response objects.
"""

import logging

from vanity.errors import HTTPError
from vanity.http.request import Request
from vanity.http.response import Response

logger = logging.getLogger("vanity.server")

_PLAIN = "text/plain; charset=utf-8"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError (usually NotFound) to a Response."""
    logger.debug("%d %s %s%s — %s", exc.status, request.method, request.host, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    resp = Response(body=detail, content_type=_PLAIN).with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Answer unexpected exceptions (e.g. a failed render) with 500 and the error text."""
    logger.exception("500 %s %s%s", request.method, request.host, request.path)
    return Response(body=str(exc), status=500, content_type=_PLAIN)
