"""Content negotiation — maps dispatch results to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from html import escape
from typing import Any

from vanity.http.response import Redirect, Response
from vanity.resolver import Resolution
from vanity.templating.integration import render_redirect


def redirect_body(url: str) -> str:
    """Short HTML body sent along with a 302, for clients that show it."""
    return f'<a href="{escape(url, quote=True)}">Found</a>.\n'


def negotiate(value: Any, *, template: Any = None, vcs: str = "git") -> Response:
    """Convert a dispatch result to a Response.

    Dispatch order:

    1. ``Response``   -> pass through
    2. ``Redirect``   -> status (302) with Location header
    3. ``Resolution`` -> go-import page rendered via kida
    4. ``str``        -> 200, text/plain
    """
    match value:
        case Response():
            return value
        case Redirect():
            return (
                Response(body=redirect_body(value.url))
                .with_status(value.status)
                .with_header("Location", value.url)
                .with_headers(dict(value.headers))
            )
        case Resolution():
            if template is None:
                msg = "Resolution results require a compiled redirect template."
                raise TypeError(msg)
            return Response(body=render_redirect(template, value, vcs))
        case str():
            return Response(body=value, content_type="text/plain; charset=utf-8")
        case _:
            msg = f"Cannot convert {type(value).__name__} to a response."
            raise TypeError(msg)
