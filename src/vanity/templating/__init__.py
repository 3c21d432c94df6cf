"""Templating — kida environment and the redirect page."""

from vanity.templating.integration import (
    REDIRECT_PAGE,
    compile_redirect_template,
    create_environment,
    render_redirect,
)

__all__ = [
    "REDIRECT_PAGE",
    "compile_redirect_template",
    "create_environment",
    "render_redirect",
]
