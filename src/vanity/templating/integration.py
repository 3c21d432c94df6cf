"""Kida environment setup and the redirect page template.

The environment and the compiled page are created once when the App is
constructed and shared read-only by every request.
"""

from typing import Any

from kida import Environment

from vanity.resolver import Resolution

REDIRECT_PAGE = """\
<!DOCTYPE html>
<html>
<head>
<meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
<meta name="go-import" content="{{ import_root }} {{ vcs }} {{ repo_root }}">
<meta http-equiv="refresh" content="0; url={{ repo_root }}">
</head>
<body>
Redirecting to <a href="{{ repo_root }}">{{ repo_root }}</a>...
</body>
</html>
"""


def create_environment() -> Environment:
    """Create the kida Environment used for the redirect page.

    Autoescaping is always on: wildcard elements come straight from the
    request path and end up inside attribute values.
    """
    return Environment(
        autoescape=True,
        auto_reload=False,
    )


def compile_redirect_template(env: Environment, source: str = REDIRECT_PAGE) -> Any:
    """Parse the redirect page once; the result is reused for every request."""
    return env.from_string(source)


def render_redirect(template: Any, resolution: Resolution, vcs: str) -> str:
    """Render the go-import page for a resolved request."""
    return template.render(
        {
            "import_root": resolution.import_root,
            "vcs": vcs,
            "repo_root": resolution.repo_root,
        }
    )
