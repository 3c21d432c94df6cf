"""Vanity — an HTTP responder for custom Go import paths.

Answers ``go get`` discovery requests under an import root with a
``go-import`` meta tag naming the real repository, plus an HTML redirect
to that repository for browsers.

Basic usage::

    from vanity import App, parse_mapping

    app = App(parse_mapping("rsc.io/*", "https://github.com/rsc/*"))
    app.run()

or from the shell::

    vanity rsc.io/* https://github.com/rsc/*
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Redirect",
    "RedirectConfig",
    "Request",
    "Resolution",
    "Response",
    "ServerConfig",
    "VanityError",
    "parse_mapping",
    "resolve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vanity`` fast (no kida import) for CLI startup.
    """
    if name == "App":
        from vanity.app import App

        return App

    if name in ("RedirectConfig", "ServerConfig", "parse_mapping"):
        from vanity import config as _config

        return getattr(_config, name)

    if name in ("Resolution", "resolve"):
        from vanity import resolver as _resolver

        return getattr(_resolver, name)

    if name == "Request":
        from vanity.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from vanity.http import response as _resp

        return getattr(_resp, name)

    if name in ("VanityError", "ConfigurationError", "HTTPError", "NotFound"):
        from vanity import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
