"""Tests for vanity.errors and the error response pipeline."""

import logging

import pytest

from vanity.errors import ConfigurationError, HTTPError, NotFound, VanityError
from vanity.http.request import Request
from vanity.server.errors import handle_http_error, handle_internal_error


def _request(path: str = "/x") -> Request:
    return Request(
        method="GET",
        path=path,
        host="rsc.io",
        headers=((b"host", b"rsc.io"),),
        http_version="1.1",
        server=None,
        client=None,
    )


class TestHierarchy:
    def test_http_error_is_vanity_error(self) -> None:
        assert issubclass(HTTPError, VanityError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_configuration_error_is_vanity_error(self) -> None:
        assert issubclass(ConfigurationError, VanityError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad")) == "400: Bad"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"


class TestHandleHTTPError:
    def test_not_found_response(self) -> None:
        response = handle_http_error(NotFound(), _request())
        assert response.status == 404
        assert response.text == "Not Found"
        assert response.content_type.startswith("text/plain")

    def test_headers_forwarded(self) -> None:
        exc = HTTPError(status=405, detail="nope", headers=(("Allow", "GET"),))
        response = handle_http_error(exc, _request())
        assert response.header("Allow") == "GET"

    def test_empty_detail(self) -> None:
        response = handle_http_error(HTTPError(status=410), _request())
        assert response.text == "Error 410"


class TestHandleInternalError:
    def test_error_text_is_body(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="vanity.server"):
            try:
                raise ValueError("render failed")
            except ValueError as exc:
                response = handle_internal_error(exc, _request("/x86"))
        assert response.status == 500
        assert response.text == "render failed"
        assert "500 GET rsc.io/x86" in caplog.text
