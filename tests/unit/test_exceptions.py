"""Tests for the error hierarchy, messages and inspection helpers."""

import pytest
import requests

from httpsimp import (
    ContentTypeParseError,
    DecodeError,
    HttpSimpError,
    RequestError,
    ResponseError,
    is_4xx,
    is_5xx,
    response_error,
    status_code,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        for exc_cls in [RequestError, ResponseError, ContentTypeParseError, DecodeError]:
            assert issubclass(exc_cls, HttpSimpError)

    def test_base_carries_message(self):
        err = HttpSimpError("boom")
        assert str(err) == "boom"
        assert err.message == "boom"


class TestRequestError:
    def test_message_with_path(self):
        err = RequestError("GET", "/v1/items", ValueError("bad"))
        assert str(err) == "GET /v1/items: bad"
        assert err.method == "GET"
        assert err.path == "/v1/items"

    def test_message_without_path(self):
        assert str(RequestError("POST", "", ValueError("bad"))) == "POST: bad"


class TestResponseErrorMessages:
    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            (
                {"content_type_ok": False},
                "HTTP 200, unexpected response type text/html, wanted application/json",
            ),
            (
                {"content_type_ok": False, "body": "<p>"},
                "HTTP 200, unexpected response of type text/html, wanted application/json: <p>",
            ),
            (
                {"content_type_ok": False, "decoding_error": ValueError("eof")},
                "HTTP 200, unexpected response of type text/html, wanted application/json; "
                "error decoding response body: eof",
            ),
            ({"content_type_ok": True}, "HTTP 200, text/html response"),
            ({"content_type_ok": True, "body": "<p>"}, "HTTP 200, text/html response: <p>"),
            (
                {"content_type_ok": True, "decoding_error": ValueError("eof")},
                "HTTP 200, error decoding text/html response: eof",
            ),
        ],
    )
    def test_formats(self, kwargs, expected):
        err = ResponseError(200, "text/html", "application/json", **kwargs)
        assert str(err) == expected
        assert err.message == expected

    def test_dict_body(self):
        err = ResponseError(400, "application/json", "application/json", True, {"foo": 42})
        assert str(err) == "HTTP 400, application/json response: {'foo': 42}"


class TestInspection:
    def test_unwraps_request_error(self):
        inner = ResponseError(404, "application/json", "", True)
        err = RequestError("GET", "/x", inner)
        assert response_error(err) is inner
        assert status_code(err) == 404
        assert is_4xx(err)
        assert not is_5xx(err)

    def test_bare_response_error(self):
        err = ResponseError(503, "text/plain", "", True)
        assert status_code(err) == 503
        assert is_5xx(err)
        assert not is_4xx(err)

    def test_transport_error_is_neutral(self):
        err = RequestError("GET", "/x", requests.ConnectionError("refused"))
        assert response_error(err) is None
        assert status_code(err) == 0
        assert not is_4xx(err)
        assert not is_5xx(err)

    def test_none_and_foreign_errors(self):
        assert status_code(None) == 0
        assert status_code(KeyError("k")) == 0

    def test_properties(self):
        assert ResponseError(418, "", "", True).is_4xx
        assert not ResponseError(200, "", "", True).is_4xx
        assert ResponseError(500, "", "", True).is_5xx
