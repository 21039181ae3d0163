"""Tests for URL concatenation and request body builders."""

import json

import pytest

from httpsimp import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    basic_auth_value,
    encode_form,
    make,
    make_form,
    make_get,
    make_json,
    url,
)


class TestURL:
    def test_joins_with_slash(self):
        assert (
            url("http://www.example.com/api/v1", "examples/foo.json")
            == "http://www.example.com/api/v1/examples/foo.json"
        )

    def test_no_double_slash(self):
        assert url("http://x.com/api/", "/foo") == "http://x.com/api/foo"

    def test_base_only(self):
        assert url("http://x.com/api", "") == "http://x.com/api"

    def test_path_only(self):
        assert url("", "http://x.com/a/b") == "http://x.com/a/b"

    def test_params_sorted_and_space_as_percent20(self):
        assert (
            url("http://x.com", "search", {"q": "hello world", "a": ["1", "2"]})
            == "http://x.com/search?a=1&a=2&q=hello%20world"
        )

    def test_params_replace_existing_query(self):
        assert url("http://x.com/p?old=1", "", {"n": "1"}) == "http://x.com/p?n=1"

    def test_slash_in_param_is_escaped(self):
        assert url("http://x.com", "", {"path": "a/b"}) == "http://x.com?path=a%2Fb"

    def test_requires_base_or_path(self):
        with pytest.raises(ValueError):
            url("", "")


class TestBodies:
    def test_make_get(self):
        req = make_get("http://x.com", "items", {"page": "2"}, {"X-Trace": "1"})
        assert req.method == "GET"
        assert req.url == "http://x.com/items?page=2"
        assert req.headers == {"X-Trace": "1"}

    def test_make_form(self):
        req = make_form("POST", "http://x.com", "login", {"user": "ann", "note": "a b"})
        assert req.url == "http://x.com/login"
        assert req.data == b"note=a+b&user=ann"
        assert req.headers["content-type"] == CONTENT_TYPE_FORM_URLENCODED

    def test_form_keeps_explicit_content_type(self):
        req = make_form("PUT", "http://x.com", "", None, {"content-type": "text/x-form"})
        assert req.headers["Content-Type"] == "text/x-form"
        assert req.data == b""

    def test_encode_form_none_params(self):
        req = encode_form(make_get("http://x.com", ""), None)
        assert req.data == b""

    def test_make_json(self):
        req = make_json("POST", "http://x.com", "items", None, {"name": "bolt"})
        assert json.loads(req.data) == {"name": "bolt"}
        assert req.headers["Content-Type"] == CONTENT_TYPE_JSON

    def test_make_json_unserializable(self):
        with pytest.raises(TypeError):
            make_json("POST", "http://x.com", "", None, object())

    def test_make_raw_body(self):
        req = make("PATCH", "http://x.com", "blob", {"v": "1"}, b"\x00\x01")
        assert req.method == "PATCH"
        assert req.url == "http://x.com/blob?v=1"
        assert req.data == b"\x00\x01"


class TestBasicAuth:
    def test_value(self):
        assert basic_auth_value("user", "secret") == "Basic dXNlcjpzZWNyZXQ="

    def test_header_name(self):
        assert AUTHORIZATION_HEADER == "Authorization"
