"""Request builders: URL concatenation, form/JSON bodies and basic auth."""

from __future__ import annotations

import base64
from collections.abc import Iterable, Mapping
import json
from typing import Any, Union
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import requests
from requests.structures import CaseInsensitiveDict

from ._consts import CONTENT_TYPE_FORM_URLENCODED, CONTENT_TYPE_JSON

# Query parameters: a value may be a single string or a list of strings.
Params = Mapping[str, Union[str, Iterable[str]]]


def _param_pairs(params: Params) -> list[tuple[str, str]]:
    """Flatten params into (key, value) pairs, sorted by key."""
    pairs = []
    for key in sorted(params):
        values = params[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend((key, v) for v in values)
    return pairs


def url(base: str, path: str, params: Params | None = None) -> str:
    """Concatenate base and path and optionally replace the query string with params.

    At least one of base and path must be non-empty. A "/" is inserted between
    them when path does not start with one. Spaces in params are encoded as
    %20, not "+".
    """
    if not base and not path:
        raise ValueError("url: base or path is required")

    if not base:
        parts = urlsplit(path)
    else:
        parts = urlsplit(base)
        if path:
            if not path.startswith("/"):
                path = "/" + path
            parts = parts._replace(path=parts.path.rstrip("/") + path)

    if params is not None:
        parts = parts._replace(query=urlencode(_param_pairs(params), quote_via=quote))

    return urlunsplit(parts)


def _ensure_content_type(req: requests.Request, ctype: str) -> None:
    headers = CaseInsensitiveDict(req.headers or {})
    headers.setdefault("Content-Type", ctype)
    req.headers = headers


def set_body(req: requests.Request, data: bytes) -> requests.Request:
    """Set the request body to the given bytes."""
    req.data = data
    return req


def encode_form(req: requests.Request, params: Params | None) -> requests.Request:
    """Encode params as application/x-www-form-urlencoded into the request body.

    Content-Type is set only if the request does not carry one already.
    """
    set_body(req, urlencode(_param_pairs(params or {})).encode("ascii"))
    _ensure_content_type(req, CONTENT_TYPE_FORM_URLENCODED)
    return req


def encode_json_body(req: requests.Request, obj: Any) -> requests.Request:
    """Encode obj as JSON into the request body. Raises TypeError if obj is not serializable."""
    set_body(req, json.dumps(obj).encode("utf-8"))
    _ensure_content_type(req, CONTENT_TYPE_JSON)
    return req


def make_get(
    base: str,
    path: str,
    params: Params | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.Request:
    """Build a GET request with params encoded into the query string."""
    return requests.Request("GET", url(base, path, params), headers=dict(headers or {}))


def make_form(
    method: str,
    base: str,
    path: str,
    params: Params | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.Request:
    """Build a POST/PUT/etc request whose body holds params, form-encoded."""
    req = requests.Request(method, url(base, path), headers=dict(headers or {}))
    return encode_form(req, params)


def make_json(
    method: str,
    base: str,
    path: str,
    params: Params | None,
    obj: Any,
    headers: Mapping[str, str] | None = None,
) -> requests.Request:
    """Build a POST/PUT/etc request whose body holds obj encoded as JSON."""
    req = requests.Request(method, url(base, path, params), headers=dict(headers or {}))
    return encode_json_body(req, obj)


def make(
    method: str,
    base: str,
    path: str,
    params: Params | None,
    body: bytes,
    headers: Mapping[str, str] | None = None,
) -> requests.Request:
    """Build a request with an arbitrary body."""
    req = requests.Request(method, url(base, path, params), headers=dict(headers or {}))
    return set_body(req, body)


def basic_auth_value(username: str, password: str) -> str:
    """Authorization header value for HTTP Basic auth: "Basic " + base64(user:password)."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"
