"""Request execution: run a request through an injected client and parse the response."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import os
from typing import Any, Protocol
from urllib.parse import urlsplit

import requests

from ._builders import Params, make_form, make_get
from ._dispatch import parse
from ._exceptions import HttpSimpError, RequestError
from ._parser import Parser

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "httpsimp-python/0.1.0"


class HTTPClient(Protocol):
    """Anything that can turn a request into a response.

    SessionClient is the default implementation; tests and callers can plug in
    their own (recorders, mocks, clients with retry policies).
    """

    def execute(self, request: requests.Request) -> requests.Response: ...


class SessionClient:
    """HTTPClient backed by a requests.Session.

    Responses are streamed, so a body is only read by the parser that matches.

    Usage:
        with SessionClient(timeout=10) as client:
            httpsimp.do(httpsimp.make_get(base, "/users"), client, httpsimp.as_json(users))
    """

    def __init__(self, session: requests.Session | None = None, timeout: float | None = None):
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if self._owns_session:
            self._session.headers["User-Agent"] = USER_AGENT
        if timeout is None:
            timeout = float(os.environ.get("HTTPSIMP_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout

    def execute(self, request: requests.Request) -> requests.Response:
        if isinstance(request, requests.PreparedRequest):
            prepared = request
        else:
            prepared = self._session.prepare_request(request)
        return self._session.send(prepared, timeout=self.timeout, stream=True)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> SessionClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def _as_client(client: HTTPClient | requests.Session) -> HTTPClient:
    if isinstance(client, requests.Session):
        return SessionClient(client)
    return client


def _request_path(request: requests.Request) -> str:
    return urlsplit(request.url or "").path


def do(request: requests.Request, client: HTTPClient | requests.Session, *parsers: Parser) -> Any:
    """Execute the request via client and handle the response with the given parsers.

    Returns the value decoded by the matching parser.

    Raises:
        RequestError: The client failed, or parsing raised; the cause is kept
            in .cause and as __cause__.
    """
    method = request.method or ""
    path = _request_path(request)

    try:
        resp = _as_client(client).execute(request)
    except (requests.RequestException, OSError) as e:
        logger.debug("%s %s failed: %s", method, path, e)
        raise RequestError(method, path, e) from e

    logger.debug("%s %s -> HTTP %d", method, path, resp.status_code)
    try:
        return parse(resp, *parsers)
    except HttpSimpError as e:
        raise RequestError(method, path, e) from e


perform = do


def get(
    base: str,
    path: str,
    params: Params | None,
    headers: Mapping[str, str] | None,
    client: HTTPClient | requests.Session,
    *parsers: Parser,
) -> Any:
    """Build a GET request, execute it and parse the response."""
    return do(make_get(base, path, params, headers), client, *parsers)


def post(
    base: str,
    path: str,
    params: Params | None,
    headers: Mapping[str, str] | None,
    client: HTTPClient | requests.Session,
    *parsers: Parser,
) -> Any:
    """Build a form-encoded POST request, execute it and parse the response."""
    return do(make_form("POST", base, path, params, headers), client, *parsers)


def put(
    base: str,
    path: str,
    params: Params | None,
    headers: Mapping[str, str] | None,
    client: HTTPClient | requests.Session,
    *parsers: Parser,
) -> Any:
    """Build a form-encoded PUT request, execute it and parse the response."""
    return do(make_form("PUT", base, path, params, headers), client, *parsers)
