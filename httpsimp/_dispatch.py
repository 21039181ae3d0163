"""Response dispatch: pick the first parser that accepts a response and run it."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from ._consts import CONTENT_TYPE_TEXT_PLAIN
from ._exceptions import ContentTypeParseError, HttpSimpError, ResponseError
from ._parser import Parser, content_type, return_error
from ._parsers import as_json, as_text, discard
from ._status import STATUS_4XX_5XX, STATUS_ANY

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_MEDIA_TYPE_RE = re.compile(rf"\s*({_TOKEN}(?:/{_TOKEN})?)\s*")
_PARAMS_RE = re.compile(rf"(?:;\s*(?:{_TOKEN}\s*=\s*(?:{_TOKEN}|{_QUOTED})\s*)?)*")

# Tried in order when none of the caller's parsers match. Every entry reports
# an error; the last one accepts any response so resolution always ends.
FALLBACK_PARSERS: tuple[Parser, ...] = (
    as_json(None, STATUS_4XX_5XX, return_error()),
    as_text(None, STATUS_4XX_5XX, content_type(CONTENT_TYPE_TEXT_PLAIN), return_error()),
    discard(STATUS_ANY, return_error()),
)


def parse_media_type(header: str) -> str:
    """Return the lower-cased media type of a Content-Type value, without parameters.

    Raises ContentTypeParseError if the value is not a well-formed media type.
    """
    m = _MEDIA_TYPE_RE.match(header)
    if m is None or _PARAMS_RE.fullmatch(header, m.end()) is None:
        raise ContentTypeParseError(header)
    return m.group(1).lower()


def media_type(resp: requests.Response) -> str:
    """Media type of the response, or "" when it has no Content-Type header."""
    header = resp.headers.get("Content-Type")
    if header is None:
        return ""
    return parse_media_type(header)


def _match(resp: requests.Response, parser: Parser) -> tuple[bool, HttpSimpError | None, Any]:
    try:
        ctype = media_type(resp)
    except ContentTypeParseError as e:
        return False, e, None

    wanted = parser.content_type
    ctype_ok = wanted == "" or ctype == wanted.lower()
    status_ok = parser.status.matches(resp.status_code)
    if not ctype_ok or not status_ok:
        # The body is left untouched for the next candidate.
        return (
            False,
            ResponseError(resp.status_code, ctype, wanted, ctype_ok),
            None,
        )

    body, body_err = parser.decode(resp)
    if parser.return_error or body_err is not None:
        return True, ResponseError(resp.status_code, ctype, wanted, True, body, body_err), body
    return True, None, body


def try_match(resp: requests.Response, parser: Parser) -> tuple[bool, HttpSimpError | None]:
    """Check a single parser against the response and run its decoder if it applies.

    Returns (matched, error). A parser can match and still produce an error,
    either because decoding failed or because it was built with return_error().
    """
    matched, err, _ = _match(resp, parser)
    return matched, err


def parse(resp: requests.Response, *parsers: Parser) -> Any:
    """Handle the response with the first matching parser and return its decoded value.

    If none of the given parsers match, FALLBACK_PARSERS are tried; all of
    them raise. When only the catch-all fallback applies, the diagnostic of
    the first parser that did not match is raised instead of the generic one.

    Raises:
        ResponseError: No parser matched, decoding failed, or the matching
            parser was built with return_error().
        ContentTypeParseError: The Content-Type header is malformed and no
            more specific diagnostic is available.
    """
    first_error: HttpSimpError | None = None

    for i, parser in enumerate(parsers):
        matched, err, body = _match(resp, parser)
        if matched:
            if err is not None:
                raise err
            return body
        logger.debug("Parser %d (%r) did not match: %s", i, parser, err)
        if first_error is None:
            first_error = err

    last = len(FALLBACK_PARSERS) - 1
    for i, parser in enumerate(FALLBACK_PARSERS):
        matched, err, body = _match(resp, parser)
        if matched:
            logger.debug("Fallback parser %d matched HTTP %d", i, resp.status_code)
            if i == last and err is not None and first_error is not None:
                err = first_error
            if err is not None:
                raise err
            return body

    # Only reachable when the Content-Type header cannot be parsed at all.
    resp.close()
    raise first_error or err
