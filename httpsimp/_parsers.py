"""Built-in parser factories for common response body shapes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import requests

from ._consts import CONTENT_TYPE_JSON
from ._exceptions import DecodeError
from ._parser import ParseOption, Parser, Slot, make_parser


def _read_body(resp: requests.Response) -> tuple[bytes, Exception | None]:
    try:
        return resp.content, None
    except requests.RequestException as e:
        return b"", DecodeError(f"error reading body: {e}")


def as_json(
    result: Slot | None = None,
    *options: ParseOption,
    into: Callable[[Any], Any] | None = None,
) -> Parser:
    """Match application/json responses and decode the body into result.

    into, if given, converts the decoded JSON before it is stored (for example
    a dataclass's from_dict); conversion failures count as decode errors.
    """

    def decode(resp: requests.Response) -> tuple[Any, Exception | None]:
        try:
            data = resp.json()
        # requests' JSONDecodeError is both a ValueError and a RequestException
        except ValueError as e:
            return None, e
        except requests.RequestException as e:
            return None, DecodeError(f"error reading body: {e}")
        finally:
            resp.close()

        value = data
        if into is not None:
            try:
                value = into(data)
            except (ValueError, TypeError, KeyError) as e:
                return data, e
        if result is not None:
            result.set(value)
        return data, None

    return make_parser(CONTENT_TYPE_JSON, options, decode)


def as_bytes(result: Slot[bytes] | None = None, *options: ParseOption) -> Parser:
    """Match any content type and read the entire body into result."""

    def decode(resp: requests.Response) -> tuple[Any, Exception | None]:
        try:
            body, err = _read_body(resp)
        finally:
            resp.close()
        if result is not None:
            result.set(body)
        return body, err

    return make_parser("", options, decode)


def as_text(result: Slot[str] | None = None, *options: ParseOption) -> Parser:
    """Match any content type and read the body as UTF-8 text into result."""

    def decode(resp: requests.Response) -> tuple[Any, Exception | None]:
        try:
            body, err = _read_body(resp)
        finally:
            resp.close()
        if err is not None:
            return body, err
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            return body, DecodeError("invalid utf-8 sequence encountered")
        if result is not None:
            result.set(text)
        return text, None

    return make_parser("", options, decode)


def as_raw(result: Slot[requests.Response], *options: ParseOption) -> Parser:
    """Match any content type and hand over the unread response.

    The body is left open; the caller must close the response when done.
    """

    def decode(resp: requests.Response) -> tuple[Any, Exception | None]:
        result.set(resp)
        return resp, None

    return make_parser("", options, decode)


def discard(*options: ParseOption) -> Parser:
    """Match any content type and close the body without reading it."""

    def decode(resp: requests.Response) -> tuple[Any, Exception | None]:
        resp.close()
        return None, None

    return make_parser("", options, decode)
