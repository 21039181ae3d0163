"""Typed error hierarchy for request execution and response parsing."""

from __future__ import annotations

from typing import Any


class HttpSimpError(Exception):
    """Base exception for all httpsimp errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestError(HttpSimpError):
    """Wraps a transport or parsing failure with the request method and path."""

    def __init__(self, method: str, path: str, cause: BaseException):
        if path:
            message = f"{method} {path}: {cause}"
        else:
            message = f"{method}: {cause}"
        super().__init__(message)
        self.method = method
        self.path = path
        self.cause = cause


class ResponseError(HttpSimpError):
    """A response that no parser accepted, failed to decode, or was flagged as an error.

    Carries everything needed to inspect the failure without type-checking
    subclasses: status code, actual and wanted content types, the decoded
    body (if any) and the decoding error (if any).
    """

    def __init__(
        self,
        status_code: int,
        content_type: str,
        wanted_content_type: str,
        content_type_ok: bool,
        body: Any = None,
        decoding_error: BaseException | None = None,
    ):
        self.status_code = status_code
        self.content_type = content_type
        self.wanted_content_type = wanted_content_type
        self.content_type_ok = content_type_ok
        self.body = body
        self.decoding_error = decoding_error
        super().__init__(self._format())

    def _format(self) -> str:
        code = self.status_code
        ctype = self.content_type
        if not self.content_type_ok:
            wanted = self.wanted_content_type
            if self.decoding_error is not None:
                return (
                    f"HTTP {code}, unexpected response of type {ctype}, wanted {wanted}; "
                    f"error decoding response body: {self.decoding_error}"
                )
            if self.body is not None:
                return (
                    f"HTTP {code}, unexpected response of type {ctype}, wanted {wanted}: "
                    f"{self.body}"
                )
            return f"HTTP {code}, unexpected response type {ctype}, wanted {wanted}"

        if self.decoding_error is not None:
            return f"HTTP {code}, error decoding {ctype} response: {self.decoding_error}"
        if self.body is not None:
            return f"HTTP {code}, {ctype} response: {self.body}"
        return f"HTTP {code}, {ctype} response"

    @property
    def is_4xx(self) -> bool:
        return 400 <= self.status_code <= 499

    @property
    def is_5xx(self) -> bool:
        return 500 <= self.status_code <= 599


class ContentTypeParseError(HttpSimpError):
    """The response carried a Content-Type header that is not a valid media type."""

    def __init__(self, header: str):
        super().__init__(f"cannot parse Content-Type string {header}")
        self.header = header


class DecodeError(HttpSimpError):
    """A built-in parser could not read or decode the response body."""


def response_error(err: BaseException | None) -> ResponseError | None:
    """Return the ResponseError behind err (unwrapping RequestError), or None."""
    if isinstance(err, RequestError):
        err = err.cause
    if isinstance(err, ResponseError):
        return err
    return None


def status_code(err: BaseException | None) -> int:
    """HTTP status code carried by err, or 0 if err is not a response error."""
    e = response_error(err)
    if e is None:
        return 0
    return e.status_code


def is_4xx(err: BaseException | None) -> bool:
    code = status_code(err)
    return code != 0 and 400 <= code <= 499


def is_5xx(err: BaseException | None) -> bool:
    code = status_code(err)
    return code != 0 and 500 <= code <= 599
