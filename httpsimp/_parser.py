"""Parser model: content-type and status predicates plus a body decoder."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar, Union

import requests

from ._status import STATUS_2XX, StatusSpec

T = TypeVar("T")

# A decoder returns (echo value, decode error). The echo value is what gets
# reported in ResponseError.body when the parser matches but the call fails.
Decoder = Callable[[requests.Response], tuple[Any, Union[Exception, None]]]


@dataclass
class Slot(Generic[T]):
    """Caller-owned output location filled in by a parser's decoder.

    Usage:
        user = Slot()
        httpsimp.do(req, client, httpsimp.as_json(user))
        print(user.value["name"])
    """

    value: T | None = None
    is_set: bool = field(default=False, compare=False)

    def set(self, value: T) -> None:
        self.value = value
        self.is_set = True


@dataclass(frozen=True)
class ContentTypeOption:
    """Match only responses of the given media type ("" matches any)."""

    content_type: str


@dataclass(frozen=True)
class ReturnErrorOption:
    """Report an error even when the parser matches and decodes cleanly."""


ParseOption = Union[ContentTypeOption, ReturnErrorOption, StatusSpec]

_RETURN_ERROR = ReturnErrorOption()


def content_type(ctype: str) -> ContentTypeOption:
    """Restrict a parser to the given content type; pass "" to accept any type."""
    return ContentTypeOption(ctype)


def return_error() -> ReturnErrorOption:
    """Make do() / parse() raise when this parser matches. The body is still decoded."""
    return _RETURN_ERROR


@dataclass(frozen=True)
class Parser:
    """Matches and handles a requests.Response.

    Build one with the factories in this package (as_json, as_text, ...) or
    with make_parser for a custom decoder.
    """

    content_type: str
    status: StatusSpec
    return_error: bool
    decode: Decoder = field(repr=False, compare=False)


def apply_option(parser: Parser, option: ParseOption) -> Parser:
    """Return a copy of parser with a single option applied."""
    if isinstance(option, StatusSpec):
        return replace(parser, status=option)
    if isinstance(option, ContentTypeOption):
        return replace(parser, content_type=option.content_type)
    if isinstance(option, ReturnErrorOption):
        return replace(parser, return_error=True)
    raise TypeError(f"unsupported parser option: {option!r}")


def make_parser(
    default_content_type: str, options: Iterable[ParseOption], decode: Decoder
) -> Parser:
    """Build a parser wrapping the given decoder.

    The parser starts out matching 2xx responses of default_content_type
    (empty to match any type). Options are applied in order, so a later
    option overrides an earlier one touching the same field.
    """
    parser = Parser(default_content_type, STATUS_2XX, False, decode)
    for option in options:
        parser = apply_option(parser, option)
    return parser
