"""
httpsimp - outgoing HTTP requests without the boilerplate

Build a request, run it through any client and declare how each kind of
response should be handled:

    user = httpsimp.Slot()
    problem = httpsimp.Slot()
    httpsimp.do(
        httpsimp.make_get(BASE_URL, "/users/1"),
        httpsimp.SessionClient(),
        httpsimp.as_json(user),
        httpsimp.as_json(problem, httpsimp.STATUS_4XX_5XX, httpsimp.return_error()),
    )

The first parser whose status and content type predicates accept the
response wins. Unhandled 4xx/5xx responses raise ResponseError with the
decoded body attached.
"""

__version__ = "0.1.0"

from ._builders import (
    basic_auth_value,
    encode_form,
    encode_json_body,
    make,
    make_form,
    make_get,
    make_json,
    set_body,
    url,
)
from ._consts import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT_PLAIN,
)
from ._dispatch import FALLBACK_PARSERS, media_type, parse, parse_media_type, try_match
from ._exceptions import (
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
from ._http import HTTPClient, SessionClient, do, get, perform, post, put
from ._parser import (
    ContentTypeOption,
    ParseOption,
    Parser,
    ReturnErrorOption,
    Slot,
    content_type,
    make_parser,
    return_error,
)
from ._parsers import as_bytes, as_json, as_raw, as_text, discard
from ._status import (
    STATUS_1XX,
    STATUS_2XX,
    STATUS_3XX,
    STATUS_4XX,
    STATUS_4XX_5XX,
    STATUS_5XX,
    STATUS_ACCEPTED,
    STATUS_ANY,
    STATUS_CREATED,
    STATUS_FORBIDDEN,
    STATUS_NO_CONTENT,
    STATUS_NONE,
    STATUS_NOT_FOUND,
    STATUS_OK,
    STATUS_PARTIAL_CONTENT,
    STATUS_UNAUTHORIZED,
    StatusSpec,
)

__all__ = [
    # Constants
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_FORM_URLENCODED",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_TEXT_PLAIN",
    "FALLBACK_PARSERS",
    "STATUS_1XX",
    "STATUS_2XX",
    "STATUS_3XX",
    "STATUS_4XX",
    "STATUS_4XX_5XX",
    "STATUS_5XX",
    "STATUS_ACCEPTED",
    "STATUS_ANY",
    "STATUS_CREATED",
    "STATUS_FORBIDDEN",
    "STATUS_NONE",
    "STATUS_NOT_FOUND",
    "STATUS_NO_CONTENT",
    "STATUS_OK",
    "STATUS_PARTIAL_CONTENT",
    "STATUS_UNAUTHORIZED",
    # Errors
    "ContentTypeParseError",
    "DecodeError",
    "HttpSimpError",
    "RequestError",
    "ResponseError",
    "is_4xx",
    "is_5xx",
    "response_error",
    "status_code",
    # Parsers
    "ContentTypeOption",
    "ParseOption",
    "Parser",
    "ReturnErrorOption",
    "Slot",
    "StatusSpec",
    "as_bytes",
    "as_json",
    "as_raw",
    "as_text",
    "content_type",
    "discard",
    "make_parser",
    "media_type",
    "parse",
    "parse_media_type",
    "return_error",
    "try_match",
    # Requests
    "HTTPClient",
    "SessionClient",
    "basic_auth_value",
    "do",
    "encode_form",
    "encode_json_body",
    "get",
    "make",
    "make_form",
    "make_get",
    "make_json",
    "perform",
    "post",
    "put",
    "set_body",
    "url",
]
