"""
Main CLI entry point for httpsimp.

Sends a single request and prints the decoded response, e.g.:

    httpsimp get https://api.example.com /users -p page=2 --expect json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from httpsimp import __version__

from .._builders import basic_auth_value, make, make_form, make_get, make_json
from .._consts import AUTHORIZATION_HEADER
from .._exceptions import RequestError
from .._http import SessionClient, do
from .._parser import Parser, Slot
from .._parsers import as_bytes, as_json, as_text, discard
from .._status import parse_status_spec
from .display import ResultDisplay
from .util import graceful_main, parse_headers, parse_pairs

METHODS = ("get", "post", "put", "patch", "delete")
EXPECT_CHOICES = ("json", "text", "bytes", "none")

USAGE_EXIT = 2


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser; each HTTP method is a subcommand."""
    parser = argparse.ArgumentParser(
        prog="httpsimp",
        description="Send an HTTP request and decode the response",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("target", help="Base URL, or a path when --base-url is set")
    common.add_argument("path", nargs="?", default="", help="Path appended to the base URL")
    common.add_argument(
        "--base-url",
        default=os.getenv("HTTPSIMP_BASE_URL"),
        help="Base URL to prepend to TARGET (or set HTTPSIMP_BASE_URL)",
    )
    common.add_argument(
        "-p", "--param", action="append", metavar="KEY=VALUE", help="Query parameter"
    )
    common.add_argument(
        "-H", "--header", action="append", metavar="NAME:VALUE", help="Request header"
    )
    common.add_argument("--user", metavar="USER:PASSWORD", help="HTTP basic auth credentials")
    body = common.add_mutually_exclusive_group()
    body.add_argument("-d", "--data", action="append", metavar="KEY=VALUE", help="Form field")
    body.add_argument("--json", dest="json_body", metavar="JSON", help="JSON request body")
    common.add_argument(
        "--expect", choices=EXPECT_CHOICES, default="json", help="How to decode the response"
    )
    common.add_argument(
        "--status", help="Accepted statuses: 2xx (default), 4xx_5xx, any, or a code like 201"
    )
    common.add_argument("--timeout", type=float, help="Request timeout in seconds")

    subparsers = parser.add_subparsers(dest="command", help="HTTP method")
    for method in METHODS:
        subparsers.add_parser(method, parents=[common], help=f"Send a {method.upper()} request")
    return parser


def build_request(args: argparse.Namespace):
    """Turn parsed arguments into a requests.Request. Raises ValueError on bad input."""
    method = args.command.upper()
    if args.base_url:
        base, path = args.base_url, args.target
    else:
        base, path = args.target, args.path

    params = parse_pairs(args.param, "=") or None
    headers = parse_headers(args.header)
    if args.user:
        username, _, password = args.user.partition(":")
        headers[AUTHORIZATION_HEADER] = basic_auth_value(username, password)

    if args.json_body is not None:
        return make_json(method, base, path, params, json.loads(args.json_body), headers)
    if args.data:
        req = make_form(method, base, path, parse_pairs(args.data, "="), headers)
        if params is not None:
            req.params = params
        return req
    if method == "GET":
        return make_get(base, path, params, headers)
    return make(method, base, path, params, b"", headers)


def build_parser(expect: str, status: str | None, result: Slot) -> Parser:
    """Pick the response parser for --expect, restricted to --status if given."""
    options = [parse_status_spec(status)] if status else []
    if expect == "json":
        return as_json(result, *options)
    if expect == "text":
        return as_text(result, *options)
    if expect == "bytes":
        return as_bytes(result, *options)
    return discard(*options)


def _real_main(argv: list[str]) -> int:
    """Parse arguments, send the request and render the outcome."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    display = ResultDisplay()
    result: Slot = Slot()
    try:
        request = build_request(args)
        response_parser = build_parser(args.expect, args.status, result)
    except ValueError as e:
        display.err_console.print(f"❌ {e}")
        return USAGE_EXIT

    with SessionClient(timeout=args.timeout) as client:
        try:
            value = do(request, client, response_parser)
        except RequestError as e:
            display.show_error(e)
            return 1

    display.show_result(value, args.expect)
    return 0


def main() -> None:
    """Console script entry point."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
