# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""boxhttp CLI: issue one Box API call and print the result envelope."""

import argparse
import asyncio
import json
import os
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import BoxError
from ..http.client import create_default_transport
from ..http.decoder import RawBytes, Structured
from ..http.models import BoxRequest, BoxResponse, ETag, RequestMethod
from ..log import setup_logging
from ..runtime import BoxClient

CLI_TEXT_TRUNCATION_BYTES = 4096


def _pair(separator: str):
    def parse(raw: str) -> tuple[str, str]:
        name, sep, value = raw.partition(separator)
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f"expected NAME{separator}VALUE, got {raw!r}")
        return name.strip(), value.strip() if separator == ":" else value

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a single request to the Box API")
    parser.add_argument("method", type=str.upper, choices=[m.value for m in RequestMethod], help="HTTP method")
    parser.add_argument("url", help="Absolute request URI")
    parser.add_argument("--token", default=os.getenv("BOX_ACCESS_TOKEN"), help="Access token (default: $BOX_ACCESS_TOKEN)")
    parser.add_argument("--header", "-H", action="append", type=_pair(":"), default=[], help="Header as NAME:VALUE")
    parser.add_argument("--param", "-p", action="append", type=_pair("="), default=[], help="Query parameter as NAME=VALUE")
    parser.add_argument("--data", "-d", action="append", type=_pair("="), default=[], help="Form field as NAME=VALUE (POST)")
    parser.add_argument("--payload", help="Raw request body")
    parser.add_argument("--etag", help="Send If-Match with this entity tag")
    parser.add_argument("--raw", action="store_true", help="Write the raw response body to stdout")
    parser.add_argument("--json", action="store_true", help="Output the result envelope as JSON")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for local proxies)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $BOX_LOG_LEVEL or WARNING)")
    return parser


def build_request(args: argparse.Namespace) -> BoxRequest:
    request = BoxRequest(args.url).with_method(args.method)
    if args.token:
        request = request.authorize(args.token)
    for name, value in args.header:
        request = request.header(name, value)
    for name, value in args.param:
        request = request.param(name, value)
    for name, value in args.data:
        request = request.payload_param(name, value)
    if args.payload is not None:
        request = request.with_payload(args.payload)
    return request.if_match(ETag(args.etag) if args.etag else None)


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    keep = max_bytes - len(suffix.encode("utf-8"))
    if keep <= 0:
        return suffix.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")
    return raw[:keep].decode("utf-8", errors="ignore") + suffix


def _envelope(response: BoxResponse[Any]) -> dict[str, Any]:
    body = response.content_string
    if body is None and isinstance(response.response_object, bytes):
        body = response.response_object.decode("utf-8", errors="replace")
    return {
        "status": response.status.value,
        "status_code": response.status_code,
        "headers": response.headers,
        "content": _truncate_text_bytes(body or "", CLI_TEXT_TRUNCATION_BYTES),
    }


def _pretty_print(response: BoxResponse[Any]) -> None:
    envelope = _envelope(response)
    print(f"[boxhttp] Status: {envelope['status']} ({envelope['status_code']})")
    content_type = envelope["headers"].get("content-type")
    if content_type:
        print(f"Content-Type: {content_type}")
    if envelope["content"]:
        print(envelope["content"])


async def _run(args: argparse.Namespace, settings: HttpSettings) -> BoxResponse[Any]:
    request = build_request(args)
    kind = RawBytes() if args.raw else Structured(Any)
    async with BoxClient(args.token or "", settings=settings, transport=create_default_transport(settings)) as client:
        return await client.execute(request, kind)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        response = asyncio.run(_run(args, settings))
    except BoxError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.raw and isinstance(response.response_object, bytes):
        sys.stdout.buffer.write(response.response_object)
        sys.stdout.flush()
    elif args.json:
        json.dump(_envelope(response), sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
    else:
        _pretty_print(response)

    return 0 if response.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
