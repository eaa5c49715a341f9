# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed RequestHandler implementation."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from ..config import HttpSettings, load_http_settings
from ..converter import Converter, JsonConverter
from ..errors import categorize_exception, error_category_to_reason
from .client import RequestHandler
from .decoder import ResultKind, Structured, decode_response, is_streaming
from .headers import AUTHORIZATION, CONTENT_TYPE, FORM_URLENCODED, USER_AGENT, bearer, collapse_headers, has_header
from .models import BoxMultiPartRequest, BoxRequest, BoxResponse, RequestMethod
from .multipart import encode_multipart

logger = logging.getLogger(__name__)


def _request_url(request: BoxRequest) -> str:
    url = request.absolute_uri
    query = request.query_string()
    if not query:
        return url
    return f"{url}{'&' if '?' in url else '?'}{query}"


class HttpxRequestHandler(RequestHandler):
    """
    Asynchronous handler over a shared ``httpx.AsyncClient``.

    One send per call, no retries. Non-2xx answers come back as ``ResponseStatus.ERROR``;
    transport exceptions propagate unchanged.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        settings: HttpSettings | None = None,
        converter: Converter | None = None,
    ):
        self._client = client
        self.settings = settings or load_http_settings()
        self.converter: Converter = converter or JsonConverter()

    def _headers(self, request: BoxRequest) -> dict[str, str]:
        headers = collapse_headers(request.headers)
        if request.authorization is not None:
            headers = {k: v for k, v in headers.items() if k.lower() != AUTHORIZATION.lower()}
            headers[AUTHORIZATION] = bearer(request.authorization)
        if not has_header(headers.items(), USER_AGENT):
            headers[USER_AGENT] = self.settings.user_agent
        return headers

    @staticmethod
    def _wire_headers(headers: dict[str, str]) -> dict[str, bytes]:
        # Values go out as UTF-8 bytes so non-ASCII values pass through instead of failing in httpx.
        return {name: value.encode("utf-8") for name, value in headers.items()}

    def build_request(self, request: BoxRequest) -> httpx.Request:
        """
        Translate a descriptor into the wire request without sending it.

        Raises MissingFilePart for an upload without a file.
        """
        url = _request_url(request)
        headers = self._headers(request)

        if isinstance(request, BoxMultiPartRequest):
            encoded = encode_multipart(request)
            # httpx only writes its boundary into Content-Type when the header is absent.
            headers = {k: v for k, v in headers.items() if k.lower() != CONTENT_TYPE.lower()}
            return self._client.build_request(
                "POST", url, headers=self._wire_headers(headers), files=encoded.to_httpx_files()
            )

        content: str | bytes | None
        method = request.method
        if method is RequestMethod.GET:
            content = None
        elif method is RequestMethod.POST:
            if request.payload is not None:
                content = request.payload
            else:
                content = urlencode(list(request.payload_parameters))
                if not has_header(headers.items(), CONTENT_TYPE):
                    headers[CONTENT_TYPE] = FORM_URLENCODED
        elif method in (RequestMethod.PUT, RequestMethod.DELETE):
            # The Box API expects a body on PUT and DELETE; fall back to the parameter string.
            content = request.payload if request.payload is not None else request.query_string()
        else:  # pragma: no cover - RequestMethod is closed
            raise ValueError(f"Unsupported HTTP method: {method}")

        if isinstance(content, str):
            content = content.encode("utf-8")
        return self._client.build_request(method.value, url, headers=self._wire_headers(headers), content=content)

    async def execute(self, request: BoxRequest, kind: ResultKind = Structured(dict)) -> BoxResponse[Any]:
        http_request = self.build_request(request)
        logger.debug("Request: %s %s", http_request.method, request.absolute_uri)

        try:
            response = await self._client.send(http_request, stream=True)
        except httpx.TransportError as exc:
            category = categorize_exception(exc)
            logger.warning(
                "%s for %s %s: %s",
                error_category_to_reason(category),
                http_request.method,
                request.absolute_uri,
                exc,
            )
            raise

        logger.debug("Response: %s %s -> %s", http_request.method, request.absolute_uri, response.status_code)
        if is_streaming(kind):
            return await decode_response(response, kind, self.converter)
        try:
            return await decode_response(response, kind, self.converter)
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()
