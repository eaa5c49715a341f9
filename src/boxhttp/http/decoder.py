# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response decoding.

Callers pick how a body is materialized with one of three result kinds:

- ``RawBytes()``: the whole body, buffered, as ``bytes``.
- ``ByteStream()``: a live ``ResponseStream``; nothing is read before it is returned.
- ``Structured(model)``: the body text is kept verbatim in ``content_string`` and handed to
  the converter to build ``model``.

The kind alone decides; the response ``Content-Type`` is never consulted.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

import httpx

from ..converter import Converter
from .headers import normalize_headers
from .models import BoxResponse


T = TypeVar("T")


@dataclass(frozen=True)
class RawBytes:
    pass


@dataclass(frozen=True)
class ByteStream:
    pass


@dataclass(frozen=True)
class Structured(Generic[T]):
    model: Any


ResultKind = Union[RawBytes, ByteStream, Structured[Any]]


def is_streaming(kind: ResultKind) -> bool:
    return isinstance(kind, ByteStream)


class ResponseStream:
    """
    Unread body of a streamed response.

    The caller owns it: read with ``aread``/``aiter_bytes`` and release with ``aclose``
    (or ``async with``).
    """

    def __init__(self, response: httpx.Response):
        self._response = response
        self.bytes_consumed = 0

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def is_closed(self) -> bool:
        return self._response.is_closed

    async def aiter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        async for chunk in self._response.aiter_bytes(chunk_size):
            self.bytes_consumed += len(chunk)
            yield chunk

    async def aread(self) -> bytes:
        chunks = [chunk async for chunk in self.aiter_bytes()]
        return b"".join(chunks)

    async def aclose(self) -> None:
        await self._response.aclose()

    async def __aenter__(self) -> ResponseStream:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()


def _body_text(response: httpx.Response) -> str:
    try:
        return response.text
    except LookupError:
        return response.content.decode("utf-8", errors="replace")


async def decode_response(response: httpx.Response, kind: ResultKind, converter: Converter) -> BoxResponse[Any]:
    """Build the envelope for ``response``; buffered kinds read the full body first."""
    result: BoxResponse[Any] = BoxResponse.for_status_code(response.status_code)
    result.headers = normalize_headers(response.headers)

    if isinstance(kind, ByteStream):
        result.response_object = ResponseStream(response)
        return result

    await response.aread()

    if isinstance(kind, RawBytes):
        result.response_object = response.content
        if not result.success:
            result.content_string = _body_text(response)
        return result

    if isinstance(kind, Structured):
        text = _body_text(response)
        result.content_string = text
        if result.success and text.strip():
            result.response_object = converter.deserialize(text, kind.model)
        return result

    raise TypeError(f"Unsupported result kind: {kind!r}")


__all__ = [
    "ByteStream",
    "RawBytes",
    "ResponseStream",
    "ResultKind",
    "Structured",
    "decode_response",
    "is_streaming",
]
