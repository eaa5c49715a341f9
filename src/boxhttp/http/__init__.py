# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP execution core exports."""

from .adapters import StubRequestHandler
from .client import RequestHandler, create_default_request_handler, create_default_transport
from .decoder import ByteStream, RawBytes, ResponseStream, ResultKind, Structured, decode_response
from .headers import IF_MATCH, header_value, normalize_headers
from .httpx_client import HttpxRequestHandler
from .models import (
    BoxMultiPartRequest,
    BoxRequest,
    BoxResponse,
    ETag,
    FileFormPart,
    FormPart,
    RequestMethod,
    ResponseStatus,
    StringFormPart,
)
from .multipart import EncodedMultipart, encode_multipart

__all__ = [
    "IF_MATCH",
    "BoxMultiPartRequest",
    "BoxRequest",
    "BoxResponse",
    "ByteStream",
    "ETag",
    "EncodedMultipart",
    "FileFormPart",
    "FormPart",
    "HttpxRequestHandler",
    "RawBytes",
    "RequestHandler",
    "RequestMethod",
    "ResponseStatus",
    "ResponseStream",
    "ResultKind",
    "StringFormPart",
    "Structured",
    "StubRequestHandler",
    "create_default_request_handler",
    "create_default_transport",
    "decode_response",
    "encode_multipart",
    "header_value",
    "normalize_headers",
]
