# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
boxhttp package entrypoint.

This package is the HTTP execution core of a Box content API client: immutable request
descriptors (simple and multipart), an httpx-backed asynchronous handler, and a response
decoder that wraps every call in a uniform success/error envelope. Payload conversion and
token management are injected collaborators.
"""

from .auth import AuthRepository, OAuthSession, StaticAuthRepository
from .config import BoxConfig, HttpSettings, load_box_config, load_http_settings
from .converter import Converter, JsonConverter
from .errors import (
    BoxError,
    IgnoredFilePartWarning,
    MalformedRequestError,
    MissingFilePart,
    PreconditionError,
)
from .http import (
    BoxMultiPartRequest,
    BoxRequest,
    BoxResponse,
    ByteStream,
    ETag,
    FileFormPart,
    HttpxRequestHandler,
    RawBytes,
    RequestHandler,
    RequestMethod,
    ResponseStatus,
    ResponseStream,
    StringFormPart,
    Structured,
    create_default_request_handler,
)
from .log import setup_logging
from .managers import BoxResourceManager
from .runtime import BoxClient
from .version import __version__

__all__ = [
    "AuthRepository",
    "BoxClient",
    "BoxConfig",
    "BoxError",
    "BoxMultiPartRequest",
    "BoxRequest",
    "BoxResourceManager",
    "BoxResponse",
    "ByteStream",
    "Converter",
    "ETag",
    "FileFormPart",
    "HttpSettings",
    "HttpxRequestHandler",
    "IgnoredFilePartWarning",
    "JsonConverter",
    "MalformedRequestError",
    "MissingFilePart",
    "OAuthSession",
    "PreconditionError",
    "RawBytes",
    "RequestHandler",
    "RequestMethod",
    "ResponseStatus",
    "ResponseStream",
    "StaticAuthRepository",
    "StringFormPart",
    "Structured",
    "create_default_request_handler",
    "load_box_config",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
