# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers.

Only bad input and transport failures are raised. A non-2xx answer from the API is an
ordinary result (``BoxResponse.status == ResponseStatus.ERROR``), not an exception.
"""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import Any

import httpx


class BoxError(Exception):
    """Base class for errors raised by boxhttp itself."""


class PreconditionError(BoxError, ValueError):
    """A required argument was missing or empty; raised before any network activity."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"Required value is missing: {name}")


class MalformedRequestError(BoxError):
    """The request descriptor cannot be turned into a valid wire request."""


class MissingFilePart(MalformedRequestError):
    """A multipart request was built without a file part."""

    def __init__(self, message: str = "Multipart upload requires exactly one file part; none was supplied"):
        super().__init__(message)


class IgnoredFilePartWarning(UserWarning):
    """More than one file part was supplied; only the first one is uploaded."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _root_cause(exc: BaseException) -> BaseException:
    seen: set[int] = set()
    current: BaseException = exc
    while current.__cause__ is not None or current.__context__ is not None:
        if id(current) in seen:
            break
        seen.add(id(current))
        current = current.__cause__ or current.__context__  # type: ignore[assignment]
    return current


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map httpx/socket/ssl exceptions to ErrorCategory.

    httpx wraps the low-level error, so the cause chain is consulted for TLS and DNS failures.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    cause = _root_cause(exc)
    if isinstance(cause, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR
    if isinstance(cause, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping: dict[Any, str] = {
        ErrorCategory.TIMEOUT: "Network timeout while calling the Box API",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Transport error while calling the Box API",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed due to a transport error")


def require(value: Any, name: str) -> Any:
    """Return ``value`` or raise PreconditionError when it is None or an empty string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PreconditionError(name)
    return value


__all__ = [
    "BoxError",
    "ErrorCategory",
    "IgnoredFilePartWarning",
    "MalformedRequestError",
    "MissingFilePart",
    "PreconditionError",
    "categorize_exception",
    "error_category_to_reason",
    "require",
]
