# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header helpers.

HTTP header field names are case-insensitive (RFC 9110). Request descriptors keep headers as
an ordered list of pairs so duplicates survive until the wire request is built; at that point
the last value for a name wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

AUTHORIZATION = "Authorization"
IF_MATCH = "If-Match"
USER_AGENT = "User-Agent"
CONTENT_TYPE = "Content-Type"

FORM_URLENCODED = "application/x-www-form-urlencoded"


def bearer(token: str) -> str:
    """Authorization header value for an OAuth2 access token (attached verbatim, even if empty)."""
    return f"Bearer {token}"


def collapse_headers(pairs: Iterable[tuple[str, str | None]]) -> dict[str, str]:
    """
    Collapse ordered header pairs into a dict where the last value for a name wins.

    The first spelling of a name and its first position are kept; names are compared
    case-insensitively. ``None`` values become empty strings.
    """
    spelled: dict[str, str] = {}
    values: dict[str, str] = {}
    for name, value in pairs:
        if name is None:
            continue
        key = str(name).lower()
        spelled.setdefault(key, str(name))
        values[key] = "" if value is None else str(value)
    return {spelled[key]: values[key] for key in values}


def has_header(pairs: Iterable[tuple[str, Any]], name: str) -> bool:
    lower = name.lower()
    return any(str(key).lower() == lower for key, _ in pairs)


def normalize_headers(headers: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping (httpx.Headers, dict or pairs)."""
    if not headers:
        return {}
    items = headers.items() if hasattr(headers, "items") else headers
    out: dict[str, str] = {}
    for key, value in items:
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    lower = name.lower()
    for key, value in headers.items():
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


__all__ = [
    "AUTHORIZATION",
    "CONTENT_TYPE",
    "FORM_URLENCODED",
    "IF_MATCH",
    "USER_AGENT",
    "bearer",
    "collapse_headers",
    "has_header",
    "header_value",
    "normalize_headers",
]
