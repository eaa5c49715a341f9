# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request handler abstraction and transport factory."""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from ..config import HttpSettings, load_http_settings
from .decoder import ResultKind
from .models import BoxRequest, BoxResponse


class RequestHandler(Protocol):
    """Executes one request descriptor and returns the result envelope."""

    async def execute(self, request: BoxRequest, kind: ResultKind) -> BoxResponse[Any]: ...

    async def aclose(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_transport(settings: HttpSettings | None = None) -> httpx.AsyncClient:
    """Shared httpx client; pass the same instance to every handler that should pool connections."""
    settings = settings or load_http_settings()
    return httpx.AsyncClient(
        follow_redirects=settings.allow_redirects,
        timeout=settings.timeout,
        verify=settings.verify_ssl,
    )


def create_default_request_handler(
    settings: HttpSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> RequestHandler:
    """Factory for the default httpx-backed handler."""
    from .httpx_client import HttpxRequestHandler

    settings = settings or load_http_settings()
    return HttpxRequestHandler(client or create_default_transport(settings), settings=settings)
