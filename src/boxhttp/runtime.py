# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade that wires configuration, transport, converter and auth together."""

from __future__ import annotations

from typing import Any

import httpx

from .auth import AuthRepository, StaticAuthRepository
from .config import BoxConfig, HttpSettings, load_box_config, load_http_settings
from .converter import Converter, JsonConverter
from .http.client import RequestHandler, create_default_transport
from .http.decoder import ResultKind, Structured
from .http.httpx_client import HttpxRequestHandler
from .http.models import BoxMultiPartRequest, BoxRequest, BoxResponse
from .managers.base import BoxResourceManager


class BoxClient:
    """
    Convenience wrapper owning one shared ``httpx.AsyncClient`` for every call it makes.

    Pass ``handler`` to substitute the transport (e.g. ``StubRequestHandler`` in tests);
    otherwise a handler is built over ``transport`` or a new client from ``HttpSettings``.
    """

    def __init__(
        self,
        auth: AuthRepository | str,
        *,
        config: BoxConfig | None = None,
        settings: HttpSettings | None = None,
        converter: Converter | None = None,
        transport: httpx.AsyncClient | None = None,
        handler: RequestHandler | None = None,
    ):
        self.config = config or load_box_config()
        self.http_settings = settings or load_http_settings()
        self.converter = converter or JsonConverter()
        self.auth = StaticAuthRepository(auth) if isinstance(auth, str) else auth
        if handler is None:
            handler = HttpxRequestHandler(
                transport or create_default_transport(self.http_settings),
                settings=self.http_settings,
                converter=self.converter,
            )
        self.handler = handler
        self.resources = BoxResourceManager(self.config, self.handler, self.converter, self.auth)

    def request(self, host_uri: str, path: str | None = None) -> BoxRequest:
        """Authorized descriptor for ``host_uri``/``path``."""
        return self.resources.request(host_uri, path)

    def multipart_request(self, host_uri: str, path: str | None = None) -> BoxMultiPartRequest:
        return self.resources.multipart_request(host_uri, path)

    async def execute(self, request: BoxRequest, kind: ResultKind = Structured(dict)) -> BoxResponse[Any]:
        return await self.handler.execute(request, kind)

    async def aclose(self) -> None:
        if hasattr(self.handler, "aclose"):
            await self.handler.aclose()

    async def __aenter__(self) -> BoxClient:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()
