# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared plumbing for per-resource managers (files, folders, comments)."""

from __future__ import annotations

from typing import Any

from ..auth import AuthRepository
from ..config import BoxConfig
from ..converter import Converter
from ..errors import require
from ..http.client import RequestHandler
from ..http.decoder import ResultKind
from ..http.models import BoxMultiPartRequest, BoxRequest, BoxResponse


class BoxResourceManager:
    """
    Base class for resource managers.

    Subclasses validate their arguments with ``check_prerequisite`` (before any network
    activity), build an authorized descriptor with ``request``/``multipart_request`` and
    hand it to ``to_response``.
    """

    def __init__(self, config: BoxConfig, handler: RequestHandler, converter: Converter, auth: AuthRepository):
        self._config = config
        self._handler = handler
        self._converter = converter
        self._auth = auth

    @property
    def config(self) -> BoxConfig:
        """Endpoint layout subclasses build their request URIs from."""
        return self._config

    @staticmethod
    def check_prerequisite(*values: Any, names: tuple[str, ...] | None = None) -> None:
        """Raise PreconditionError for the first value that is None or an empty string."""
        for index, value in enumerate(values):
            require(value, names[index] if names and index < len(names) else f"argument {index}")

    def request(self, host_uri: str, path: str | None = None) -> BoxRequest:
        return BoxRequest(host_uri, path).authorize(self._auth.session.access_token)

    def multipart_request(self, host_uri: str, path: str | None = None) -> BoxMultiPartRequest:
        return BoxMultiPartRequest(host_uri, path).authorize(self._auth.session.access_token)

    def serialize(self, obj: Any) -> str:
        return self._converter.serialize(obj)

    async def to_response(self, request: BoxRequest, kind: ResultKind) -> BoxResponse[Any]:
        return await self._handler.execute(request, kind)
