# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test doubles for the RequestHandler protocol."""

from __future__ import annotations

from typing import Any

from .client import RequestHandler
from .decoder import ResultKind
from .models import BoxRequest, BoxResponse, ResponseStatus


class StubRequestHandler(RequestHandler):
    """Deterministic, programmable RequestHandler for tests; keyed by absolute URI."""

    def __init__(self, responses: dict[str, BoxResponse[Any]] | None = None):
        self._responses = responses or {}
        self.requests: list[tuple[BoxRequest, ResultKind]] = []
        self.closed = False

    def add(self, uri: str, response: BoxResponse[Any]) -> None:
        self._responses[uri] = response

    async def execute(self, request: BoxRequest, kind: ResultKind) -> BoxResponse[Any]:
        self.requests.append((request, kind))
        if request.absolute_uri in self._responses:
            return self._responses[request.absolute_uri]
        return BoxResponse(status=ResponseStatus.ERROR, status_code=404, content_string="No stubbed response configured")

    async def aclose(self) -> None:
        self.closed = True
