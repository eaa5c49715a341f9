# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Session provider seam.

Token acquisition and refresh live outside this package; the core only reads
``auth.session.access_token`` when it authorizes a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class OAuthSession:
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str = "bearer"


class AuthRepository(Protocol):
    @property
    def session(self) -> OAuthSession: ...


class StaticAuthRepository:
    """AuthRepository over a fixed session (developer tokens, tests)."""

    def __init__(self, session: OAuthSession | str):
        self._session = OAuthSession(access_token=session) if isinstance(session, str) else session

    @property
    def session(self) -> OAuthSession:
        return self._session


__all__ = ["AuthRepository", "OAuthSession", "StaticAuthRepository"]
