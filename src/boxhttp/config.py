# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for boxhttp."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"boxhttp/{__version__} (+https://developer.box.com)"
DEFAULT_BASE_URI = "https://api.box.com/2.0/"
DEFAULT_UPLOAD_BASE_URI = "https://upload.box.com/api/2.0/"

FILES_PATH = "files/"
FOLDERS_PATH = "folders/"
COMMENTS_PATH = "comments/"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _uri_env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    return value if value.endswith("/") else value + "/"


@dataclass
class HttpSettings:
    """Transport defaults for the shared httpx client."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("BOX_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("BOX_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BOX_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BOX_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass(frozen=True)
class BoxConfig:
    """Endpoint layout of the Box content API."""

    base_uri: str = DEFAULT_BASE_URI
    upload_base_uri: str = DEFAULT_UPLOAD_BASE_URI

    @classmethod
    def from_env(cls) -> "BoxConfig":
        return cls(
            base_uri=_uri_env("BOX_API_BASE_URI", cls.base_uri),
            upload_base_uri=_uri_env("BOX_UPLOAD_BASE_URI", cls.upload_base_uri),
        )

    @property
    def files_endpoint_uri(self) -> str:
        return self.base_uri + FILES_PATH

    @property
    def files_upload_endpoint_uri(self) -> str:
        return self.upload_base_uri + FILES_PATH + "content"

    @property
    def folders_endpoint_uri(self) -> str:
        return self.base_uri + FOLDERS_PATH

    @property
    def comments_endpoint_uri(self) -> str:
        return self.base_uri + COMMENTS_PATH

    def files_new_version_endpoint_uri(self, file_id: str) -> str:
        return f"{self.upload_base_uri}{FILES_PATH}{file_id}/content"


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_box_config() -> BoxConfig:
    """Load endpoint configuration from environment with Box production defaults."""
    return BoxConfig.from_env()
