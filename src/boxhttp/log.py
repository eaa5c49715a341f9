# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for boxhttp."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("BOX_LOG_LEVEL", "WARNING").upper()

# httpx/httpcore log every request at INFO/DEBUG; only surface them when boxhttp itself is at DEBUG.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    transport_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["setup_logging"]
