# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource manager base exports."""

from .base import BoxResourceManager

__all__ = ["BoxResourceManager"]
