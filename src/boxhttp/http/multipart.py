# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Multipart/form-data encoding for upload requests.

The Box upload endpoints accept a single file per request. The file section always comes
first, followed by the string sections in the order they were added. httpx generates the
boundary and writes it to both the ``Content-Type`` header and every delimiter; part names
and file names are emitted double-quoted.

String sections are httpx file fields with no filename, which httpx renders as plain form
fields. httpx escapes a double quote inside a name or file name as ``%22`` (HTML5 form
encoding) rather than passing it through between the surrounding quotes.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import IO, Any

from ..errors import IgnoredFilePartWarning, MissingFilePart
from .models import BoxMultiPartRequest, FileFormPart, StringFormPart

logger = logging.getLogger(__name__)

# httpx `files=` entries: (field name, (file name or None, content[, content type]))
MultipartField = tuple[str, tuple[Any, ...]]


@dataclass(frozen=True)
class EncodedMultipart:
    file_part: FileFormPart
    string_parts: tuple[StringFormPart, ...]
    ignored_file_parts: int = 0

    def to_httpx_files(self) -> list[MultipartField]:
        """Ordered field list for ``httpx.AsyncClient.build_request(files=...)``."""
        content: IO[bytes] | bytes = self.file_part.value
        file_entry: tuple[Any, ...] = (self.file_part.file_name, content)
        if self.file_part.content_type:
            file_entry += (self.file_part.content_type,)
        fields: list[MultipartField] = [(self.file_part.name, file_entry)]
        # A None filename makes httpx emit a plain form field without `filename=`.
        fields.extend((part.name, (None, part.value)) for part in self.string_parts)
        return fields

    @property
    def section_count(self) -> int:
        return 1 + len(self.string_parts)


def encode_multipart(request: BoxMultiPartRequest) -> EncodedMultipart:
    """Split form parts into the single uploaded file and the string fields."""
    file_parts = request.file_parts
    if not file_parts:
        raise MissingFilePart()

    ignored = len(file_parts) - 1
    if ignored:
        names = ", ".join(part.name for part in file_parts[1:])
        logger.warning("Only one file per upload is supported; ignoring %d extra file part(s): %s", ignored, names)
        warnings.warn(
            f"Only the first file part ({file_parts[0].name!r}) is uploaded; ignored: {names}",
            IgnoredFilePartWarning,
            stacklevel=2,
        )

    return EncodedMultipart(
        file_part=file_parts[0],
        string_parts=tuple(request.string_parts),
        ignored_file_parts=ignored,
    )


__all__ = ["EncodedMultipart", "MultipartField", "encode_multipart"]
