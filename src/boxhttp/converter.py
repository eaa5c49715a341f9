# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured-payload converter.

The execution core only ever calls ``serialize``/``deserialize``; the wire format is the
converter's business. ``JsonConverter`` is the default and accepts anything pydantic can
validate: BaseModel subclasses, dataclasses, TypedDicts, ``list[...]`` and plain ``dict``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class Converter(Protocol):
    def serialize(self, obj: Any) -> str: ...

    def deserialize(self, text: str, model: type[T]) -> T: ...


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


class JsonConverter:
    """JSON converter backed by pydantic TypeAdapter; ``None`` fields are dropped on output."""

    def __init__(self, *, exclude_none: bool = True, by_alias: bool = True):
        self.exclude_none = exclude_none
        self.by_alias = by_alias

    def serialize(self, obj: Any) -> str:
        adapter = _adapter(type(obj))
        return adapter.dump_json(obj, exclude_none=self.exclude_none, by_alias=self.by_alias).decode("utf-8")

    def deserialize(self, text: str, model: type[T]) -> T:
        return _adapter(model).validate_json(text)


__all__ = ["Converter", "JsonConverter"]
