# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request descriptors, form parts and the response envelope."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import IO, Generic, NewType, TypeVar, Union
from urllib.parse import urlencode

from .headers import IF_MATCH, collapse_headers

T = TypeVar("T")

ETag = NewType("ETag", str)
HeaderPairs = tuple[tuple[str, str], ...]
ParamPairs = tuple[tuple[str, str], ...]


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ResponseStatus(str, Enum):
    SUCCESS = "Success"
    ERROR = "Error"


@dataclass(frozen=True)
class StringFormPart:
    name: str
    value: str


@dataclass(frozen=True)
class FileFormPart:
    """
    Binary section of a multipart upload.

    ``value`` is read but never closed; the caller owns the stream.
    """

    name: str
    file_name: str
    value: IO[bytes] | bytes
    content_type: str | None = None


FormPart = Union[StringFormPart, FileFormPart]


def _as_text(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class BoxRequest:
    """
    Description of one Box API call.

    Builder methods return a new descriptor so a partially built request can be reused as a
    template without aliasing.
    """

    host_uri: str
    path: str | None = None
    method: RequestMethod = RequestMethod.GET
    headers: HeaderPairs = ()
    parameters: ParamPairs = ()
    payload_parameters: ParamPairs = ()
    payload: str | None = None
    authorization: str | None = None

    @property
    def absolute_uri(self) -> str:
        if not self.path:
            return self.host_uri
        return self.host_uri.rstrip("/") + "/" + self.path.lstrip("/")

    def query_string(self) -> str:
        """Url-escaped query parameters in insertion order."""
        return urlencode(list(self.parameters))

    def header_map(self) -> dict[str, str]:
        return collapse_headers(self.headers)

    def with_method(self, method: RequestMethod | str) -> BoxRequest:
        if not isinstance(method, RequestMethod):
            method = RequestMethod(method.upper())
        return replace(self, method=method)

    def authorize(self, token: str) -> BoxRequest:
        return replace(self, authorization=token)

    def header(self, name: str, value: str | None) -> BoxRequest:
        return replace(self, headers=self.headers + ((name, "" if value is None else str(value)),))

    def if_match(self, etag: ETag | None) -> BoxRequest:
        """Make the call conditional on the entity tag; no header when ``etag`` is None."""
        if etag is None:
            return self
        return self.header(IF_MATCH, etag)

    def param(self, name: str, value: object | None) -> BoxRequest:
        """Append a query parameter; ``None`` values are skipped so optional filters can be passed through."""
        if value is None:
            return self
        return replace(self, parameters=self.parameters + ((name, _as_text(value)),))

    def payload_param(self, name: str, value: object | None) -> BoxRequest:
        if value is None:
            return self
        return replace(self, payload_parameters=self.payload_parameters + ((name, _as_text(value)),))

    def with_payload(self, payload: str | None) -> BoxRequest:
        return replace(self, payload=payload)


@dataclass(frozen=True)
class BoxMultiPartRequest(BoxRequest):
    """Multipart/form-data upload: one file part plus any number of string parts."""

    method: RequestMethod = RequestMethod.POST
    parts: tuple[FormPart, ...] = ()

    def form_part(self, part: FormPart) -> BoxMultiPartRequest:
        return replace(self, parts=self.parts + (part,))

    @property
    def file_parts(self) -> list[FileFormPart]:
        return [part for part in self.parts if isinstance(part, FileFormPart)]

    @property
    def string_parts(self) -> list[StringFormPart]:
        return [part for part in self.parts if isinstance(part, StringFormPart)]


@dataclass
class BoxResponse(Generic[T]):
    """Uniform result of one call; API-level failures are reported through ``status``."""

    status: ResponseStatus
    response_object: T | None = None
    content_string: str | None = None
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.status is ResponseStatus.SUCCESS

    @classmethod
    def for_status_code(cls, status_code: int) -> BoxResponse[T]:
        status = ResponseStatus.SUCCESS if 200 <= status_code < 300 else ResponseStatus.ERROR
        return cls(status=status, status_code=status_code)


__all__ = [
    "BoxMultiPartRequest",
    "BoxRequest",
    "BoxResponse",
    "ETag",
    "FileFormPart",
    "FormPart",
    "HeaderPairs",
    "ParamPairs",
    "RequestMethod",
    "ResponseStatus",
    "StringFormPart",
]
