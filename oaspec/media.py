"""Media type, encoding and header objects."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from oaspec.common import Reference
from oaspec.data_type import DataType, parse_data_type
from oaspec.primitives import SchemaError, expect_bool, expect_mapping, expect_string


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _flag(data: Mapping, key: str) -> bool:
    return expect_bool(data[key]) if key in data else False


def _string_keyed(value: Any, convert: Callable[[Any], Any]) -> dict:
    return {expect_string(key): convert(item) for key, item in expect_mapping(value).items()}


class HeaderStyle(enum.Enum):
    """Serialisation styles a header may declare."""

    SIMPLE = "simple"


def _parse_header_style(value: Any) -> HeaderStyle:
    text = expect_string(value)
    try:
        return HeaderStyle(text)
    except ValueError:
        raise SchemaError(f"unknown variant `{text}`, expected `simple`") from None


@dataclass(frozen=True)
class HeaderSchema:
    """A header described by a schema and an optional serialisation style."""

    schema: DataType
    style: HeaderStyle | None = None
    explode: bool | None = None


@dataclass(frozen=True)
class Encoding:
    """How one property of a multipart or form body is encoded."""

    content_type: str | None = None
    headers: dict[str, Header] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Encoding:
        """Read an encoding object."""
        data = expect_mapping(data)
        return cls(
            content_type=_optional(data, "content_type", expect_string),
            headers=_optional(
                data, "headers", lambda value: _string_keyed(value, Header.from_dict)
            ),
        )


@dataclass(frozen=True)
class MediaType:
    """The schema and encodings of content of one media type."""

    schema: DataType | None = None
    encoding: dict[str, Encoding] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> MediaType:
        """Read a media type object."""
        data = expect_mapping(data)
        return cls(
            schema=_optional(data, "schema", parse_data_type),
            encoding=_optional(
                data, "encoding", lambda value: _string_keyed(value, Encoding.from_dict)
            ),
        )


def parse_content(data: Any) -> dict[str, MediaType]:
    """Read a content map from media type names to media type objects."""
    return _string_keyed(data, MediaType.from_dict)


def _parse_schema_and_style(data: Mapping) -> HeaderSchema:
    if "schema" not in data:
        raise SchemaError("missing field `schema`")
    return HeaderSchema(
        schema=parse_data_type(data["schema"]),
        style=_optional(data, "style", _parse_header_style),
        explode=_optional(data, "explode", expect_bool),
    )


def _parse_header_content_schema(data: Mapping) -> HeaderSchema | dict[str, MediaType]:
    try:
        return _parse_schema_and_style(data)
    except SchemaError:
        pass
    if "content" in data:
        try:
            return parse_content(data["content"])
        except SchemaError:
            pass
    raise SchemaError("data did not match any variant of untagged enum ContentSchema")


@dataclass(frozen=True)
class Header:
    """A header described either by a schema or by a content map."""

    content_schema: HeaderSchema | dict[str, MediaType]
    description: str | None = None
    required: bool = False
    deprecated: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Header:
        """Read a header object."""
        data = expect_mapping(data)
        return cls(
            content_schema=_parse_header_content_schema(data),
            description=_optional(data, "description", expect_string),
            required=_flag(data, "required"),
            deprecated=_flag(data, "deprecated"),
        )


HeaderOrReference = Union[Header, Reference]


def parse_header_or_reference(data: Any) -> HeaderOrReference:
    """Read a header object, or a reference to one."""
    for parser in (Header.from_dict, Reference.from_dict):
        try:
            return parser(data)
        except SchemaError:
            continue
    raise SchemaError("data did not match any variant of untagged enum HeaderOrReference")