"""Operation parameter objects."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from oaspec.common import Reference
from oaspec.data_type import DataType, parse_data_type
from oaspec.media import MediaType, parse_content
from oaspec.primitives import (
    SchemaError,
    expect_bool,
    expect_mapping,
    expect_string,
    expect_true,
)


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _flag(data: Mapping, key: str) -> bool:
    return expect_bool(data[key]) if key in data else False


class ParameterLocation(enum.Enum):
    """Where a parameter is carried in the request."""

    QUERY = "query"
    HEADER = "header"
    PATH = "path"
    COOKIE = "cookie"


class ParameterStyle(enum.Enum):
    """Serialisation styles a parameter may declare."""

    FORM = "form"
    SIMPLE = "simple"


@dataclass(frozen=True)
class QueryFlags:
    """Flags of a query parameter."""

    deprecated: bool = False
    allow_empty_value: bool = False


@dataclass(frozen=True)
class PathFlags:
    """Flags of a path parameter, which is always required."""

    required: bool = True
    deprecated: bool = False


@dataclass(frozen=True)
class OtherFlags:
    """Flags of a header or cookie parameter."""

    required: bool = False
    deprecated: bool = False


ParameterFlags = Union[QueryFlags, PathFlags, OtherFlags]


@dataclass(frozen=True)
class ParameterSchema:
    """A parameter described by a schema and a serialisation style."""

    style: ParameterStyle
    schema: DataType


def _parse_location(data: Mapping) -> ParameterLocation:
    if "in" not in data:
        raise SchemaError("missing field `in`")
    raw = data["in"]
    if isinstance(raw, str):
        try:
            return ParameterLocation(raw)
        except ValueError:
            pass
    raise SchemaError(
        f"unknown variant {raw!r}, expected one of `query`, `header`, `path`, `cookie`"
    )


def _parse_flags(location: ParameterLocation, data: Mapping) -> ParameterFlags:
    if location is ParameterLocation.QUERY:
        return QueryFlags(
            deprecated=_flag(data, "deprecated"),
            allow_empty_value=_flag(data, "allowEmptyValue"),
        )
    if location is ParameterLocation.PATH:
        if "required" not in data:
            raise SchemaError("missing field `required`")
        return PathFlags(required=expect_true(data["required"]), deprecated=_flag(data, "deprecated"))
    return OtherFlags(required=_flag(data, "required"), deprecated=_flag(data, "deprecated"))


def _parse_style(value: Any) -> ParameterStyle:
    text = expect_string(value)
    try:
        return ParameterStyle(text)
    except ValueError:
        raise SchemaError(f"unknown variant `{text}`, expected `form` or `simple`") from None


def _parse_schema_and_style(data: Mapping) -> ParameterSchema:
    for key in ("style", "schema"):
        if key not in data:
            raise SchemaError(f"missing field `{key}`")
    return ParameterSchema(style=_parse_style(data["style"]), schema=parse_data_type(data["schema"]))


def _parse_content_schema(data: Mapping) -> ParameterSchema | dict[str, MediaType] | None:
    """Read the schema or content of a parameter; neither is a valid outcome."""
    try:
        return _parse_schema_and_style(data)
    except SchemaError:
        pass
    if "content" in data:
        try:
            return parse_content(data["content"])
        except SchemaError:
            pass
    return None


@dataclass(frozen=True)
class Parameter:
    """A single operation parameter."""

    name: str
    location: ParameterLocation
    flags: ParameterFlags
    content_schema: ParameterSchema | dict[str, MediaType] | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Parameter:
        """Read a parameter object."""
        data = expect_mapping(data)
        if "name" not in data:
            raise SchemaError("missing field `name`")
        name = expect_string(data["name"])
        location = _parse_location(data)
        return cls(
            name=name,
            location=location,
            flags=_parse_flags(location, data),
            content_schema=_parse_content_schema(data),
            description=_optional(data, "description", expect_string),
        )


ParameterOrReference = Union[Parameter, Reference]


def parse_parameter_or_reference(data: Any) -> ParameterOrReference:
    """Read a parameter object, or a reference to one."""
    for parser in (Parameter.from_dict, Reference.from_dict):
        try:
            return parser(data)
        except SchemaError:
            continue
    raise SchemaError("data did not match any variant of untagged enum ParameterOrReference")