"""The top-level OpenAPI document and its reusable components."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from oaspec.data_type import DataType, parse_data_type
from oaspec.info import Info
from oaspec.media import HeaderOrReference, parse_header_or_reference
from oaspec.operation import (
    RequestBodyOrReference,
    ResponseOrReference,
    parse_request_body_or_reference,
    parse_response_or_reference,
)
from oaspec.parameter import ParameterOrReference, parse_parameter_or_reference
from oaspec.path import ApiPath
from oaspec.path_item import PathItem
from oaspec.primitives import SchemaError, expect_mapping, expect_string
from oaspec.server import Server
from oaspec.version import Version


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _required(data: Mapping, key: str) -> Any:
    if key not in data:
        raise SchemaError(f"missing field `{key}`")
    return data[key]


def _named(convert: Callable[[Any], Any]) -> Callable[[Any], dict]:
    def parse(value: Any) -> dict:
        return {expect_string(name): convert(item) for name, item in expect_mapping(value).items()}

    return parse


@dataclass(frozen=True)
class Components:
    """Reusable objects referenced from elsewhere in the document."""

    schemas: dict[str, DataType] | None = None
    responses: dict[str, ResponseOrReference] | None = None
    parameters: dict[str, ParameterOrReference] | None = None
    request_bodies: dict[str, RequestBodyOrReference] | None = None
    headers: dict[str, HeaderOrReference] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Components:
        """Read a components object."""
        data = expect_mapping(data)
        return cls(
            schemas=_optional(data, "schemas", _named(parse_data_type)),
            responses=_optional(data, "responses", _named(parse_response_or_reference)),
            parameters=_optional(data, "parameters", _named(parse_parameter_or_reference)),
            request_bodies=_optional(
                data, "requestBodies", _named(parse_request_body_or_reference)
            ),
            headers=_optional(data, "headers", _named(parse_header_or_reference)),
        )


def _parse_servers(data: Mapping) -> tuple[Server, ...]:
    if "servers" not in data:
        return ()
    value = data["servers"]
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected sequence, got {type(value).__name__}")
    return tuple(Server.from_dict(item) for item in value)


def _parse_paths(value: Any) -> dict[ApiPath, PathItem]:
    return {
        ApiPath.parse(path): PathItem.from_dict(item)
        for path, item in expect_mapping(value).items()
    }


@dataclass(frozen=True)
class Description:
    """A whole OpenAPI document."""

    openapi: Version
    info: Info
    servers: tuple[Server, ...] = field(default_factory=tuple)
    paths: dict[ApiPath, PathItem] | None = None
    components: Components | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Description:
        """Read a document from its decoded mapping."""
        data = expect_mapping(data)
        return cls(
            openapi=Version.parse(_required(data, "openapi")),
            info=Info.from_dict(_required(data, "info")),
            servers=_parse_servers(data),
            paths=_optional(data, "paths", _parse_paths),
            components=_optional(data, "components", Components.from_dict),
        )


def load_description(text: str) -> Description:
    """Parse a YAML (or JSON) document held in *text*."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise SchemaError(f"invalid YAML: {err}") from err
    return Description.from_dict(data)


def load_description_file(path: str | os.PathLike) -> Description:
    """Read and parse the document stored at *path*."""
    with open(path, encoding="utf-8") as handle:
        return load_description(handle.read())