"""Server and server variable objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from oaspec.primitives import SchemaError, expect_mapping, expect_string


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _required(data: Mapping, key: str) -> Any:
    if key not in data:
        raise SchemaError(f"missing field `{key}`")
    return data[key]


def _strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected sequence, got {type(value).__name__}")
    return tuple(expect_string(item) for item in value)


@dataclass(frozen=True)
class ServerVariable:
    """A variable substituted into a server URL template."""

    default: str
    enum: tuple[str, ...] | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ServerVariable:
        """Read a server variable object."""
        data = expect_mapping(data)
        return cls(
            default=expect_string(_required(data, "default")),
            enum=_optional(data, "enum", _strings),
            description=_optional(data, "description", expect_string),
        )


@dataclass(frozen=True)
class Server:
    """A server hosting the API."""

    url: str
    descriptor: str | None = None
    variables: dict[str, ServerVariable] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Server:
        """Read a server object."""
        data = expect_mapping(data)
        return cls(
            url=expect_string(_required(data, "url")),
            descriptor=_optional(data, "descriptor", expect_string),
            variables=_optional(
                data,
                "variables",
                lambda value: {
                    expect_string(name): ServerVariable.from_dict(item)
                    for name, item in expect_mapping(value).items()
                },
            ),
        )