"""Path item objects: the operations available on one path."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from oaspec.operation import Operation
from oaspec.parameter import ParameterOrReference, parse_parameter_or_reference
from oaspec.primitives import SchemaError, expect_mapping, expect_string
from oaspec.server import Server
from oaspec.sref import Sref

_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _sequence(value: Any, convert: Callable[[Any], Any]) -> tuple:
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected sequence, got {type(value).__name__}")
    return tuple(convert(item) for item in value)


@dataclass(frozen=True)
class PathItem:
    """The operations, servers and parameters of a single path."""

    sref: Sref | None = None
    summary: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: tuple[Server, ...] | None = None
    parameters: tuple[ParameterOrReference, ...] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> PathItem:
        """Read a path item object."""
        data = expect_mapping(data)
        operations = {
            method: _optional(data, method, Operation.from_dict) for method in _METHODS
        }
        return cls(
            sref=_optional(data, "$ref", Sref.parse),
            summary=_optional(data, "summary", expect_string),
            servers=_optional(data, "servers", lambda value: _sequence(value, Server.from_dict)),
            parameters=_optional(
                data,
                "parameters",
                lambda value: _sequence(value, parse_parameter_or_reference),
            ),
            **operations,
        )

    def operations(self) -> dict[str, Operation]:
        """Return the defined operations keyed by HTTP method, in a fixed method order."""
        found = ((method, getattr(self, method)) for method in _METHODS)
        return {method: operation for method, operation in found if operation is not None}