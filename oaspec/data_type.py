"""Schema objects describing the data types of values."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from oaspec.common import Discriminator, ExternalDoc, Reference
from oaspec.primitives import (
    SchemaError,
    expect_bool,
    expect_mapping,
    expect_string,
    expect_true,
)

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U64_MAX = 2**64 - 1


class NumberFormat(enum.Enum):
    """Formats a ``number`` schema may declare."""

    FLOAT = "float"
    DOUBLE = "double"


class IntegerFormat(enum.Enum):
    """Formats an ``integer`` schema may declare."""

    INT32 = "int32"
    INT64 = "int64"


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _flag(data: Mapping, key: str) -> bool:
    return expect_bool(data[key]) if key in data else False


def _default(data: Mapping, convert: Callable[[Any], Any], nullable: bool) -> tuple[bool, Any]:
    """Return ``(has_default, default)``; an explicit null counts only when nullable."""
    if "default" not in data:
        return False, None
    value = data["default"]
    if value is None:
        return nullable, None
    return True, convert(value)


def _integer_in(low: int, high: int) -> Callable[[Any], int]:
    def convert(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SchemaError(f"expected integer, got {type(value).__name__}")
        if not low <= value <= high:
            raise SchemaError(f"integer {value} out of range [{low}, {high}]")
        return value

    return convert


_to_i32 = _integer_in(_I32_MIN, _I32_MAX)
_to_i64 = _integer_in(_I64_MIN, _I64_MAX)
_to_u64 = _integer_in(0, _U64_MAX)


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"expected number, got {type(value).__name__}")
    return float(value)


def _sequence(value: Any, convert: Callable[[Any], Any]) -> tuple:
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected sequence, got {type(value).__name__}")
    return tuple(convert(item) for item in value)


def _string_keyed(value: Any, convert: Callable[[Any], Any]) -> dict:
    return {expect_string(key): convert(item) for key, item in expect_mapping(value).items()}


@dataclass(frozen=True)
class NullType:
    """The ``null`` type."""


@dataclass(frozen=True)
class BooleanType:
    """The ``boolean`` type."""

    default: bool | None = None
    has_default: bool = False


@dataclass(frozen=True)
class StringType:
    """The ``string`` type."""

    min_length: int | None = None
    max_length: int | None = None
    default: str | None = None
    has_default: bool = False


@dataclass(frozen=True)
class IntegerType:
    """The ``integer`` type; ``format`` is None when no known format applies."""

    format: IntegerFormat | None = None
    minimum: int | None = None
    exclusive_minimum: bool = False
    maximum: int | None = None
    exclusive_maximum: bool = False
    default: int | None = None
    has_default: bool = False


@dataclass(frozen=True)
class NumberType:
    """The ``number`` type; ``format`` is None when no known format applies."""

    format: NumberFormat | None = None
    minimum: float | None = None
    exclusive_minimum: bool = False
    maximum: float | None = None
    exclusive_maximum: bool = False
    default: float | None = None
    has_default: bool = False


@dataclass(frozen=True)
class ArrayType:
    """The ``array`` type with its item subschemas."""

    prefix_items: tuple[DataType, ...] | None = None
    items: DataType | None = None
    contains: DataType | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ArrayType:
        """Read the array keywords of a schema."""
        data = expect_mapping(data)
        return cls(
            prefix_items=_optional(
                data, "prefixItems", lambda value: _sequence(value, parse_data_type)
            ),
            items=_optional(data, "items", parse_data_type),
            contains=_optional(data, "contains", parse_data_type),
        )


def _parse_additional(value: Any) -> bool | DataType:
    if isinstance(value, bool):
        return value
    return parse_data_type(value)


@dataclass(frozen=True)
class ObjectType:
    """The ``object`` type with its property subschemas."""

    properties: dict[str, DataType] | None = None
    pattern_properties: dict[str, DataType] | None = None
    additional_properties: bool | DataType | None = None
    property_names: DataType | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ObjectType:
        """Read the object keywords of a schema."""
        data = expect_mapping(data)
        return cls(
            properties=_optional(
                data, "properties", lambda value: _string_keyed(value, parse_data_type)
            ),
            pattern_properties=_optional(
                data,
                "patternProperties",
                lambda value: _string_keyed(value, parse_data_type),
            ),
            additional_properties=_optional(data, "additionalProperties", _parse_additional),
            property_names=_optional(data, "propertyNames", parse_data_type),
        )


def _parse_numerical(cls: type, fmt: Any, data: Mapping, convert: Callable, nullable: bool) -> Any:
    has_default, default = _default(data, convert, nullable)
    return cls(
        format=fmt,
        minimum=_optional(data, "minimum", convert),
        exclusive_minimum=_flag(data, "exclusiveMinimum"),
        maximum=_optional(data, "maximum", convert),
        exclusive_maximum=_flag(data, "exclusiveMaximum"),
        default=default,
        has_default=has_default,
    )


def _known_format(data: Mapping, kind: type[enum.Enum]) -> Any:
    value = data.get("format")
    if not isinstance(value, str):
        return None
    try:
        return kind(value)
    except ValueError:
        return None


_INTEGER_CONVERTERS = {IntegerFormat.INT32: _to_i32, IntegerFormat.INT64: _to_i64}


def _parse_integer(data: Mapping, nullable: bool) -> IntegerType:
    fmt = _known_format(data, IntegerFormat)
    if fmt is not None:
        try:
            return _parse_numerical(IntegerType, fmt, data, _INTEGER_CONVERTERS[fmt], nullable)
        except SchemaError:
            pass
    return _parse_numerical(IntegerType, None, data, _to_i32, nullable)


def _parse_number(data: Mapping, nullable: bool) -> NumberType:
    fmt = _known_format(data, NumberFormat)
    if fmt is not None:
        try:
            return _parse_numerical(NumberType, fmt, data, _to_float, nullable)
        except SchemaError:
            pass
    return _parse_numerical(NumberType, None, data, _to_float, nullable)


def _parse_typed(data: Mapping, nullable: bool) -> TypeSchema:
    """Read a schema by its ``type`` tag; object and array only when nullable."""
    if "type" not in data:
        raise SchemaError("missing field `type`")
    kind = data["type"]
    if kind == "null":
        return NullType()
    if kind == "boolean":
        has_default, default = _default(data, expect_bool, nullable)
        return BooleanType(default, has_default)
    if kind == "integer":
        return _parse_integer(data, nullable)
    if kind == "number":
        return _parse_number(data, nullable)
    if kind == "string":
        has_default, default = _default(data, expect_string, nullable)
        return StringType(
            min_length=_optional(data, "minLength", _to_u64),
            max_length=_optional(data, "maxLength", _to_u64),
            default=default,
            has_default=has_default,
        )
    if nullable and kind == "object":
        return ObjectType.from_dict(data)
    if nullable and kind == "array":
        return ArrayType.from_dict(data)
    raise SchemaError(f"unknown variant of type: {kind!r}")


def _parse_type_schema(data: Mapping) -> tuple[TypeSchema, bool]:
    if "nullable" in data:
        try:
            expect_true(data["nullable"])
            return _parse_typed(data, True), True
        except SchemaError:
            pass
    try:
        return _parse_typed(data, False), False
    except SchemaError:
        pass
    # Many documents leave out "type: object" and "type: array".
    try:
        return ObjectType.from_dict(data), False
    except SchemaError:
        return ArrayType.from_dict(data), False


@dataclass(frozen=True)
class ActualType:
    """A schema describing one concrete type."""

    schema: TypeSchema
    nullable: bool = False
    discriminator: Discriminator | None = None
    external_docs: ExternalDoc | None = None
    readonly: bool = False
    writeonly: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> ActualType:
        """Read a concrete type schema."""
        data = expect_mapping(data)
        discriminator = _optional(data, "discriminator", Discriminator.from_dict)
        external_docs = _optional(data, "external_docs", ExternalDoc.from_dict)
        schema, nullable = _parse_type_schema(data)
        return cls(
            schema=schema,
            nullable=nullable,
            discriminator=discriminator,
            external_docs=external_docs,
            readonly=_flag(data, "readOnly"),
            writeonly=_flag(data, "writeOnly"),
        )


@dataclass(frozen=True)
class OneOfType:
    """Exactly one of the subschemas applies."""

    one_of: tuple[DataType, ...]


@dataclass(frozen=True)
class AllOfType:
    """All of the subschemas apply."""

    all_of: tuple[DataType, ...]


@dataclass(frozen=True)
class AnyOfType:
    """At least one of the subschemas applies."""

    any_of: tuple[DataType, ...]


@dataclass(frozen=True)
class EmptyType:
    """A schema given as an empty object."""


@dataclass(frozen=True)
class UnknownType:
    """A schema whose form is not recognised."""


def _combinator(key: str, cls: type) -> Callable[[Mapping], Any]:
    def parse(data: Mapping) -> Any:
        if key not in data:
            raise SchemaError(f"missing field `{key}`")
        return cls(_sequence(data[key], parse_data_type))

    return parse


def _parse_empty(data: Mapping) -> EmptyType:
    if data:
        raise SchemaError(f"unknown field `{next(iter(data))}`, there are no fields")
    return EmptyType()


_DATA_TYPE_PARSERS = (
    Reference.from_dict,
    ActualType.from_dict,
    _combinator("oneOf", OneOfType),
    _combinator("allOf", AllOfType),
    _combinator("anyOf", AnyOfType),
    _parse_empty,
    lambda data: UnknownType(),
)


def parse_data_type(data: Any) -> DataType:
    """Read a schema object, trying each form in turn and taking the first that fits."""
    if isinstance(data, Mapping):
        for parser in _DATA_TYPE_PARSERS:
            try:
                return parser(data)
            except SchemaError:
                continue
    raise SchemaError("data did not match any variant of untagged enum DataType")


TypeSchema = Union[NullType, BooleanType, StringType, IntegerType, NumberType, ArrayType, ObjectType]
DataType = Union[Reference, ActualType, OneOfType, AllOfType, AnyOfType, EmptyType, UnknownType]