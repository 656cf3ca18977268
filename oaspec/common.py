"""Small schema objects shared across the document: references, docs, discriminators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from oaspec.primitives import SchemaError, expect_mapping, expect_string, expect_uri
from oaspec.sref import Sref


def _required(data: Mapping, key: str) -> Any:
    if key not in data:
        raise SchemaError(f"missing field `{key}`")
    return data[key]


@dataclass(frozen=True)
class Reference:
    """A ``$ref`` object pointing at another part of the document."""

    sref: Sref

    @classmethod
    def from_dict(cls, data: Any) -> Reference:
        """Read a reference object; other keys next to ``$ref`` are ignored."""
        data = expect_mapping(data)
        return cls(Sref.parse(_required(data, "$ref")))


@dataclass(frozen=True)
class ExternalDoc:
    """A link to external documentation."""

    url: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ExternalDoc:
        """Read an external documentation object."""
        data = expect_mapping(data)
        url = expect_uri(_required(data, "url"))
        description = data.get("description")
        if description is not None:
            description = expect_string(description)
        return cls(url, description)


@dataclass(frozen=True)
class Discriminator:
    """Selects a schema variant by the value of one property."""

    property_name: str
    mapping: dict[str, Sref] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Discriminator:
        """Read a discriminator object."""
        data = expect_mapping(data)
        property_name = expect_string(_required(data, "property_name"))
        raw_mapping = data.get("mapping")
        mapping = None
        if raw_mapping is not None:
            mapping = {
                expect_string(value): Sref.parse(target)
                for value, target in expect_mapping(raw_mapping).items()
            }
        return cls(property_name, mapping)