"""Info object with its contact and licence details."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from oaspec.primitives import SchemaError, expect_mapping, expect_string, expect_uri


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _required(data: Mapping, key: str) -> Any:
    if key not in data:
        raise SchemaError(f"missing field `{key}`")
    return data[key]


@dataclass(frozen=True)
class Contact:
    """Contact details for the API."""

    name: str | None = None
    url: str | None = None
    email: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Contact:
        """Read a contact object."""
        data = expect_mapping(data)
        return cls(
            name=_optional(data, "name", expect_string),
            url=_optional(data, "url", expect_uri),
            email=_optional(data, "email", expect_string),
        )


@dataclass(frozen=True)
class License:
    """The licence the API is offered under."""

    name: str
    url: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> License:
        """Read a licence object."""
        data = expect_mapping(data)
        return cls(
            name=expect_string(_required(data, "name")),
            url=_optional(data, "url", expect_uri),
        )


@dataclass(frozen=True)
class Info:
    """Metadata about the API."""

    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Info:
        """Read an info object."""
        data = expect_mapping(data)
        return cls(
            title=expect_string(_required(data, "title")),
            version=expect_string(_required(data, "version")),
            description=_optional(data, "description", expect_string),
            terms_of_service=_optional(data, "termsOfService", expect_uri),
            contact=_optional(data, "contact", Contact.from_dict),
            license=_optional(data, "license", License.from_dict),
        )