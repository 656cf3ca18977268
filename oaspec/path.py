"""Templated path keys of the ``paths`` object."""

from __future__ import annotations

from dataclasses import dataclass

from oaspec.primitives import SchemaError, expect_string


class PathError(SchemaError):
    """Raised for a path that does not begin at the root."""


@dataclass(frozen=True)
class ApiPath:
    """A path relative to the server URL, such as ``/pets/{id}``."""

    value: str

    @classmethod
    def parse(cls, text: str) -> ApiPath:
        """Validate that *text* starts with a forward slash."""
        text = expect_string(text)
        first = text.split("/", 1)[0]
        if first:
            raise PathError("path must begin with forward slash")
        return cls(text)

    def __str__(self) -> str:
        return self.value