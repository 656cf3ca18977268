"""Schema references (``$ref`` values)."""

from __future__ import annotations

from dataclasses import dataclass

from oaspec.primitives import SchemaError, expect_string, expect_uri_reference


@dataclass(frozen=True)
class Sref:
    """A URI reference pointing at another part of a document."""

    value: str

    @classmethod
    def parse(cls, text: str) -> Sref:
        """Validate *text* as a URI reference."""
        text = expect_string(text)
        try:
            expect_uri_reference(text)
        except SchemaError as err:
            raise SchemaError(f"uri reference error: {err}") from err
        return cls(text)

    def __str__(self) -> str:
        return self.value