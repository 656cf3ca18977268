"""OpenAPI specification version in major.minor.patch form."""

from __future__ import annotations

import re
from dataclasses import dataclass

from oaspec.primitives import SchemaError, expect_string

_U32_MAX = 2**32 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


class VersionError(SchemaError):
    """Raised for a malformed version string."""


def _parse_part(text: str | None, name: str) -> int:
    if text is None:
        raise VersionError(f"invalid version part: {name}")
    if not text:
        reason = "cannot parse integer from empty string"
    elif not _DIGITS.fullmatch(text):
        reason = "invalid digit found in string"
    else:
        number = int(text)
        if number <= _U32_MAX:
            return number
        reason = "number too large to fit in target type"
    raise VersionError(f"invalid version part: {name}: {reason}")


@dataclass(frozen=True)
class Version:
    """A three-part version number."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``major.minor.patch``."""
        parts = iter(expect_string(text).split("."))
        major = _parse_part(next(parts, None), "major")
        minor = _parse_part(next(parts, None), "minor")
        patch = _parse_part(next(parts, None), "patch")
        remainder = next(parts, None)
        if remainder is not None:
            raise VersionError(f"invalid version remainder: {remainder}")
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"