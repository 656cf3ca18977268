"""HTTP status code keys of a responses object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from oaspec.primitives import SchemaError

_MIN_CODE = 100
_MAX_CODE = 599
_U16_MAX = 65535
_U16_TEXT = re.compile(r"\+?[0-9]+")


class HttpStatusCodeError(SchemaError):
    """Raised for a status code out of range or a malformed pattern."""


@dataclass(frozen=True)
class Specific:
    """An exact status code in the range [100, 599]."""

    code: int

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise HttpStatusCodeError(f"HTTP code must be an integer: {self.code!r}")
        if not _MIN_CODE <= self.code <= _MAX_CODE:
            raise HttpStatusCodeError(
                f"HTTP code {self.code} must be in range: [{_MIN_CODE}, {_MAX_CODE}]"
            )

    @classmethod
    def from_int(cls, value: int) -> Specific:
        """Build a code, checking its range."""
        return cls(value)

    def __str__(self) -> str:
        return str(self.code)


@dataclass(frozen=True)
class Pattern:
    """A code class wildcard: ``1XX`` through ``5XX``."""

    code_class: int

    def __post_init__(self) -> None:
        if self.code_class not in range(1, 6) or isinstance(self.code_class, bool):
            raise HttpStatusCodeError(
                f"HTTP code pattern is invalid: {self.code_class}XX"
            )

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Parse a pattern such as ``2XX``."""
        head = text[:3]
        if len(head) < 3 or head[0] not in "12345" or head[1:] != "XX":
            raise HttpStatusCodeError(f"HTTP code pattern is invalid: {text}")
        return cls(int(head[0]))

    def __str__(self) -> str:
        return f"{self.code_class}XX"


HttpStatusCode = Union[Specific, Pattern]


def parse_status_code(text: str | int) -> HttpStatusCode:
    """Parse a responses key as a specific code or a code-class pattern."""
    if isinstance(text, int) and not isinstance(text, bool):
        text = str(text)
    if not isinstance(text, str):
        raise HttpStatusCodeError(
            "HTTP status code must be either number in range [100..600) "
            "or pattern '1XX', '2XX' ... '5XX'"
        )
    if _U16_TEXT.fullmatch(text) and int(text) <= _U16_MAX:
        return Specific.from_int(int(text))
    return Pattern.parse(text)