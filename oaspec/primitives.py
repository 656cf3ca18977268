"""Validation helpers for scalar values read from an OpenAPI document."""

from __future__ import annotations

import re
import string
from collections.abc import Mapping
from typing import Any


class SchemaError(ValueError):
    """Raised when a document value does not fit the expected schema."""


def expect_bool(value: Any) -> bool:
    """Return *value* if it is a boolean."""
    if not isinstance(value, bool):
        raise SchemaError(f"expected boolean, got {type(value).__name__}")
    return value


def expect_true(value: Any) -> bool:
    """Accept only the boolean ``true``."""
    if not isinstance(value, bool):
        raise SchemaError("MUST be boolean with true value")
    if not value:
        raise SchemaError("boolean value must be true but set to false")
    return True


def expect_false(value: Any) -> bool:
    """Accept only the boolean ``false``."""
    if not isinstance(value, bool):
        raise SchemaError("MUST be boolean with false value")
    if value:
        raise SchemaError("boolean value must be false but set to true")
    return False


def expect_string(value: Any) -> str:
    """Return *value* if it is a string."""
    if not isinstance(value, str):
        raise SchemaError(f"expected String type, got {type(value).__name__}")
    return value


def expect_mapping(value: Any) -> Mapping:
    """Return *value* if it is a mapping."""
    if not isinstance(value, Mapping):
        raise SchemaError(f"expected mapping, got {type(value).__name__}")
    return value


_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
_SUB_DELIMS = frozenset("!$&'()*+,;=")
_PCHAR = _UNRESERVED | _SUB_DELIMS | {":", "@", "%"}
_PATH_CHARS = _PCHAR | {"/"}
_QUERY_CHARS = _PCHAR | {"/", "?"}
_USERINFO_CHARS = _UNRESERVED | _SUB_DELIMS | {":", "%"}
_REG_NAME_CHARS = _UNRESERVED | _SUB_DELIMS | {"%"}
_IP_LITERAL_CHARS = _UNRESERVED | _SUB_DELIMS | {":"}

_SPLIT = re.compile(
    r"(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?",
    re.DOTALL,
)
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT_MAX = 65535


def _check_component(text: str, allowed: frozenset, component: str) -> None:
    bad = next((char for char in text if char not in allowed), None)
    if bad is not None:
        raise SchemaError(f"invalid character {bad!r} in {component}")
    if _BAD_PERCENT.search(text):
        raise SchemaError(f"invalid percent-encoding in {component}")


def _check_authority(authority: str) -> None:
    userinfo, at, hostport = authority.rpartition("@")
    if at:
        _check_component(userinfo, _USERINFO_CHARS, "user info")
    if hostport.startswith("["):
        close = hostport.find("]")
        if close < 0:
            raise SchemaError("unterminated IP literal in host")
        host = hostport[1:close]
        if not host:
            raise SchemaError("empty IP literal in host")
        _check_component(host, _IP_LITERAL_CHARS, "host")
        rest = hostport[close + 1:]
        if rest and not rest.startswith(":"):
            raise SchemaError("unexpected text after IP literal")
        port = rest[1:]
    else:
        host, _, port = hostport.partition(":")
        _check_component(host, _REG_NAME_CHARS, "host")
    if port:
        if not re.fullmatch(r"[0-9]+", port):
            raise SchemaError(f"invalid port: {port}")
        if int(port) > _PORT_MAX:
            raise SchemaError(f"port out of range: {port}")


def _check_reference(text: str) -> str | None:
    """Validate a URI reference and return its scheme, if any."""
    match = _SPLIT.fullmatch(text)
    if match is None:
        raise SchemaError(f"malformed URI reference: {text}")
    scheme, authority, path, query, fragment = match.groups()
    if scheme is not None and not _SCHEME.fullmatch(scheme):
        raise SchemaError(f"invalid scheme: {scheme}")
    if authority is not None:
        _check_authority(authority)
    _check_component(path, _PATH_CHARS, "path")
    if query is not None:
        _check_component(query, _QUERY_CHARS, "query")
    if fragment is not None:
        _check_component(fragment, _QUERY_CHARS, "fragment")
    return scheme


def expect_uri(value: Any) -> str:
    """Return *value* if it is an absolute URI (one with a scheme)."""
    text = expect_string(value)
    if _check_reference(text) is None:
        raise SchemaError(f"URI must have a scheme: {text}")
    return text


def expect_uri_reference(value: Any) -> str:
    """Return *value* if it is a URI or relative reference."""
    text = expect_string(value)
    _check_reference(text)
    return text