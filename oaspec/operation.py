"""Operation, request body and response objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from oaspec.common import ExternalDoc, Reference
from oaspec.http_status_code import HttpStatusCode, parse_status_code
from oaspec.media import HeaderOrReference, MediaType, parse_content, parse_header_or_reference
from oaspec.parameter import ParameterOrReference, parse_parameter_or_reference
from oaspec.primitives import SchemaError, expect_bool, expect_mapping, expect_string


def _optional(data: Mapping, key: str, convert: Callable[[Any], Any]) -> Any:
    value = data.get(key)
    return None if value is None else convert(value)


def _sequence(value: Any, convert: Callable[[Any], Any]) -> tuple:
    if not isinstance(value, (list, tuple)):
        raise SchemaError(f"expected sequence, got {type(value).__name__}")
    return tuple(convert(item) for item in value)


def _first_fitting(data: Any, parsers: tuple, name: str) -> Any:
    for parser in parsers:
        try:
            return parser(data)
        except SchemaError:
            continue
    raise SchemaError(f"data did not match any variant of untagged enum {name}")


@dataclass(frozen=True)
class RequestBody:
    """The body an operation accepts."""

    content: dict[str, MediaType]
    description: str | None = None
    required: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RequestBody:
        """Read a request body object."""
        data = expect_mapping(data)
        if "content" not in data:
            raise SchemaError("missing field `content`")
        return cls(
            content=parse_content(data["content"]),
            description=_optional(data, "description", expect_string),
            required=_optional(data, "required", expect_bool),
        )


RequestBodyOrReference = Union[RequestBody, Reference]


def parse_request_body_or_reference(data: Any) -> RequestBodyOrReference:
    """Read a request body object, or a reference to one."""
    return _first_fitting(
        data, (RequestBody.from_dict, Reference.from_dict), "RequestBodyOrReference"
    )


@dataclass(frozen=True)
class Response:
    """A single response of an operation."""

    description: str | None = None
    headers: dict[str, HeaderOrReference] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Response:
        """Read a response object."""
        data = expect_mapping(data)
        return cls(
            description=_optional(data, "description", expect_string),
            headers=_optional(
                data,
                "headers",
                lambda value: {
                    expect_string(name): parse_header_or_reference(header)
                    for name, header in expect_mapping(value).items()
                },
            ),
        )


ResponseOrReference = Union[Reference, Response]


def parse_response_or_reference(data: Any) -> ResponseOrReference:
    """Read a reference to a response, or a response object."""
    return _first_fitting(data, (Reference.from_dict, Response.from_dict), "ResponseOrReference")


@dataclass(frozen=True)
class Responses:
    """The responses of an operation keyed by status code, plus a default."""

    codes: dict[HttpStatusCode, ResponseOrReference]
    default: Response | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Responses:
        """Read a responses object; every key but ``default`` is a status code."""
        data = expect_mapping(data)
        codes = {
            parse_status_code(key): parse_response_or_reference(value)
            for key, value in data.items()
            if key != "default"
        }
        return cls(codes=codes, default=_optional(data, "default", Response.from_dict))


@dataclass(frozen=True)
class Operation:
    """A single API operation on a path."""

    tags: tuple[str, ...] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDoc | None = None
    operation_id: str | None = None
    parameters: tuple[ParameterOrReference, ...] | None = None
    request_body: RequestBodyOrReference | None = None
    responses: Responses | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Operation:
        """Read an operation object."""
        data = expect_mapping(data)
        return cls(
            tags=_optional(data, "tags", lambda value: _sequence(value, expect_string)),
            summary=_optional(data, "summary", expect_string),
            description=_optional(data, "description", expect_string),
            external_docs=_optional(data, "externalDocs", ExternalDoc.from_dict),
            operation_id=_optional(data, "operationId", expect_string),
            parameters=_optional(
                data,
                "parameters",
                lambda value: _sequence(value, parse_parameter_or_reference),
            ),
            request_body=_optional(data, "requestBody", parse_request_body_or_reference),
            responses=_optional(data, "responses", Responses.from_dict),
        )