"""Conversion of registry REST responses into schema records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from schema_registry_client.constants import (
    LOCATION_HEADER,
    SCHEMA_ID_HEADER,
    SCHEMA_ID_LOCATION_HEADER,
    SCHEMA_TYPE_HEADER,
    SCHEMA_VERSION_HEADER,
)
from schema_registry_client.transport.service_errors import SchemaRegistryError

from .schema_models import Schema, SchemaProperties


class MalformedResponseError(SchemaRegistryError):
    """Raised when a success response lacks a field the service must always return."""

    def __init__(self, message: str, *, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


def convert_schema_response(response: httpx.Response) -> Schema:
    """Build a Schema from a fetch-by-id response."""
    schema = Schema(
        schema_content=response.text,
        schema_properties=_convert_properties(response),
    )
    schema._attach_response(response)  # pylint: disable=protected-access
    return schema


def convert_schema_id_response(response: httpx.Response) -> SchemaProperties:
    """Build SchemaProperties from a register or lookup-by-content response.

    The id in the JSON body takes precedence over the `x-schema-id` header.
    """
    base = _convert_properties(response)
    properties = SchemaProperties(
        schema_id=_require_body_id(response),
        serialization_type=base.serialization_type,
        version=base.version,
        location=base.location,
        location_by_id=base.location_by_id,
    )
    properties._attach_response(response)  # pylint: disable=protected-access
    return properties


def _convert_properties(response: httpx.Response) -> SchemaProperties:
    headers = response.headers
    return SchemaProperties(
        schema_id=_require_header(headers, SCHEMA_ID_HEADER, response),
        serialization_type=_require_header(headers, SCHEMA_TYPE_HEADER, response),
        version=_parse_version(_require_header(headers, SCHEMA_VERSION_HEADER, response), response),
        location=_require_header(headers, LOCATION_HEADER, response),
        location_by_id=_require_header(headers, SCHEMA_ID_LOCATION_HEADER, response),
    )


def _require_header(headers: Mapping[str, str], name: str, response: httpx.Response) -> str:
    value = headers.get(name)
    if value is None or not value.strip():
        raise MalformedResponseError(
            f"Service response is missing required header '{name}'.", response=response
        )
    return value.strip()


def _parse_version(raw_value: str, response: httpx.Response) -> int:
    try:
        version = int(raw_value)
    except ValueError as exc:
        raise MalformedResponseError(
            f"Header '{SCHEMA_VERSION_HEADER}' must be an integer, got '{raw_value}'.",
            response=response,
        ) from exc
    if version < 1:
        raise MalformedResponseError(
            f"Header '{SCHEMA_VERSION_HEADER}' must be at least 1, got {version}.",
            response=response,
        )
    return version


def _require_body_id(response: httpx.Response) -> str:
    try:
        payload: Any = response.json()
    except ValueError as exc:
        raise MalformedResponseError(
            "Service response body is not a JSON schema id document.", response=response
        ) from exc
    schema_id = payload.get("id") if isinstance(payload, Mapping) else None
    if not isinstance(schema_id, str) or not schema_id:
        raise MalformedResponseError(
            "Service response body is missing required field 'id'.", response=response
        )
    return schema_id
