"""REST operations of the schema registry service."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from schema_registry_client.constants import SERIALIZATION_TYPE_HEADER

from .service_errors import RequestValidationError, ServiceRequestError, raise_for_service_status

logger = logging.getLogger(__name__)


class SchemaOperations:
    """Issue registry requests and return successful raw responses.

    Non-success statuses are raised as ServiceError subclasses; transport
    failures as ServiceRequestError.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_version: str) -> None:
        self._http_client = http_client
        self._api_version = api_version

    async def register(
        self, group: str, name: str, serialization_type: str, content: str
    ) -> httpx.Response:
        """PUT the schema content, creating a new version under group/name."""
        _require_arguments(
            group=group, name=name, serialization_type=serialization_type, content=content
        )
        return await self._send_schema_content("PUT", group, name, serialization_type, content)

    async def query_id_by_content(
        self, group: str, name: str, serialization_type: str, content: str
    ) -> httpx.Response:
        """POST the schema content to resolve the id of an identical registered schema."""
        _require_arguments(
            group=group, name=name, serialization_type=serialization_type, content=content
        )
        return await self._send_schema_content("POST", group, name, serialization_type, content)

    async def get_by_id(self, schema_id: str) -> httpx.Response:
        """GET the content of the schema with the given id."""
        _require_arguments(schema_id=schema_id)
        return await self._send(
            "GET",
            f"/$schemagroups/getSchemaById/{_quote_segment(schema_id)}",
        )

    async def _send_schema_content(
        self,
        method: str,
        group: str,
        name: str,
        serialization_type: str,
        content: str,
    ) -> httpx.Response:
        return await self._send(
            method,
            f"/$schemagroups/{_quote_segment(group)}/schemas/{_quote_segment(name)}",
            content=content.encode("utf-8"),
            headers={
                SERIALIZATION_TYPE_HEADER: serialization_type,
                "Content-Type": "application/json",
            },
        )

    async def _send(
        self,
        method: str,
        path: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug("Sending %s %s", method, path)
        try:
            response = await self._http_client.request(
                method,
                path,
                params={"api-version": self._api_version},
                content=content,
                headers=headers,
            )
        except httpx.TransportError as exc:
            raise ServiceRequestError(f"{method} {path} failed: {exc}") from exc
        logger.debug("Received %s for %s %s", response.status_code, method, path)
        raise_for_service_status(response)
        return response


def _require_arguments(**arguments: object) -> None:
    for argument_name, value in arguments.items():
        if value is None:
            raise RequestValidationError(f"'{argument_name}' cannot be null.")


def _quote_segment(value: str) -> str:
    return quote(value, safe="")
