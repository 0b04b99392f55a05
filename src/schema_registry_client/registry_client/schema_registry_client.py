"""Async client facade for the schema registry service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from schema_registry_client.configuration.runtime_settings import ClientOptions
from schema_registry_client.schema_records import (
    Schema,
    SchemaProperties,
    convert_schema_id_response,
    convert_schema_response,
)
from schema_registry_client.transport.credentials import TokenCredential
from schema_registry_client.transport.pipeline import build_http_client, build_user_agent
from schema_registry_client.transport.rest_operations import SchemaOperations

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class SchemaRegistryClient:
    """Client for registering schemas and resolving them by content or id.

    The HTTP connection pool is opened on first use and released by
    `close()` or by leaving an `async with` block:

        async with SchemaRegistryClient(endpoint, credential) as client:
            properties = await client.register_schema("group", "name", "avro", content)
            schema = await client.get_schema(properties.schema_id)
    """

    def __init__(
        self,
        endpoint: str,
        credential: TokenCredential,
        options: ClientOptions | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._credential = credential
        self._options = options or ClientOptions()
        self._transport = transport
        self._user_agent = build_user_agent(self._options.user_agent_prefix)
        self._http_client: httpx.AsyncClient | None = None
        self._operations: SchemaOperations | None = None

    @property
    def endpoint(self) -> str:
        """Service endpoint URL, as given at construction."""
        return self._endpoint

    @property
    def options(self) -> ClientOptions:
        return self._options

    @property
    def user_agent(self) -> str:
        """User-Agent value sent with every request."""
        return self._user_agent

    async def register_schema(
        self, group: str, name: str, serialization_type: str, content: str
    ) -> SchemaProperties:
        """Register a schema, creating version 1 or the next version of group/name.

        Raises:
          RequestValidationError: If an argument is None.
          ServiceError: If the service rejects the schema, e.g. an unaccepted
            serialization type for the group.
          MalformedResponseError: If the success response lacks identity fields.
        """
        response = await self._schema_operations().register(
            group, name, serialization_type, content
        )
        properties = convert_schema_id_response(response)
        logger.debug(
            "Registered %s/%s as version %s (id %s)",
            group,
            name,
            properties.version,
            properties.schema_id,
        )
        return properties

    async def get_schema_id(
        self, group: str, name: str, serialization_type: str, content: str
    ) -> SchemaProperties:
        """Return the identity of a registered schema matching group, name, type and content.

        Raises:
          ResourceNotFoundError: If no exact match is registered.
        """
        response = await self._schema_operations().query_id_by_content(
            group, name, serialization_type, content
        )
        return convert_schema_id_response(response)

    async def get_schema(self, schema_id: str) -> Schema:
        """Fetch schema content and identity by schema id.

        Raises:
          RequestValidationError: If schema_id is None.
          ResourceNotFoundError: If no schema has the id.
        """
        response = await self._schema_operations().get_by_id(schema_id)
        return convert_schema_response(response)

    async def close(self) -> None:
        """Release the connection pool. Safe to call more than once."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._operations = None
            logger.debug("Closed HTTP client for %s", self._endpoint)

    async def __aenter__(self) -> SchemaRegistryClient:
        self._schema_operations()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _schema_operations(self) -> SchemaOperations:
        if self._operations is None:
            self._http_client = build_http_client(
                self._endpoint,
                self._credential,
                self._options,
                transport=self._transport,
            )
            self._operations = SchemaOperations(self._http_client, self._options.api_version)
        return self._operations
