"""Registry command use-case service."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from pathlib import Path

import httpx

from schema_registry_client.configuration import (
    Configuration,
    ConfigurationError,
    CredentialSettings,
    load_configuration,
)
from schema_registry_client.registry_client import SchemaRegistryClient
from schema_registry_client.schema_records import SchemaDescription
from schema_registry_client.transport.credentials import StaticTokenCredential, TokenCredential
from schema_registry_client.transport.service_errors import SchemaRegistryError

from .command_contracts import CommandOutcome, CommandRequest, RegistryCommand

logger = logging.getLogger(__name__)

CredentialFactory = Callable[[CredentialSettings], TokenCredential]


class CommandExecutionError(Exception):
    """Raised when a registry command cannot be completed."""


def execute_registry_command(
    request: CommandRequest,
    *,
    credential_factory: CredentialFactory | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CommandOutcome:
    """Load configuration, run one registry operation and return its outcome."""
    resolved_credential_factory = credential_factory or resolve_credential
    try:
        configuration = load_configuration(request.config_path)
        credential = resolved_credential_factory(configuration.credential)
    except (ConfigurationError, ValueError) as exc:
        raise CommandExecutionError(str(exc)) from exc

    client = SchemaRegistryClient(
        configuration.registry.endpoint,
        credential,
        configuration.client,
        transport=transport,
    )
    try:
        return asyncio.run(_run_command(client, configuration, request))
    except (SchemaRegistryError, OSError, ValueError) as exc:
        raise CommandExecutionError(str(exc)) from exc


def resolve_credential(settings: CredentialSettings) -> TokenCredential:
    """Build a static bearer credential from an inline token or an environment variable."""
    if settings.token:
        return StaticTokenCredential(settings.token)
    token = os.environ.get(settings.token_env or "", "").strip()
    if not token:
        raise ConfigurationError(
            f"Environment variable '{settings.token_env}' does not hold a bearer token."
        )
    return StaticTokenCredential(token)


async def _run_command(
    client: SchemaRegistryClient, configuration: Configuration, request: CommandRequest
) -> CommandOutcome:
    async with client:
        if request.command is RegistryCommand.GET_SCHEMA:
            schema_id = _require_value(request.schema_id, "--id")
            schema = await client.get_schema(schema_id)
            return CommandOutcome(
                command=request.command,
                payload=schema.to_dict(),
                schema_content=schema.schema_content,
            )

        description = _resolve_schema_description(configuration, request)
        logger.debug(
            "Running %s for %s/%s", request.command.value, description.group, description.name
        )
        if request.command is RegistryCommand.REGISTER:
            properties = await client.register_schema(
                description.group,
                description.name,
                description.serialization_type,
                description.content,
            )
        else:
            properties = await client.get_schema_id(
                description.group,
                description.name,
                description.serialization_type,
                description.content,
            )
        return CommandOutcome(command=request.command, payload=properties.to_dict())


def _resolve_schema_description(
    configuration: Configuration, request: CommandRequest
) -> SchemaDescription:
    group = request.group or configuration.registry.group
    return SchemaDescription(
        group=_require_value(group, "--group (or registry.group)"),
        name=_require_value(request.name, "--name"),
        serialization_type=request.serialization_type
        or configuration.registry.serialization_type,
        content=_load_schema_content(request, configuration.path.parent),
    )


def _load_schema_content(request: CommandRequest, base_path: Path) -> str:
    if request.schema_text and request.schema_path:
        raise ValueError("Schema content must not be given both inline and as a file.")
    if request.schema_text:
        return request.schema_text
    if request.schema_path:
        schema_path = _resolve_path(base_path, request.schema_path)
        if not schema_path.exists():
            raise ValueError(f"Schema file not found: {schema_path}")
        return schema_path.read_bytes().decode("utf-8")
    raise ValueError("Schema content requires either --schema or --schema-file.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute() or candidate.exists():
        return candidate
    return (base_path / candidate).resolve()


def _require_value(value: str | None, option_name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{option_name} is required.")
    return value
