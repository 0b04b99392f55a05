"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_registry_client.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_SERIALIZATION_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_SCOPE,
)


@dataclass(frozen=True)
class ClientOptions:
    """Options applied to every request a registry client sends."""

    user_agent_prefix: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    api_version: str = DEFAULT_API_VERSION
    token_scope: str = DEFAULT_TOKEN_SCOPE


@dataclass(frozen=True)
class RegistrySettings:
    """Registry endpoint and the defaults used when a command omits them."""

    endpoint: str
    group: str | None
    serialization_type: str = DEFAULT_SERIALIZATION_TYPE


@dataclass(frozen=True)
class CredentialSettings:
    """Where the bearer token comes from: inline or an environment variable."""

    token: str | None
    token_env: str | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    registry: RegistrySettings
    credential: CredentialSettings
    client: ClientOptions
