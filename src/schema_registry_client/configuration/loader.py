"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from schema_registry_client.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_SERIALIZATION_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_SCOPE,
)

from .runtime_settings import ClientOptions, Configuration, CredentialSettings, RegistrySettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    registry = _parse_registry_section(parsed.get("registry"))
    credential = _parse_credential_section(parsed.get("credential"))
    client = _parse_client_section(parsed.get("client"))

    return Configuration(
        path=path,
        registry=registry,
        credential=credential,
        client=client,
    )


def _parse_registry_section(value: Any) -> RegistrySettings:
    section = _require_mapping(value, "registry")
    endpoint = _require_non_empty_string(section.get("endpoint"), "registry.endpoint")
    parsed_endpoint = urlparse(endpoint)
    if parsed_endpoint.scheme not in ("http", "https") or not parsed_endpoint.netloc:
        raise ConfigurationError("registry.endpoint must be an http(s) URL.")
    group = _optional_string(section.get("group"), "registry.group")
    serialization_type = _require_non_empty_string(
        section.get("serialization_type", DEFAULT_SERIALIZATION_TYPE),
        "registry.serialization_type",
    )
    return RegistrySettings(
        endpoint=endpoint,
        group=group,
        serialization_type=serialization_type,
    )


def _parse_credential_section(value: Any) -> CredentialSettings:
    section = _require_mapping(value, "credential")
    token = _optional_string(section.get("token"), "credential.token")
    token_env = _optional_string(section.get("token_env"), "credential.token_env")
    if (token is None) == (token_env is None):
        raise ConfigurationError(
            "Exactly one of credential.token or credential.token_env must be provided."
        )
    return CredentialSettings(token=token, token_env=token_env)


def _parse_client_section(value: Any) -> ClientOptions:
    if value is None:
        return ClientOptions()
    section = _require_mapping(value, "client")
    user_agent_prefix = _optional_string(
        section.get("user_agent_prefix"), "client.user_agent_prefix"
    )
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "client.timeout_seconds"
    )
    api_version = _require_non_empty_string(
        section.get("api_version", DEFAULT_API_VERSION), "client.api_version"
    )
    token_scope = _require_non_empty_string(
        section.get("token_scope", DEFAULT_TOKEN_SCOPE), "client.token_scope"
    )
    return ClientOptions(
        user_agent_prefix=user_agent_prefix,
        timeout_seconds=timeout_seconds,
        api_version=api_version,
        token_scope=token_scope,
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
