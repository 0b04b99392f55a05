"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-registry.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Client configuration template for schema-registry-client.
# Replace every <REQUIRED> placeholder before running register, get-id or get-schema.
# Uncomment <OPTIONAL> entries only when your setup needs them.

registry:
  # Service endpoint, for example https://mynamespace.servicebus.windows.net
  endpoint: "<REQUIRED>"
  # Default schema group used when a command omits --group.
  # group: "<OPTIONAL>"
  # Serialization type of registered schemas; the group must accept it.
  serialization_type: "avro"

credential:
  # Choose exactly one bearer token source.
  token_env: "SCHEMA_REGISTRY_TOKEN"
  # token: "<OPTIONAL>"

client:
  # user_agent_prefix: "<OPTIONAL>"
  timeout_seconds: 30
  # api_version: "2020-09-01-preview"
  # token_scope: "https://eventhubs.azure.net/.default"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML client configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder client configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Client configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
