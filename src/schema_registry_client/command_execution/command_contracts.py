"""Command execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class RegistryCommand(str, Enum):
    """Registry operation a command invocation runs."""

    REGISTER = "register"
    GET_ID = "get-id"
    GET_SCHEMA = "get-schema"


@dataclass(frozen=True)
class CommandRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for executing one registry command."""

    config_path: str
    command: RegistryCommand
    name: str | None = None
    group: str | None = None
    serialization_type: str | None = None
    schema_text: str | None = None
    schema_path: str | None = None
    schema_id: str | None = None


@dataclass(frozen=True)
class CommandOutcome:
    """Output contract for one completed registry command."""

    command: RegistryCommand
    payload: Mapping[str, Any]
    schema_content: str | None = None
