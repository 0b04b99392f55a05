"""Command execution domain exports."""

from .command_contracts import CommandOutcome, CommandRequest, RegistryCommand
from .registry_command_use_case import (
    CommandExecutionError,
    execute_registry_command,
    resolve_credential,
)

__all__ = [
    "CommandRequest",
    "CommandOutcome",
    "RegistryCommand",
    "CommandExecutionError",
    "execute_registry_command",
    "resolve_credential",
]
