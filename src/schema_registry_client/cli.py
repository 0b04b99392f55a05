"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from schema_registry_client.command_execution import (
    CommandExecutionError,
    CommandOutcome,
    CommandRequest,
    RegistryCommand,
    execute_registry_command,
)
from schema_registry_client.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-registry-client")
@click.option("--verbose", is_flag=True, default=False, help="Log request details to stderr.")
def cli(verbose: bool) -> None:
    """Register and resolve schemas in a remote schema registry."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML client configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML client configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _schema_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by commands that send schema content."""
    decorators = (
        click.option(
            "--config",
            "config_path",
            required=True,
            type=click.Path(path_type=str),
            help="Path to YAML/JSON client configuration file",
        ),
        click.option("--name", required=True, help="Schema name"),
        click.option("--group", default=None, help="Schema group (defaults to registry.group)"),
        click.option(
            "--serialization-type",
            default=None,
            help="Serialization type (defaults to registry.serialization_type)",
        ),
        click.option("--schema", "schema_text", default=None, help="Inline schema content"),
        click.option(
            "--schema-file",
            "schema_path",
            default=None,
            type=click.Path(path_type=str),
            help="Path to a file holding the schema content",
        ),
    )
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


@cli.command(name="register")
@_schema_options
def register(
    config_path: str,
    name: str,
    group: str | None,
    serialization_type: str | None,
    schema_text: str | None,
    schema_path: str | None,
) -> None:
    """Register schema content as a new version under group/name."""
    outcome = _execute(
        CommandRequest(
            config_path=config_path,
            command=RegistryCommand.REGISTER,
            name=name,
            group=group,
            serialization_type=serialization_type,
            schema_text=schema_text,
            schema_path=schema_path,
        )
    )
    click.echo(json.dumps(dict(outcome.payload), indent=2))


@cli.command(name="get-id")
@_schema_options
def get_id(
    config_path: str,
    name: str,
    group: str | None,
    serialization_type: str | None,
    schema_text: str | None,
    schema_path: str | None,
) -> None:
    """Look up the id of registered schema content."""
    outcome = _execute(
        CommandRequest(
            config_path=config_path,
            command=RegistryCommand.GET_ID,
            name=name,
            group=group,
            serialization_type=serialization_type,
            schema_text=schema_text,
            schema_path=schema_path,
        )
    )
    click.echo(json.dumps(dict(outcome.payload), indent=2))


@cli.command(name="get-schema")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON client configuration file",
)
@click.option("--id", "schema_id", required=True, help="Schema id")
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the schema content verbatim to this file",
)
def get_schema(config_path: str, schema_id: str, output_path: str | None) -> None:
    """Fetch schema content and identity by id."""
    outcome = _execute(
        CommandRequest(
            config_path=config_path,
            command=RegistryCommand.GET_SCHEMA,
            schema_id=schema_id,
        )
    )
    if output_path is None:
        click.echo(json.dumps(dict(outcome.payload), indent=2))
        return
    try:
        Path(output_path).write_bytes((outcome.schema_content or "").encode("utf-8"))
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(outcome.payload["schema_properties"], indent=2))


def _execute(request: CommandRequest) -> CommandOutcome:
    try:
        return execute_registry_command(request)
    except CommandExecutionError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
