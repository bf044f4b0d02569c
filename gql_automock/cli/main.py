#!/usr/bin/env python3
"""
Command-line interface for gql_automock.

Generates mock operation results from a schema file, lists the object types
a schema declares, and inspects configuration.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import AutoMockSettings, ConfigLoader, LogLevel, load_mock_config
from ..exceptions import AutoMockError, ConfigError
from ..logging import cleanup_logging, setup_logging
from ..mock import MockConfig, MockDataGenerator, mock_operation, should_mock
from ..schema import OperationKind, analyze_schema
from .formatting import create_formatter, render_data


def _read_schema(schema_file: str) -> str:
    try:
        return Path(schema_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read schema file {schema_file}: {e}", path=schema_file) from e


@click.group()
@click.version_option(version=__version__, prog_name="gql-automock")
@click.option(
    "--settings",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (YAML or JSON)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, settings: Optional[str], verbose: bool) -> None:
    """gql-automock - fake GraphQL operation results from a schema."""
    ctx.ensure_object(dict)
    formatter = create_formatter(verbose=verbose)

    try:
        app_settings = ConfigLoader().load_settings(settings)
    except AutoMockError as e:
        formatter.print_error(str(e))
        ctx.exit(1)

    if verbose:
        app_settings.logging.level = LogLevel.DEBUG
    setup_logging(app_settings.logging)
    ctx.call_on_close(cleanup_logging)

    ctx.obj["settings"] = app_settings
    ctx.obj["formatter"] = formatter
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("operation_name")
@click.option(
    "--kind",
    "-k",
    type=click.Choice([kind.value for kind in OperationKind]),
    default=OperationKind.QUERY.value,
    show_default=True,
    help="Root operation type",
)
@click.option(
    "--mock-config",
    "-m",
    type=click.Path(exists=True, dir_okay=False),
    help="Mock configuration file (YAML or JSON)",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write result to file")
@click.pass_context
def mock(
    ctx: click.Context,
    schema_file: str,
    operation_name: str,
    kind: str,
    mock_config: Optional[str],
    seed: Optional[int],
    output_format: str,
    output: Optional[str],
) -> None:
    """Generate mock data for OPERATION_NAME in SCHEMA_FILE."""
    settings: AutoMockSettings = ctx.obj["settings"]
    formatter = ctx.obj["formatter"]

    try:
        config = load_mock_config(mock_config) if mock_config else MockConfig()
        if not should_mock(config, operation_name):
            formatter.print_error(f"Mocking is disabled for {operation_name}")
            ctx.exit(1)

        generation = settings.generation
        if seed is not None:
            generation = generation.model_copy(update={"seed": seed})
        generator = MockDataGenerator.from_settings(generation)

        formatter.print_info(f"Mocking {kind}.{operation_name} from {schema_file}")
        data = mock_operation(
            _read_schema(schema_file), kind, operation_name, config, generator=generator
        )
    except AutoMockError as e:
        formatter.print_error(str(e))
        ctx.exit(1)

    text = render_data(data, output_format)
    if output:
        Path(output).write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
        formatter.print_success(f"Wrote {kind}.{operation_name} mock to {output}")
    else:
        click.echo(text.rstrip("\n"))


@cli.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def types(ctx: click.Context, schema_file: str) -> None:
    """List the object types declared in SCHEMA_FILE."""
    formatter = ctx.obj["formatter"]

    try:
        catalog = analyze_schema(_read_schema(schema_file))
    except AutoMockError as e:
        formatter.print_error(str(e))
        ctx.exit(1)

    formatter.print_catalog(catalog, title=f"{len(catalog)} object types")


@cli.group()
def config() -> None:
    """Configuration management and validation."""
    pass


@config.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, output_format: str) -> None:
    """Show the effective settings."""
    settings: AutoMockSettings = ctx.obj["settings"]
    click.echo(render_data(settings.model_dump(mode="json"), output_format).rstrip("\n"))


@config.command()
@click.argument("mock_config_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def validate(ctx: click.Context, mock_config_file: str) -> None:
    """Validate a mock configuration file."""
    formatter = ctx.obj["formatter"]

    try:
        mock_config = load_mock_config(mock_config_file)
    except AutoMockError as e:
        formatter.print_error(f"Configuration validation failed: {e}")
        ctx.exit(1)

    field_count = sum(len(type_config.fields) for type_config in mock_config.types.values())
    formatter.print_success(f"Mock config '{mock_config_file}' is valid")
    click.echo(f"  Types configured: {len(mock_config.types)}")
    click.echo(f"  Fields configured: {field_count}")
    click.echo(f"  Operations configured: {len(mock_config.operations)}")
    click.echo(f"  Mocking enabled: {mock_config.enabled is not False}")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    sys.exit(main())
