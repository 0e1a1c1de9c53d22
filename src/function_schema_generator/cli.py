"""Command line interface entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from function_schema_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from function_schema_generator.document_rendering import JsonDocumentRenderer
from function_schema_generator.generation import (
    GenerationError,
    generate,
    generate_batch,
    resolve_target,
)
from function_schema_generator.schema_building import CyclicTypeError
from function_schema_generator.type_introspection import IntrospectionUnavailable


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="function-schema-generator")
def cli() -> None:
    """Function-calling JSON schema generator."""


@cli.command(name="generate")
@click.option(
    "--target",
    "target_reference",
    required=True,
    help="Root type to describe, as package.module:ClassName",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the document to this file instead of standard output",
)
@click.option(
    "--compact",
    is_flag=True,
    default=False,
    help="Render single-line JSON instead of indented JSON.",
)
def generate_command(target_reference: str, output_path: str | None, compact: bool) -> None:
    """Generate the function-calling schema document for one type."""
    try:
        target = resolve_target(target_reference)
        outcome = generate(target, renderer=JsonDocumentRenderer(indent=None if compact else 2))
    except (GenerationError, IntrospectionUnavailable, CyclicTypeError) as exc:
        raise CliError(str(exc)) from exc
    if not outcome.is_ok:
        raise CliError(f"Serialization failed: {outcome.error_message}")

    if output_path is None:
        click.echo(outcome.text)
        return
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(outcome.text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
def run_generation(config_path: str) -> None:
    """Generate schema documents for every configured target."""
    try:
        settings = load_configuration(config_path)
        outcome = generate_batch(settings)
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc
    for path in outcome.written_paths:
        click.echo(str(path))


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
