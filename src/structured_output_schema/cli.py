"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from structured_output_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from structured_output_schema.generation_strategies import DEFAULT_STRATEGY, STRATEGY_NAMES
from structured_output_schema.rendering import (
    RenderError,
    RenderRequest,
    dump_schema_document,
    render_schema_document,
    render_targets,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="structured-output-schema")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """JSON Schema generator for structured-output consumers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate")
@click.option(
    "--type",
    "type_reference",
    required=True,
    help="Type to describe, as 'package.module:QualName'",
)
@click.option(
    "--strategy",
    type=click.Choice(STRATEGY_NAMES, case_sensitive=False),
    default=DEFAULT_STRATEGY,
    show_default=True,
    help="Schema generation strategy",
)
@click.option(
    "--indent",
    type=click.IntRange(min=1),
    default=None,
    help="Pretty-print with this many spaces",
)
@click.option(
    "--response-format-name",
    default=None,
    help="Wrap the schema in a json_schema response_format envelope with this name",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the schema to this file instead of standard output",
)
def generate(
    type_reference: str,
    strategy: str,
    indent: int | None,
    response_format_name: str | None,
    output_path: str | None,
) -> None:
    """Generate the JSON schema of one type."""
    try:
        document = render_schema_document(
            RenderRequest(
                type_reference=type_reference,
                strategy=strategy,
                response_format_name=response_format_name,
            )
        )
    except RenderError as exc:
        raise CliError(str(exc)) from exc

    text = dump_schema_document(document, indent=indent)
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    try:
        destination.write_text(text + "\n", encoding="utf-8")
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
    help="Path to the YAML render configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML render configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON render configuration file",
)
def render(config_path: str) -> None:
    """Render every schema target listed in the configuration file."""
    try:
        configuration = load_configuration(config_path)
        rendered = render_targets(configuration)
    except (ConfigurationError, RenderError) as exc:
        raise CliError(str(exc)) from exc
    for schema in rendered:
        click.echo(str(schema.output_path))


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
