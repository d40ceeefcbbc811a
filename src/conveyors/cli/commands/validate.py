"""The `validate` command and shared load-error rendering.

Runs every validator tier on a configuration file and prints the findings
grouped by severity. The exit code is the validation result's exit code,
so the command can gate a CI job on a conveyor configuration.
"""

from pathlib import Path
from typing import Annotated

import typer

from conveyors.application.config import (
    ConfigError,
    config_to_inputs,
    config_to_parameters,
    get_product_profile,
    load_config,
)
from conveyors.application.config.validators import (
    ValidationMessage,
    ValidationResult,
    default_registry,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Configuration file to check"),
    ],
    product: Annotated[
        str | None,
        typer.Option("--product", "-p", help="Product key (overrides the file)"),
    ] = None,
) -> None:
    """Check a conveyor configuration without calculating it.

    Reports schema problems (bad JSON, unknown fields, invalid enum values),
    field range errors, application advisories and belt tracking risk.

    Exit codes:
        0 - No errors or warnings
        1 - Blocking errors, or the file could not be loaded
        2 - Warnings only

    Example:
        conveyors validate line-3-infeed.json
    """
    typer.echo(f"Validating {config_file}...\n")

    try:
        config = load_config(config_file)
        parameters = config_to_parameters(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    registry = default_registry()
    result = registry.validate_all(
        config_to_inputs(config.inputs),
        parameters,
        get_product_profile(product or config.product_key),
    )

    _print_findings(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]

    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: {d.get('message', '')}"
            for d in error.details
        ]

    if error.error_type == "validation" and error.details:
        lines = []
        for detail in error.details:
            lines.append(f"{detail.get('path', '?')}: {detail.get('message', '')}")
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                lines.append(f"  Value: {value!r}")
        return lines

    return [error.message]


def display_load_error(error: ConfigError) -> None:
    """Print a ConfigError to stderr, formatted for its error type."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(f"  {line}", err=True)
    typer.echo("\nValidation failed.", err=True)


def _finding(message: ValidationMessage, with_severity: bool = False) -> str:
    prefix = f"[{message.severity.value}] " if with_severity else ""
    return f"  {prefix}{message.field}: {message.message}"


def _print_findings(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        typer.echo("\n".join(_finding(e) for e in result.errors) + "\n", err=True)

    if result.warnings:
        typer.echo("Warnings:")
        typer.echo("\n".join(_finding(w, with_severity=True) for w in result.warnings) + "\n")

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if not result.is_valid:
        typer.echo(f"Validation failed: {counts}", err=True)
    elif result.warnings:
        typer.echo(f"Validation passed: {counts}")
    else:
        typer.echo("Validation passed. No findings.")
