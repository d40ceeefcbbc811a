"""Typer CLI for conveyor calculation, validation and BOM resolution."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from conveyors.application import CalculationEngine, ResolveBomCommand
from conveyors.application.config import (
    ConfigError,
    config_to_inputs,
    config_to_parameters,
    load_config,
    merge_config_with_cli,
)
from conveyors.cli.commands import display_load_error, validate_command
from conveyors.domain.services.tracking import assess
from conveyors.infrastructure import (
    CalculationReportFormatter,
    JsonExporter,
    TrackingReportFormatter,
    format_bom_copy_text,
    load_catalog,
)

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="conveyors",
    help="Calculate, validate and source belt conveyor configurations.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Belt conveyor engineering tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


@app.command()
def calculate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    length: Annotated[
        float | None,
        typer.Option("--length", "-l", help="Center-to-center length in inches"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Belt width in inches"),
    ] = None,
    speed: Annotated[
        float | None,
        typer.Option("--speed", "-s", help="Belt speed in feet per minute"),
    ] = None,
    incline: Annotated[
        float | None,
        typer.Option("--incline", "-i", help="Incline angle in degrees"),
    ] = None,
    product: Annotated[
        str | None,
        typer.Option("--product", "-p", help="Product key (overrides the file)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
) -> None:
    """Validate a configuration and compute its mechanical outputs.

    Outputs are shown even when validation finds errors.

    Exit codes:
        0 - No findings
        1 - Blocking errors
        2 - Warnings only
    """
    _check_format(output_format)
    try:
        config = merge_config_with_cli(
            load_config(config_file),
            product_key=product,
            conveyor_length_cc_in=length,
            belt_width_in=width,
            belt_speed_fpm=speed,
            conveyor_incline_deg=incline,
        )
        parameters = config_to_parameters(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = CalculationEngine().run(
        config_to_inputs(config.inputs),
        parameters,
        product_key=config.product_key,
    )

    if output_format == "json":
        _emit(JsonExporter().export_result(result), output_file)
    else:
        _emit(CalculationReportFormatter().format(result), output_file)
    raise typer.Exit(code=result.exit_code)


@app.command()
def tracking(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """Show the belt tracking recommendation and its risk factors."""
    _check_format(output_format)
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    guidance = assess(config_to_inputs(config.inputs))
    if output_format == "json":
        typer.echo(JsonExporter().export_tracking(guidance))
    else:
        typer.echo(TrackingReportFormatter().format(guidance))


@app.command()
def bom(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file with a 'bom' section"),
    ],
    catalog_file: Annotated[
        Path,
        typer.Option("--catalog", "-c", help="Path to the JSON vendor component catalog"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the BOM to a file"),
    ] = None,
) -> None:
    """Resolve the selected gearmotor into vendor part numbers.

    Exit codes:
        0 - Every component is orderable or not required
        1 - Configuration or catalog could not be loaded
        2 - One or more components are missing or pending
    """
    _check_format(output_format)
    try:
        config = load_config(config_file)
        catalog = load_catalog(catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    if config.bom is None:
        typer.echo(f"Error: {config_file} has no 'bom' section", err=True)
        raise typer.Exit(code=1)

    output = asyncio.run(ResolveBomCommand(catalog).execute(config.bom))

    if output_format == "json":
        _emit(JsonExporter().export_bom(output), output_file)
    else:
        _emit(format_bom_copy_text(output), output_file)
    raise typer.Exit(code=output.exit_code)


if __name__ == "__main__":
    app()
