"""Main CLI application."""

import logging

import typer
from rich.markup import escape

from vincheck import __version__
from vincheck.cli.ui import console, create_result_table, error_panel, success_panel
from vincheck.core.checkdigit import compute_check_digit
from vincheck.core.normalize import normalize as normalize_vin
from vincheck.core.validator import validate as validate_vin
from vincheck.exceptions import CheckDigitError
from vincheck.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="vincheck",
    help="Validate Vehicle Identification Numbers (ISO 3779).",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
) -> None:
    """vincheck - ISO 3779 VIN validation."""
    if version:
        console.print(f"vincheck v{__version__}")
        raise typer.Exit()


@app.command()
def validate(
    vin: str = typer.Argument(..., help="VIN to check; spaces and hyphens are ignored"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Write debug log"),
) -> None:
    """Validate length, characters and check digit of a VIN."""
    if verbose:
        setup_logging()

    result = validate_vin(vin)
    logger.info("CLI validate: vin=%s valid=%s", result.vin, result.is_valid)

    if json_output:
        typer.echo(result.model_dump_json())
    else:
        console.print()
        if result.is_valid:
            console.print(success_panel(escape(result.describe())))
        else:
            console.print(error_panel(escape(result.describe())))
        console.print(create_result_table(result))
        console.print()

    if not result.is_valid:
        raise typer.Exit(1)


@app.command("check-digit")
def check_digit(
    vin: str = typer.Argument(..., help="17-character VIN"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Write debug log"),
) -> None:
    """Compute the ISO 3779 check digit of a VIN."""
    if verbose:
        setup_logging()

    try:
        digit = compute_check_digit(normalize_vin(vin))
    except CheckDigitError as e:
        logger.debug("Check digit failed: %s", e.message)
        console.print(error_panel(escape(e.message), e.details))
        raise typer.Exit(1)

    typer.echo(digit)


@app.command()
def normalize(
    text: str = typer.Argument(..., help="Free-form VIN input"),
) -> None:
    """Print the normalized form of a VIN (uppercase, no spaces or hyphens)."""
    typer.echo(normalize_vin(text))


if __name__ == "__main__":
    app()
