"""
Odometer CLI - Main application entry point.

Prints a counter value and the values that follow it:

    $ odometer A9-Z9 --steps 2
    A9-Z9
    B1-A1
    B1-A2
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from odometer_app import __version__
from odometer_app.config.defaults import CounterParams
from odometer_app.config.loader import ConfigLoader
from odometer_app.config.validation import ConfigValidator
from odometer_app.counter import Number
from odometer_app.errors import ConfigurationError, CounterParseError
from odometer_app.logging.config import configure_logging

app = typer.Typer(
    name="odometer",
    help="Advance a letter/numeral counter such as A1-B2-Z9",
    no_args_is_help=False,
)

err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"odometer {__version__}")
        raise typer.Exit()


@app.command()
def main(
    value: str = typer.Argument(
        "",
        help="Starting value, most significant group first (default: A1)",
    ),
    steps: int = typer.Option(
        1,
        "--steps",
        "-n",
        min=0,
        help="How many times to advance the counter",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on an invalid starting value instead of using A1",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Directory holding odometer.yaml",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Print VALUE, then each value after advancing it STEPS times."""
    overrides: dict = {"counter": {}, "logging": {}}
    if strict:
        overrides["counter"]["strict_parse"] = True
    if log_level is not None:
        overrides["logging"]["level"] = log_level
    if json_logs:
        overrides["logging"]["format_json"] = True

    try:
        config = ConfigLoader.create(config_dir).merge_config(overrides)
    except ConfigurationError as e:
        err_console.print(f"[red]Invalid config:[/red] {e}")
        raise typer.Exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        for error in errors:
            err_console.print(f"[red]Invalid config:[/red] {error.field}: {error.message} (value: {error.value!r})")
        raise typer.Exit(1)

    logging_config = config["logging"]
    configure_logging(
        level=logging_config["level"],
        format_json=logging_config["format_json"],
        include_timestamp=logging_config.get("include_timestamp", True),
    )

    try:
        number = Number(value, CounterParams.from_dict(config["counter"]))
    except CounterParseError as e:
        err_console.print(f"[red]Invalid value:[/red] {e}")
        raise typer.Exit(1)

    typer.echo(number.identifier())
    for _ in range(steps):
        typer.echo(number.advance().current)


if __name__ == "__main__":
    app()
