"""
Aurora Verdict CLI - Main Application

This is the main entry point for the aurora-verdict command-line interface.
"""

import logging
import os

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.core import TyperGroup

from aurora_verdict.api.core.config import (
    ENV_POLE_LATITUDE,
    ENV_POLE_LONGITUDE,
    ENV_REFERENCE_CITIES,
    check_pole_review,
)
from aurora_verdict.api.core.exceptions import AuroraVerdictError
from aurora_verdict.api.engine import get_default_engine
from aurora_verdict.api.reference.cities import DEFAULT_REFERENCE_CITIES_PATH
from aurora_verdict.cli.commands import forecast, geomagnetic
from aurora_verdict.cli.utils.output import print_error, print_json


logger = logging.getLogger(__name__)


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="aurora-verdict",
    help="Aurora visibility prediction from space weather telemetry",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Aurora Verdict

    Decide whether, how brightly and in what form an aurora will be visible.

    [bold green]Examples:[/bold green]

        aurora-verdict verdict --kp 5 --bz=-8 --bt 12 --speed 550 --density 8
        aurora-verdict predict --lat 69.6 --lon 18.9 --kp 3
        aurora-verdict cities --kp 6

    [bold blue]Environment Variables:[/bold blue]

        AURORA_POLE_LATITUDE    - Magnetic pole latitude override
        AURORA_POLE_LONGITUDE   - Magnetic pole longitude override
        AURORA_REFERENCE_CITIES - Path to an alternative reference city file
    """
    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        logger.debug("Verbose mode enabled")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from aurora_verdict.cli import __version__

    console.print(f"[bold]Aurora Verdict[/bold] version [cyan]{__version__}[/cyan]")


@app.command("config", rich_help_panel="Utilities")
def show_config(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the active engine configuration.

    Displays the magnetic pole, its review window and the reference city dataset.

    Example:
        aurora-verdict config
        aurora-verdict config --json
    """
    try:
        config = get_default_engine().config
    except AuroraVerdictError as e:
        print_error(f"Failed to load configuration: {e}")
        raise typer.Exit(code=1) from e

    pole = config.pole
    cities_path = os.environ.get(ENV_REFERENCE_CITIES) or str(DEFAULT_REFERENCE_CITIES_PATH)
    pole_current = check_pole_review(pole)

    if json_output:
        print_json(
            {
                "pole": {
                    "latitude": pole.latitude,
                    "longitude": pole.longitude,
                    "epoch": pole.epoch,
                    "reviewBy": pole.review_by,
                    "current": pole_current,
                },
                "referenceCities": {
                    "count": len(config.reference_cities),
                    "path": cities_path,
                },
            }
        )
        return

    table = Table(title="[bold]Engine Configuration[/bold]", header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Environment Variable", style="dim")

    table.add_row("Pole Latitude", f"{pole.latitude:.2f}°", ENV_POLE_LATITUDE)
    table.add_row("Pole Longitude", f"{pole.longitude:.2f}°", ENV_POLE_LONGITUDE)
    review = f"{pole.epoch} (review by {pole.review_by})"
    table.add_row("Pole Epoch", review if pole_current else f"[yellow]{review} - overdue[/yellow]", "")
    table.add_row("Reference Cities", str(len(config.reference_cities)), "")
    table.add_row("City Dataset", cities_path, ENV_REFERENCE_CITIES)

    console.print(table)


# Forecast
app.command("verdict", rich_help_panel="Forecast")(forecast.verdict)
app.command("predict", rich_help_panel="Forecast")(forecast.predict)

# Geomagnetic
app.command("transform", rich_help_panel="Geomagnetic")(geomagnetic.transform)
app.command("oval", rich_help_panel="Geomagnetic")(geomagnetic.oval)
app.command("cities", rich_help_panel="Geomagnetic")(geomagnetic.cities)


if __name__ == "__main__":
    app()
