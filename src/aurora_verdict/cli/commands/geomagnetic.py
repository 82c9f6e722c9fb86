"""
Geomagnetic Commands

Coordinate transform, auroral oval position and reference city visibility.
"""

import typer
from rich.table import Table

from aurora_verdict.api.core.enums import QualityTier
from aurora_verdict.api.core.exceptions import AuroraVerdictError
from aurora_verdict.api.geomagnetic.coordinates import format_geomagnetic
from aurora_verdict.api.engine import get_default_engine
from aurora_verdict.cli.utils.output import (
    console,
    format_kp_index,
    format_quality_tier,
    key_value_table,
    print_error,
    print_info,
    print_json,
)


def transform(
    latitude: float = typer.Option(..., "--lat", help="Geographic latitude in degrees (negative for south)"),
    longitude: float = typer.Option(..., "--lon", help="Geographic longitude in degrees (negative for west)"),
    kp: float | None = typer.Option(None, "--kp", help="Also assess visibility at this Kp index"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Convert geographic coordinates to geomagnetic coordinates.

    Example:
        aurora-verdict transform --lat 64.8 --lon=-147.7
        aurora-verdict transform --lat 64.8 --lon=-147.7 --kp 4 --json
    """
    engine = get_default_engine()
    try:
        if kp is None:
            point = engine.to_geomagnetic(latitude, longitude)
            description = None
        else:
            description = engine.describe_location(latitude, longitude, kp)
            point = description.geomagnetic
    except AuroraVerdictError as e:
        print_error(f"Failed to transform coordinates: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(description.to_dict() if description else {"geomagnetic": point.to_dict()})
        return

    rows = [
        ("Geographic", f"{latitude:.4f}, {longitude:.4f}"),
        ("Geomagnetic Latitude", f"{point.latitude:.2f}°"),
        ("Geomagnetic Longitude", f"{point.longitude:.2f}°"),
        ("Geomagnetic (DMS)", format_geomagnetic(point)),
    ]
    if description is not None and kp is not None:
        rows.append(("Kp", format_kp_index(kp)))
        rows.append(("Visibility", format_quality_tier(description.visibility.quality_tier)))
        rows.append(("Message", description.visibility.message))

    console.print(key_value_table("Geomagnetic Coordinates", rows))


def oval(
    kp: float = typer.Option(..., "--kp", help="Planetary Kp index (0-9)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the auroral oval boundaries for a Kp index.

    Example:
        aurora-verdict oval --kp 5
    """
    try:
        geometry = get_default_engine().oval_geometry(kp)
    except AuroraVerdictError as e:
        print_error(f"Failed to calculate oval: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json({"kp": kp, "ovalPosition": geometry.to_dict()})
        return

    console.print(
        key_value_table(
            f"Auroral Oval at Kp {kp:g}",
            [
                ("Equatorward Edge", f"{geometry.equatorward_edge:.1f}°"),
                ("Center", f"{geometry.center_latitude:.1f}°"),
                ("Poleward Edge", f"{geometry.poleward_edge:.1f}°"),
            ],
        )
    )
    print_info("Latitudes are geomagnetic; the same oval applies in both hemispheres")


def cities(
    kp: float = typer.Option(..., "--kp", help="Planetary Kp index (0-9)"),
    min_tier: QualityTier = typer.Option(QualityTier.POOR, "--min-tier", help="Lowest visibility tier to list"),
    show_all: bool = typer.Option(False, "--all", help="List every reference city, visible or not"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    List reference cities where the aurora is visible at a Kp index.

    Example:
        aurora-verdict cities --kp 5
        aurora-verdict cities --kp 8 --min-tier good --json
    """
    engine = get_default_engine()
    try:
        if show_all:
            entries = engine.city_visibility(kp)
        else:
            entries = engine.visible_cities(kp, min_tier)
    except AuroraVerdictError as e:
        print_error(f"Failed to assess cities: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json([entry.to_dict() for entry in entries])
        return

    if not entries:
        print_info(f"No reference cities see the aurora at Kp {kp:g}")
        return

    table = Table(title=f"[bold]Reference Cities at Kp {kp:g}[/bold]", header_style="bold magenta")
    table.add_column("City", style="cyan")
    table.add_column("Geomag Lat", justify="right")
    table.add_column("Visibility")
    table.add_column("Message", style="dim")

    for entry in entries:
        table.add_row(
            entry.city.name,
            f"{entry.geomagnetic.latitude:.2f}°",
            format_quality_tier(entry.visibility.quality_tier),
            entry.visibility.message,
        )

    console.print(table)
