"""
Aurora Forecast Commands

Compute an aurora verdict or a location-specific appearance prediction from
space weather values given on the command line.
"""

import typer

from aurora_verdict.api.core.enums import PhysicsFlag, SubstormPhase
from aurora_verdict.api.core.exceptions import AuroraVerdictError
from aurora_verdict.api.core.types import GeographicPoint, SpaceWeatherSample
from aurora_verdict.api.core.utils import format_latitude, format_longitude
from aurora_verdict.api.engine import get_default_engine
from aurora_verdict.api.verdict.coupling import coupling_description
from aurora_verdict.api.verdict.verdict import IntensityVerdict
from aurora_verdict.cli.utils.output import (
    console,
    format_category,
    format_kp_index,
    format_physics_flag,
    format_quality_tier,
    key_value_table,
    print_error,
    print_info,
    print_json,
    print_warning,
)


def _show_verdict(verdict: IntensityVerdict) -> None:
    if verdict.is_impossible:
        console.print(f"\n[bold red]{verdict.headline}[/bold red]\n")
    else:
        console.print(f"\n[bold cyan]{verdict.headline}[/bold cyan]\n")

    rows = [
        ("Intensity Score", f"{verdict.intensity_score}/100"),
        ("Strength", format_category(verdict.strength_category)),
        ("Certainty", f"{verdict.certainty}% ({verdict.certainty_label})"),
        ("Physics Check", format_physics_flag(verdict.physics_flag)),
        ("Effective Kp", format_kp_index(verdict.effective_kp)),
        (
            "Auroral Oval",
            f"{verdict.oval.equatorward_edge:.1f}° / {verdict.oval.center_latitude:.1f}° / "
            f"{verdict.oval.poleward_edge:.1f}° (edge / center / poleward)",
        ),
        ("Visibility Range", verdict.visibility_range),
        ("Aurora Type", verdict.aurora_type),
        ("Colors", verdict.aurora_colors),
        ("Structure", verdict.aurora_structure),
        ("Duration", f"{verdict.duration_hours} hours"),
        ("Alert Level", verdict.alert_level),
    ]
    if verdict.example_cities:
        rows.append(("Example Cities", ", ".join(verdict.example_cities)))
    if verdict.newell_coupling is not None:
        coupling = verdict.newell_coupling
        rows.append(("Newell Coupling", f"{coupling.coupling} ({coupling.level.value})"))
        rows.append(("Coupling Outlook", coupling_description(coupling.level)))
    if verdict.substorm_boost:
        rows.append(("Substorm Boost", f"+{verdict.substorm_boost}"))

    console.print(key_value_table("Aurora Verdict", rows))
    console.print()

    if verdict.physics_flag is not PhysicsFlag.VALID:
        print_warning(verdict.physics_notes)
    if verdict.hp30_warning:
        print_warning(verdict.hp30_warning)
    print_info(verdict.viewing_tip)


def verdict(
    kp: float = typer.Option(..., "--kp", help="Planetary Kp index (0-9)"),
    bz: float = typer.Option(..., "--bz", help="IMF Bz in nT (negative = southward)"),
    bt: float = typer.Option(..., "--bt", help="Total IMF magnitude in nT"),
    speed: float = typer.Option(..., "--speed", help="Solar wind speed in km/s"),
    density: float = typer.Option(..., "--density", help="Solar wind density in particles/cm³"),
    by: float | None = typer.Option(None, "--by", help="IMF By in nT (enables Newell coupling)"),
    hp30: float | None = typer.Option(None, "--hp30", help="Half-hourly Hp30 index (0-9)"),
    delta_b: float | None = typer.Option(None, "--delta-b", help="Ground magnetometer disturbance in nT"),
    phase: SubstormPhase | None = typer.Option(None, "--phase", help="Substorm phase"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Calculate the aurora verdict for a space weather sample.

    Example:
        aurora-verdict verdict --kp 5 --bz=-8 --bt 12 --speed 550 --density 8
        aurora-verdict verdict --kp 3 --bz=-12 --bt 15 --speed 650 --density 5 --by 4 --json
    """
    sample = SpaceWeatherSample(
        kp=kp,
        bz=bz,
        bt=bt,
        speed=speed,
        density=density,
        by=by,
        hp30=hp30,
        magnetometer_delta_b=delta_b,
        substorm_phase=phase,
    )

    try:
        result = get_default_engine().calculate_verdict(sample)
    except AuroraVerdictError as e:
        print_error(f"Failed to calculate verdict: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(result.to_dict())
    else:
        _show_verdict(result)


def predict(
    latitude: float = typer.Option(..., "--lat", help="Observer latitude in degrees (negative for south)"),
    longitude: float = typer.Option(..., "--lon", help="Observer longitude in degrees (negative for west)"),
    kp: float = typer.Option(..., "--kp", help="Planetary Kp index (0-9)"),
    bz: float | None = typer.Option(None, "--bz", help="IMF Bz in nT, attaches a verdict with --bt/--speed/--density"),
    bt: float | None = typer.Option(None, "--bt", help="Total IMF magnitude in nT"),
    speed: float | None = typer.Option(None, "--speed", help="Solar wind speed in km/s"),
    density: float | None = typer.Option(None, "--density", help="Solar wind density in particles/cm³"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Predict what the aurora will look like from a location.

    Example:
        aurora-verdict predict --lat 69.6 --lon 18.9 --kp 3
        aurora-verdict predict --lat 51.5 --lon=-0.1 --kp 8 --bz=-25 --bt 30 --speed 850 --density 20
    """
    solar_wind = (bz, bt, speed, density)
    if any(value is not None for value in solar_wind) and any(value is None for value in solar_wind):
        print_error("--bz, --bt, --speed and --density must be given together")
        raise typer.Exit(code=1)

    sample = None
    if bz is not None and bt is not None and speed is not None and density is not None:
        sample = SpaceWeatherSample(kp=kp, bz=bz, bt=bt, speed=speed, density=density)

    try:
        prediction = get_default_engine().predict_appearance(GeographicPoint(latitude, longitude), kp, sample)
    except AuroraVerdictError as e:
        print_error(f"Failed to predict appearance: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(prediction.to_dict())
        return

    console.print(
        f"\n[bold cyan]Aurora from {format_latitude(latitude)}, {format_longitude(longitude)}[/bold cyan]\n"
    )
    rows = [
        ("Geomagnetic Latitude", f"{prediction.geomagnetic.latitude:.2f}°"),
        ("Scenario", prediction.scenario.value),
        ("Visibility", format_quality_tier(prediction.visibility.quality_tier)),
        ("Colors", ", ".join(prediction.expected_colors) or "None"),
        ("Dominant Color", prediction.dominant_color),
        ("Structure", prediction.structure),
        ("Where to Look", prediction.viewing_direction),
        ("Elevation", prediction.elevation_range),
        ("Brightness", prediction.apparent_brightness.value),
        (
            "Camera",
            f"ISO {prediction.camera_guidance.iso}, {prediction.camera_guidance.shutter}, "
            f"{prediction.camera_guidance.aperture}",
        ),
    ]
    if prediction.verdict is not None:
        rows.append(("Verdict", prediction.verdict.headline))

    console.print(key_value_table("Appearance Prediction", rows))
    console.print()
    console.print(prediction.summary)
    console.print()
    print_info(prediction.viewing_tip)
