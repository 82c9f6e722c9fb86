"""
Location-Aware Aurora Appearance

Predicts what the aurora will look like from a specific location, based on
where the observer sits relative to the auroral oval:

- Colors: green overhead, red from lower latitudes where only the high
  altitude oxygen emissions clear the horizon
- Structure: curtains and rays under the oval, diffuse glow from afar
- Viewing angle: overhead under the oval, low on the horizon further away

The observer is first bucketed into a viewing scenario; each scenario then
has its own Kp-banded tables for colors, structure and brightness.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Final, TypeVar

import deal

from aurora_verdict.api.appearance.camera import CameraGuidance, camera_guidance
from aurora_verdict.api.core.config import EngineConfig, get_engine_config
from aurora_verdict.api.core.enums import ApparentBrightness, LookingToward, ViewingScenario
from aurora_verdict.api.core.exceptions import ConfigurationError, InputRangeError
from aurora_verdict.api.core.types import GeographicPoint, GeomagneticPoint, SpaceWeatherSample
from aurora_verdict.api.core.validation import validate_kp, validate_latitude, validate_point
from aurora_verdict.api.geomagnetic.coordinates import to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry
from aurora_verdict.api.geomagnetic.visibility import VisibilityAssessment, assess_visibility
from aurora_verdict.api.verdict.verdict import IntensityVerdict, calculate_verdict


logger = logging.getLogger(__name__)


__all__ = [
    "BRIGHTNESS_TABLE",
    "COLOR_TABLE",
    "STRUCTURE_TABLE",
    "BrightnessPrediction",
    "ColorPrediction",
    "LocationPrediction",
    "StructurePrediction",
    "ViewingInfo",
    "classify_scenario",
    "predict_appearance",
    "viewing_scenario",
]


LOW_LATITUDE_LIMIT: Final[float] = 45.0
"""Geomagnetic latitude below which only extreme storms reach the observer."""

RED_FRINGE_MIN_KP: Final[float] = 5.0
"""Kp from which high-altitude red emission can reach observers well below the oval."""

EXTREME_STORM_MIN_KP: Final[float] = 8.0
"""Kp from which SAR arcs can reach observers below 45° geomagnetic."""

_T = TypeVar("_T")


@dataclass(frozen=True)
class ColorPrediction:
    colors: tuple[str, ...]
    dominant: str
    explanation: str


@dataclass(frozen=True)
class StructurePrediction:
    structure: str
    description: str


@dataclass(frozen=True)
class BrightnessPrediction:
    brightness: ApparentBrightness
    description: str


@dataclass(frozen=True)
class ViewingInfo:
    direction: str
    elevation: str
    looking_toward: LookingToward


@dataclass(frozen=True)
class LocationPrediction:
    """What the aurora will look like from an observer's location."""

    scenario: ViewingScenario
    expected_colors: tuple[str, ...]
    dominant_color: str
    color_explanation: str
    structure: str
    structure_description: str
    viewing_direction: str
    elevation_range: str
    looking_toward: LookingToward
    apparent_brightness: ApparentBrightness
    brightness_description: str
    camera_guidance: CameraGuidance
    summary: str
    viewing_tip: str
    geomagnetic: GeomagneticPoint
    oval: AuroralOvalGeometry
    visibility: VisibilityAssessment
    verdict: IntensityVerdict | None = None  # Attached when a sample was supplied

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenario": self.scenario.value,
            "expectedColors": list(self.expected_colors),
            "dominantColor": self.dominant_color,
            "colorExplanation": self.color_explanation,
            "expectedStructure": self.structure,
            "structureDescription": self.structure_description,
            "viewingDirection": self.viewing_direction,
            "elevationAngle": self.elevation_range,
            "lookingToward": self.looking_toward.value,
            "apparentBrightness": self.apparent_brightness.value,
            "brightnessDescription": self.brightness_description,
            "cameraSettings": self.camera_guidance.to_dict(),
            "summary": self.summary,
            "viewingTip": self.viewing_tip,
            "geomagnetic": self.geomagnetic.to_dict(),
            "ovalPosition": self.oval.to_dict(),
            "visibility": self.visibility.to_dict(),
            "verdict": self.verdict.to_dict() if self.verdict else None,
        }


# Each scenario maps to (minimum Kp, prediction) bands, highest band first.
# The first band whose minimum Kp is reached applies.

COLOR_TABLE: Final[dict[ViewingScenario, tuple[tuple[float, ColorPrediction], ...]]] = {
    ViewingScenario.UNDER_OVAL_CENTER: (
        (
            7,
            ColorPrediction(
                colors=("Green", "Red", "Purple", "Pink", "Blue"),
                dominant="Green with Red tops",
                explanation=(
                    "Strong storm brings full color spectrum. Green dominates at 100-300km altitude, "
                    "with red oxygen emissions above 300km and purple/blue nitrogen at lower edges."
                ),
            ),
        ),
        (
            5,
            ColorPrediction(
                colors=("Green", "Red", "Purple"),
                dominant="Vibrant Green",
                explanation=(
                    "Moderate storm produces classic green aurora at 100-200km altitude. "
                    "Red upper borders visible during peaks. Purple fringes from nitrogen."
                ),
            ),
        ),
        (
            0,
            ColorPrediction(
                colors=("Green", "Yellow-Green"),
                dominant="Pale Green",
                explanation=(
                    "Quiet conditions show typical green oxygen emission at 100km altitude. "
                    "Color may appear whitish to the naked eye but photographs reveal green."
                ),
            ),
        ),
    ),
    ViewingScenario.UNDER_OVAL_EDGE: (
        (
            6,
            ColorPrediction(
                colors=("Green", "Red", "Purple"),
                dominant="Green with Red curtains",
                explanation=(
                    "At the oval edge, you'll see dramatic curtains and rays. "
                    "Green dominates with red tops during active periods."
                ),
            ),
        ),
        (
            0,
            ColorPrediction(
                colors=("Green", "Yellow-Green"),
                dominant="Green",
                explanation=(
                    "Classic green aurora visible on the poleward horizon. "
                    "May appear as a greenish glow that brightens into distinct forms."
                ),
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_CLOSE: (
        (
            7,
            ColorPrediction(
                colors=("Red", "Green", "Pink"),
                dominant="Red and Pink",
                explanation=(
                    "From this latitude, you're looking through more atmosphere at the aurora. "
                    "Red emissions (high altitude oxygen at 300km+) become prominent. "
                    "Green visible during intense peaks."
                ),
            ),
        ),
        (
            5,
            ColorPrediction(
                colors=("Red", "Green"),
                dominant="Red glow with Green peaks",
                explanation=(
                    "Red SAR (Stable Auroral Red) arcs may be visible low on the horizon. "
                    "Green only visible during activity surges."
                ),
            ),
        ),
        (
            0,
            ColorPrediction(
                colors=("Green", "White"),
                dominant="Faint greenish glow",
                explanation=(
                    "Faint green glow on the horizon. "
                    "Often appears white or gray to the naked eye but photographs reveal color."
                ),
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_FAR: (
        (
            8,
            ColorPrediction(
                colors=("Red", "Pink", "Purple"),
                dominant="Deep Red",
                explanation=(
                    "At this distance, only high-altitude red emissions (300-400km) are visible above "
                    "your horizon. These create the famous 'red aurora' seen during major storms."
                ),
            ),
        ),
        (
            6,
            ColorPrediction(
                colors=("Red", "Pink"),
                dominant="Red/Pink glow",
                explanation=(
                    "Red glow low on the horizon from high-altitude oxygen emissions. "
                    "May pulse or brighten during substorms."
                ),
            ),
        ),
        (
            0,
            ColorPrediction(
                colors=("Red",),
                dominant="Faint red glow",
                explanation=(
                    "Only the highest red emissions visible. Often appears as a faint reddish tint "
                    "on the horizon, easily mistaken for light pollution."
                ),
            ),
        ),
    ),
    ViewingScenario.EXTREME_LOW_LAT: (
        (
            0,
            ColorPrediction(
                colors=("Red", "Deep Red"),
                dominant="Blood Red",
                explanation=(
                    "At this latitude, only extreme G4-G5 storms produce visible aurora. "
                    "You'll see deep red SAR arcs from very high altitude emissions (400km+)."
                ),
            ),
        ),
    ),
    ViewingScenario.POLAR_CAP: (
        (
            0,
            ColorPrediction(
                colors=("Green", "Red"),
                dominant="Green toward equator",
                explanation=(
                    "You're inside the polar cap, poleward of the auroral oval. "
                    "Look toward the equator to see the aurora on that horizon."
                ),
            ),
        ),
    ),
    ViewingScenario.NOT_VISIBLE: (
        (
            0,
            ColorPrediction(
                colors=(),
                dominant="Not visible",
                explanation="Aurora not visible from your location with current conditions.",
            ),
        ),
    ),
}
"""Expected colors per scenario and Kp band."""

_SAR_GLOW = StructurePrediction(
    structure="Diffuse Glow / SAR Arc",
    description=(
        "A diffuse red glow hugging the horizon. Stable Auroral Red (SAR) arcs appear as steady "
        "red bands. Unlike typical aurora, these don't dance or flicker."
    ),
)

STRUCTURE_TABLE: Final[dict[ViewingScenario, tuple[tuple[float, StructurePrediction], ...]]] = {
    ViewingScenario.UNDER_OVAL_CENTER: (
        (
            7,
            StructurePrediction(
                structure="Corona / Rays / Curtains",
                description=(
                    "During strong storms directly under the oval, aurora may fill the entire sky. "
                    "Look for the 'corona effect' - rays appearing to converge at the magnetic zenith "
                    "directly overhead. Dramatic curtains dance across the sky."
                ),
            ),
        ),
        (
            5,
            StructurePrediction(
                structure="Curtains / Bands / Rays",
                description=(
                    "Active aurora displays with multiple curtains and bands moving across the sky. "
                    "Vertical rays may appear, sometimes forming 'picket fence' patterns."
                ),
            ),
        ),
        (
            0,
            StructurePrediction(
                structure="Arcs / Bands",
                description=(
                    "Quiet aurora typically forms east-west arcs across the sky. "
                    "Watch for bands that may suddenly brighten and develop rays during substorms."
                ),
            ),
        ),
    ),
    ViewingScenario.UNDER_OVAL_EDGE: (
        (
            6,
            StructurePrediction(
                structure="Curtains / Rays",
                description=(
                    "Dramatic curtains rippling across the poleward sky. "
                    "Rays extend upward like searchlights during active periods."
                ),
            ),
        ),
        (
            0,
            StructurePrediction(
                structure="Arc / Band",
                description=(
                    "A glowing arc spanning the horizon, sometimes breaking into multiple bands. "
                    "Watch for it to brighten and develop structure."
                ),
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_CLOSE: (
        (
            7,
            StructurePrediction(
                structure="Rays / Pillars",
                description=(
                    "Tall pillars of light extending up from the horizon. "
                    "During peaks, rays may reach high into the sky."
                ),
            ),
        ),
        (
            0,
            StructurePrediction(
                structure="Glow / Low Arc",
                description="Diffuse glow along the horizon that may brighten into a visible arc during activity surges.",
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_FAR: ((0, _SAR_GLOW),),
    ViewingScenario.EXTREME_LOW_LAT: ((0, _SAR_GLOW),),
    ViewingScenario.POLAR_CAP: (
        (
            0,
            StructurePrediction(
                structure="Arcs toward equator",
                description=(
                    "Look toward the equator to see auroral arcs and bands. "
                    "The aurora appears 'upside down' compared to typical views."
                ),
            ),
        ),
    ),
    ViewingScenario.NOT_VISIBLE: (
        (
            0,
            StructurePrediction(
                structure="Not visible",
                description="Aurora structure not visible from your location.",
            ),
        ),
    ),
}
"""Expected structure per scenario and Kp band."""

_LOW_LATITUDE_BRIGHTNESS: Final[tuple[tuple[float, BrightnessPrediction], ...]] = (
    (
        8,
        BrightnessPrediction(
            ApparentBrightness.FAINT,
            "Faint red glow on the horizon. Requires very dark skies and a clear poleward horizon.",
        ),
    ),
    (
        0,
        BrightnessPrediction(
            ApparentBrightness.VERY_FAINT,
            "Very faint - may be difficult to see with naked eye. Long-exposure photography recommended.",
        ),
    ),
)

BRIGHTNESS_TABLE: Final[dict[ViewingScenario, tuple[tuple[float, BrightnessPrediction], ...]]] = {
    ViewingScenario.UNDER_OVAL_CENTER: (
        (
            7,
            BrightnessPrediction(
                ApparentBrightness.BRILLIANT,
                "Brilliant, unmistakable aurora lighting up the sky. "
                "May cast shadows and be visible even with some light pollution.",
            ),
        ),
        (
            5,
            BrightnessPrediction(
                ApparentBrightness.BRIGHT,
                "Bright, clearly visible aurora. Easy to see with naked eye, photographs beautifully.",
            ),
        ),
        (
            0,
            BrightnessPrediction(
                ApparentBrightness.MODERATE,
                "Moderately bright aurora. Visible to naked eye, colors may appear faint but cameras capture well.",
            ),
        ),
    ),
    ViewingScenario.UNDER_OVAL_EDGE: (
        (
            6,
            BrightnessPrediction(
                ApparentBrightness.BRIGHT,
                "Bright aurora on the horizon, may extend high into the sky during peaks.",
            ),
        ),
        (
            0,
            BrightnessPrediction(
                ApparentBrightness.MODERATE,
                "Moderate brightness - clearly visible but you'll want dark skies.",
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_CLOSE: (
        (
            7,
            BrightnessPrediction(
                ApparentBrightness.MODERATE,
                "Moderate brightness low on the horizon. Best viewed from dark locations.",
            ),
        ),
        (
            0,
            BrightnessPrediction(
                ApparentBrightness.FAINT,
                "Faint glow on the horizon. May appear gray to the naked eye - camera helps confirm colors.",
            ),
        ),
    ),
    ViewingScenario.BELOW_OVAL_FAR: _LOW_LATITUDE_BRIGHTNESS,
    ViewingScenario.EXTREME_LOW_LAT: _LOW_LATITUDE_BRIGHTNESS,
    ViewingScenario.POLAR_CAP: (
        (0, BrightnessPrediction(ApparentBrightness.FAINT, "Faint aurora - dark skies essential.")),
    ),
    ViewingScenario.NOT_VISIBLE: (
        (0, BrightnessPrediction(ApparentBrightness.NOT_VISIBLE, "Aurora not visible from your location.")),
    ),
}
"""Apparent brightness per scenario and Kp band."""


def _band(table: tuple[tuple[float, _T], ...], kp: float) -> _T:
    for min_kp, prediction in table:
        if kp >= min_kp:
            return prediction
    return table[-1][1]


@deal.pre(lambda abs_latitude, oval, is_visible, kp: abs_latitude >= 0, message="Latitude must be absolute")
def classify_scenario(
    abs_latitude: float, oval: AuroralOvalGeometry, is_visible: bool, kp: float
) -> ViewingScenario:
    """
    Bucket an observer into a viewing scenario, first match wins.

    Observers well equatorward of the oval are not visible, except that storms
    of Kp 5+ reach down to 45° with high-altitude red emission and storms of
    Kp 8+ put SAR arcs below 45°.

    The polar cap starts immediately poleward of the poleward edge rather than
    3° beyond it. With a 3° margin, latitudes in (poleward, poleward + 3] match
    neither the under-oval buckets (which stop at the poleward edge) nor
    anything else above 45°, and would be labelled below_oval_far.

    Args:
        abs_latitude: Absolute geomagnetic latitude
        oval: Oval geometry at the current Kp
        is_visible: Result of the visibility classifier
        kp: Planetary Kp index
    """
    if not is_visible and abs_latitude < oval.equatorward_edge - 5:
        if abs_latitude >= LOW_LATITUDE_LIMIT and kp >= RED_FRINGE_MIN_KP:
            return ViewingScenario.BELOW_OVAL_FAR
        if abs_latitude < LOW_LATITUDE_LIMIT and kp >= EXTREME_STORM_MIN_KP:
            return ViewingScenario.EXTREME_LOW_LAT
        return ViewingScenario.NOT_VISIBLE

    if abs_latitude > oval.poleward_edge:
        return ViewingScenario.POLAR_CAP
    if oval.center_latitude - 3 <= abs_latitude:
        return ViewingScenario.UNDER_OVAL_CENTER
    if oval.equatorward_edge <= abs_latitude:
        return ViewingScenario.UNDER_OVAL_EDGE
    if oval.equatorward_edge - 5 <= abs_latitude:
        return ViewingScenario.BELOW_OVAL_CLOSE
    if abs_latitude >= LOW_LATITUDE_LIMIT:
        return ViewingScenario.BELOW_OVAL_FAR
    return ViewingScenario.EXTREME_LOW_LAT


@deal.raises(InputRangeError)
def viewing_scenario(geomagnetic_latitude: float, kp: float) -> ViewingScenario:
    """Viewing scenario for a signed geomagnetic latitude at a Kp index."""
    validate_latitude(geomagnetic_latitude, field="geomagnetic_latitude")
    visibility = assess_visibility(geomagnetic_latitude, kp)
    return classify_scenario(abs(geomagnetic_latitude), oval_geometry(kp), visibility.is_visible, kp)


def _elevation_floor(value: float, ceiling: float) -> int:
    return int(round(max(5.0, min(ceiling, value))))


def _viewing_info(
    geomagnetic_latitude: float, oval: AuroralOvalGeometry, scenario: ViewingScenario
) -> ViewingInfo:
    if scenario is ViewingScenario.NOT_VISIBLE:
        return ViewingInfo(direction="Not visible", elevation="N/A", looking_toward=LookingToward.NOT_VISIBLE)

    abs_lat = abs(geomagnetic_latitude)
    northern = geomagnetic_latitude >= 0
    pole_side = "North" if northern else "South"
    equator_side = "South" if northern else "North"
    pole_horizon = LookingToward.NORTHERN_HORIZON if northern else LookingToward.SOUTHERN_HORIZON
    equator_horizon = LookingToward.SOUTHERN_HORIZON if northern else LookingToward.NORTHERN_HORIZON

    if oval.center_latitude - 2 <= abs_lat <= oval.poleward_edge:
        return ViewingInfo(
            direction="All directions - may be overhead",
            elevation="60-90° (overhead to high)",
            looking_toward=LookingToward.OVERHEAD,
        )

    if abs_lat > oval.poleward_edge:
        return ViewingInfo(
            direction=f"Look toward {equator_side}",
            elevation="20-60° above horizon",
            looking_toward=equator_horizon,
        )

    if abs_lat >= oval.equatorward_edge - 3:
        low = _elevation_floor(45 - (oval.equatorward_edge - abs_lat) * 10, 45)
        return ViewingInfo(
            direction=f"Look {pole_side}",
            elevation=f"{low}-60° above {pole_side.lower()}ern horizon",
            looking_toward=pole_horizon,
        )

    if abs_lat >= LOW_LATITUDE_LIMIT:
        low = _elevation_floor(30 - (oval.equatorward_edge - abs_lat) * 5, 30)
        return ViewingInfo(
            direction=f"Face {pole_side}, scan horizon",
            elevation=f"{low}-30° above horizon",
            looking_toward=pole_horizon,
        )

    return ViewingInfo(
        direction=f"{pole_side}ern horizon",
        elevation="5-15° above horizon",
        looking_toward=pole_horizon,
    )


def _summary(
    scenario: ViewingScenario,
    colors: ColorPrediction,
    structure: StructurePrediction,
    viewing: ViewingInfo,
    northern: bool,
) -> str:
    lights = "Northern Lights" if northern else "Southern Lights (Aurora Australis)"
    direction = viewing.direction.lower()
    form = structure.structure.lower()

    match scenario:
        case ViewingScenario.UNDER_OVAL_CENTER:
            return (
                f"You're directly under the auroral oval - prime viewing! Expect {colors.dominant} aurora "
                f"with {form} formations. The {lights} may appear overhead and all around you."
            )
        case ViewingScenario.UNDER_OVAL_EDGE:
            return (
                f"Excellent location near the auroral oval edge. Expect {colors.dominant} colors forming "
                f"{form}. {viewing.direction} for the best views."
            )
        case ViewingScenario.BELOW_OVAL_CLOSE:
            return (
                f"Good viewing potential! From your latitude, expect {colors.dominant} appearing as "
                f"{form} low on the horizon ({direction})."
            )
        case ViewingScenario.BELOW_OVAL_FAR:
            return (
                f"Aurora viewing possible during this active period. Expect {colors.dominant} low on the "
                f"horizon ({direction}). Dark skies and clear horizon essential."
            )
        case ViewingScenario.EXTREME_LOW_LAT:
            return (
                f"Rare aurora opportunity at your latitude! Look for {colors.dominant} very low on the "
                f"{direction}. This is a special event!"
            )
        case ViewingScenario.POLAR_CAP:
            return (
                f"You're inside the polar cap, poleward of the auroral oval. "
                f"Look toward the {'south' if northern else 'north'} to see the aurora! "
                f"Expect {colors.dominant} on that horizon."
            )
        case _:
            return "Aurora is not expected to be visible from your location with current space weather conditions."


def _viewing_tip(scenario: ViewingScenario, viewing: ViewingInfo, brightness: ApparentBrightness) -> str:
    if scenario is ViewingScenario.NOT_VISIBLE:
        return "Check back when space weather conditions improve."

    tips: list[str] = []
    if scenario is ViewingScenario.UNDER_OVAL_CENTER:
        tips.append("Find a 360° view location - aurora may appear anywhere in the sky!")
        tips.append("During active periods, look directly overhead for the 'corona' effect.")
    elif scenario is ViewingScenario.POLAR_CAP:
        tips.append("You're poleward of the aurora - look toward the equator!")
    else:
        tips.append(f"{viewing.direction} with a clear view of the horizon.")

    if brightness in (ApparentBrightness.FAINT, ApparentBrightness.VERY_FAINT):
        tips.append("Let your eyes adapt to darkness for 20+ minutes.")
        tips.append("Use your camera's live view to spot faint aurora before your eyes do.")

    if scenario in (ViewingScenario.BELOW_OVAL_FAR, ViewingScenario.EXTREME_LOW_LAT):
        tips.append("Light pollution is your enemy - get to the darkest location possible.")
        tips.append("Aurora at this latitude often appears as a steady glow rather than dancing lights.")

    return " ".join(tips)


@deal.raises(InputRangeError, ConfigurationError)
def predict_appearance(
    observer: GeographicPoint,
    kp: float,
    sample: SpaceWeatherSample | None = None,
    config: EngineConfig | None = None,
) -> LocationPrediction:
    """
    Predict what the aurora will look like from an observer's location.

    Args:
        observer: Observer's geographic position
        kp: Planetary Kp index (0-9)
        sample: Optional space weather sample; its verdict is attached and an
            impossible physics flag forces the not_visible scenario
        config: Pole and reference cities (default: the cached engine config)

    Returns:
        Location prediction

    Raises:
        InputRangeError: If the observer, kp or sample is out of range
    """
    validate_point(observer)
    validate_kp(kp)
    engine_config = config if config is not None else get_engine_config()

    verdict = calculate_verdict(sample, engine_config) if sample is not None else None

    geomagnetic = to_geomagnetic(observer.latitude, observer.longitude, engine_config.pole)
    oval = oval_geometry(kp)
    visibility = assess_visibility(geomagnetic.latitude, kp)

    if verdict is not None and verdict.is_impossible:
        scenario = ViewingScenario.NOT_VISIBLE
    else:
        scenario = classify_scenario(geomagnetic.abs_latitude, oval, visibility.is_visible, kp)

    colors = _band(COLOR_TABLE[scenario], kp)
    structure = _band(STRUCTURE_TABLE[scenario], kp)
    brightness = _band(BRIGHTNESS_TABLE[scenario], kp)
    viewing = _viewing_info(geomagnetic.latitude, oval, scenario)

    logger.debug(
        f"Observer at {geomagnetic.latitude}° geomagnetic, Kp {kp}: {scenario.value}, "
        f"{brightness.brightness.value}"
    )
    return LocationPrediction(
        scenario=scenario,
        expected_colors=colors.colors,
        dominant_color=colors.dominant,
        color_explanation=colors.explanation,
        structure=structure.structure,
        structure_description=structure.description,
        viewing_direction=viewing.direction,
        elevation_range=viewing.elevation,
        looking_toward=viewing.looking_toward,
        apparent_brightness=brightness.brightness,
        brightness_description=brightness.description,
        camera_guidance=camera_guidance(brightness.brightness),
        summary=_summary(scenario, colors, structure, viewing, geomagnetic.is_northern),
        viewing_tip=_viewing_tip(scenario, viewing, brightness.brightness),
        geomagnetic=geomagnetic,
        oval=oval,
        visibility=visibility,
        verdict=verdict,
    )
