"""
Aurora Verdict

Assembles the full verdict for a space weather sample: intensity score and
category, physics plausibility, auroral oval position, example cities, and the
optional enhancements from Hp30, Newell coupling and magnetometer data.

An impossible physics flag overrides the score: the verdict is forced to
score 0, category NONE and certainty 0, and the headline tells the user to
check data quality instead of showing the raw score.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Final

import deal

from aurora_verdict.api.core.config import EngineConfig, get_engine_config
from aurora_verdict.api.core.constants import DEFAULT_POLE, MAX_EXAMPLE_CITIES, MagneticPole
from aurora_verdict.api.core.enums import PhysicsFlag, QualityTier, StrengthCategory, SubstormPhase
from aurora_verdict.api.core.exceptions import ConfigurationError, InputRangeError
from aurora_verdict.api.core.types import GeomagneticPoint, SpaceWeatherSample
from aurora_verdict.api.core.validation import validate_kp, validate_sample
from aurora_verdict.api.geomagnetic.coordinates import to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry
from aurora_verdict.api.geomagnetic.visibility import VisibilityAssessment, assess_visibility
from aurora_verdict.api.reference.cities import ReferenceCity
from aurora_verdict.api.verdict.categories import category_profile
from aurora_verdict.api.verdict.coupling import NewellCoupling, calculate_newell_coupling
from aurora_verdict.api.verdict.physics import certainty_label, validate_physics
from aurora_verdict.api.verdict.scoring import ScoreBreakdown, score_intensity


logger = logging.getLogger(__name__)


__all__ = [
    "IMPOSSIBLE_HEADLINE",
    "CityVisibility",
    "IntensityVerdict",
    "calculate_verdict",
    "city_visibility",
    "example_cities",
    "hp30_warning",
    "substorm_boost",
]


IMPOSSIBLE_HEADLINE: Final[str] = "NO AURORA - check data quality"
"""Headline shown instead of the score when the physics flag is impossible."""

HP30_WARNING_THRESHOLD: Final[float] = 2.0
"""Difference between Hp30 and Kp that produces a warning."""

NEWELL_FAVORABLE_BONUS: Final[int] = 5
"""Certainty added when the Newell coupling is favorable."""

# Magnetometer disturbance (nT) -> certainty boost, highest first
_DELTA_B_BOOSTS: Final[tuple[tuple[float, int], ...]] = ((500, 20), (300, 15), (100, 10))
# Active substorm phases guarantee at least this boost
_PHASE_BOOSTS: Final[dict[SubstormPhase, int]] = {
    SubstormPhase.EXPANSION: 25,
    SubstormPhase.ONSET: 15,
}


@dataclass(frozen=True)
class CityVisibility:
    """Visibility of the aurora from a reference city."""

    city: ReferenceCity
    geomagnetic: GeomagneticPoint
    visibility: VisibilityAssessment

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city.to_dict(),
            "geomagnetic": self.geomagnetic.to_dict(),
            "visibility": self.visibility.to_dict(),
        }


@dataclass(frozen=True)
class IntensityVerdict:
    """Complete aurora verdict for one space weather sample."""

    intensity_score: int  # 0-100
    strength_category: StrengthCategory
    certainty: int  # 0-100
    certainty_label: str
    physics_flag: PhysicsFlag
    physics_notes: str
    headline: str
    example_cities: tuple[str, ...]
    oval: AuroralOvalGeometry
    min_geomagnetic_lat: float  # Lowest geomagnetic latitude with any visibility
    visibility_range: str
    aurora_type: str
    aurora_colors: str
    aurora_structure: str
    duration_hours: str
    alert_level: str
    viewing_tip: str
    score_breakdown: ScoreBreakdown  # Raw contributions, kept as scored even when the physics check overrides them
    effective_kp: float
    newell_coupling: NewellCoupling | None = None
    hp30_warning: str | None = None
    substorm_boost: int = 0

    @property
    def is_impossible(self) -> bool:
        return self.physics_flag is PhysicsFlag.IMPOSSIBLE

    @property
    def score_overridden(self) -> bool:
        """True when intensity_score no longer equals the breakdown total."""
        return self.is_impossible

    def to_dict(self) -> dict[str, Any]:
        return {
            "intensityScore": self.intensity_score,
            "strengthCategory": self.strength_category.value,
            "certainty": self.certainty,
            "certaintyLabel": self.certainty_label,
            "physicsFlag": self.physics_flag.value,
            "physicsNotes": self.physics_notes,
            "headline": self.headline,
            "exampleCities": list(self.example_cities),
            "ovalPosition": self.oval.to_dict(),
            "minGeomagneticLat": self.min_geomagnetic_lat,
            "visibilityRange": self.visibility_range,
            "auroraType": self.aurora_type,
            "auroraColors": self.aurora_colors,
            "auroraStructure": self.aurora_structure,
            "durationHours": self.duration_hours,
            "alertLevel": self.alert_level,
            "viewingTip": self.viewing_tip,
            "scoreBreakdown": self.score_breakdown.to_dict(),
            "scoreOverridden": self.score_overridden,
            "effectiveKp": self.effective_kp,
            "newellCoupling": self.newell_coupling.to_dict() if self.newell_coupling else None,
            "hp30Warning": self.hp30_warning,
            "substormBoost": self.substorm_boost,
        }


def hp30_warning(sample: SpaceWeatherSample) -> str | None:
    """Warning when Hp30 and Kp disagree by 2 or more."""
    if sample.hp30 is None or abs(sample.hp30 - sample.kp) < HP30_WARNING_THRESHOLD:
        return None
    if sample.hp30 > sample.kp:
        return "Hp30 is higher - activity may be increasing faster than Kp shows"
    return "Hp30 is lower - activity may be decreasing"


def substorm_boost(sample: SpaceWeatherSample) -> int:
    """Certainty boost from magnetometer disturbance and substorm phase."""
    boost = 0
    if sample.magnetometer_delta_b is not None:
        for threshold, points in _DELTA_B_BOOSTS:
            if sample.magnetometer_delta_b >= threshold:
                boost = points
                break

    if sample.substorm_phase is not None:
        boost = max(boost, _PHASE_BOOSTS.get(sample.substorm_phase, 0))
    return boost


@deal.raises(InputRangeError)
def city_visibility(
    cities: Sequence[ReferenceCity], kp: float, pole: MagneticPole = DEFAULT_POLE
) -> tuple[CityVisibility, ...]:
    """Assess visibility at every reference city, in dataset order."""
    validate_kp(kp)
    results = []
    for city in cities:
        geomagnetic = to_geomagnetic(city.geographic_latitude, city.geographic_longitude, pole)
        results.append(
            CityVisibility(city=city, geomagnetic=geomagnetic, visibility=assess_visibility(geomagnetic.latitude, kp))
        )
    return tuple(results)


@deal.raises(InputRangeError)
@deal.post(lambda result: len(result) <= MAX_EXAMPLE_CITIES, message="At most five example cities")
def example_cities(
    cities: Sequence[ReferenceCity],
    kp: float,
    min_tier: QualityTier | None,
    pole: MagneticPole = DEFAULT_POLE,
) -> tuple[str, ...]:
    """
    Names of up to five cities where the aurora is visible at a minimum tier.

    Args:
        cities: Reference cities in dataset order
        kp: Effective Kp index
        min_tier: Lowest acceptable quality tier, None for no cities
        pole: Magnetic pole for the transform

    Returns:
        City names in dataset order
    """
    if min_tier is None:
        return ()

    names: list[str] = []
    for entry in city_visibility(cities, kp, pole):
        visibility = entry.visibility
        if visibility.is_visible and visibility.quality_tier.rank >= min_tier.rank:
            names.append(entry.city.name)
            if len(names) == MAX_EXAMPLE_CITIES:
                break
    return tuple(names)


def _verdict_invariants(result: IntensityVerdict) -> bool:
    if not (0 <= result.intensity_score <= 100 and 0 <= result.certainty <= 100):
        return False
    if result.is_impossible:
        return (
            result.intensity_score == 0
            and result.certainty == 0
            and result.strength_category is StrengthCategory.NONE
            and result.headline == IMPOSSIBLE_HEADLINE
        )
    return True


@deal.raises(InputRangeError, ConfigurationError)
@deal.post(_verdict_invariants, message="Verdict must satisfy range and impossible-override invariants")
def calculate_verdict(sample: SpaceWeatherSample, config: EngineConfig | None = None) -> IntensityVerdict:
    """
    Calculate the aurora verdict for a space weather sample.

    All sample fields are validated before anything is computed, so either a
    complete verdict is returned or InputRangeError is raised.

    Args:
        sample: Space weather sample, optionally with enhanced inputs
        config: Pole and reference cities (default: the cached engine config)

    Returns:
        Intensity verdict

    Raises:
        InputRangeError: If any sample field is out of range
        ConfigurationError: If the default configuration cannot be loaded
    """
    validate_sample(sample)
    engine_config = config if config is not None else get_engine_config()

    kp = sample.effective_kp
    intensity = score_intensity(sample)
    physics = validate_physics(sample)
    oval = oval_geometry(kp)

    score = intensity.score
    category = intensity.category
    certainty = physics.certainty
    coupling = None
    boost = 0

    if sample.by is not None:
        coupling = calculate_newell_coupling(sample.speed, sample.bz, sample.by, sample.bt)

    if physics.is_impossible:
        score = 0
        category = StrengthCategory.NONE
        certainty = 0
    else:
        boost = substorm_boost(sample)
        if boost:
            certainty = min(100, certainty + boost)
        if coupling is not None and coupling.is_favorable:
            certainty = min(100, certainty + NEWELL_FAVORABLE_BONUS)

    profile = category_profile(category)
    viewing_tip = profile.viewing_tip
    if physics.tip_note:
        viewing_tip = f"{viewing_tip} {physics.tip_note}"

    if category is StrengthCategory.NONE:
        visibility_range = "No auroral activity"
    else:
        visibility_range = f"Auroral oval at {oval.equatorward_edge:.0f}° geomag latitude"

    verdict = IntensityVerdict(
        intensity_score=score,
        strength_category=category,
        certainty=certainty,
        certainty_label=certainty_label(certainty),
        physics_flag=physics.flag,
        physics_notes=physics.notes,
        headline=IMPOSSIBLE_HEADLINE if physics.is_impossible else profile.label,
        example_cities=example_cities(
            engine_config.reference_cities, kp, profile.min_city_tier, engine_config.pole
        ),
        oval=oval,
        min_geomagnetic_lat=oval.equatorward_edge - 3,
        visibility_range=visibility_range,
        aurora_type=profile.aurora_type,
        aurora_colors=profile.aurora_colors,
        aurora_structure=profile.aurora_structure,
        duration_hours=profile.duration_hours,
        alert_level=profile.alert_level,
        viewing_tip=viewing_tip,
        score_breakdown=intensity.breakdown,
        effective_kp=kp,
        newell_coupling=coupling,
        hp30_warning=hp30_warning(sample),
        substorm_boost=boost,
    )
    logger.debug(
        f"Verdict: score={verdict.intensity_score} category={verdict.strength_category.value} "
        f"certainty={verdict.certainty} flag={verdict.physics_flag.value}"
    )
    return verdict
