"""
Strength Categories

Score thresholds and the fixed descriptive metadata shown for each strength
category. The metadata is product-facing copy, kept as a lookup table so it
can be audited and tested on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import deal

from aurora_verdict.api.core.enums import QualityTier, StrengthCategory


__all__ = [
    "CATEGORY_PROFILES",
    "CATEGORY_THRESHOLDS",
    "CategoryProfile",
    "category_for_score",
    "category_profile",
]


@dataclass(frozen=True)
class CategoryProfile:
    """Descriptive metadata for a strength category."""

    category: StrengthCategory
    label: str
    aurora_type: str
    aurora_colors: str
    aurora_structure: str
    duration_hours: str
    alert_level: str
    viewing_tip: str
    min_city_tier: QualityTier | None  # Lowest visibility tier for example cities, None for no cities


CATEGORY_THRESHOLDS: Final[tuple[tuple[int, StrengthCategory], ...]] = (
    (90, StrengthCategory.EXTREME),
    (75, StrengthCategory.MAJOR),
    (60, StrengthCategory.STRONG),
    (45, StrengthCategory.MODERATE),
    (30, StrengthCategory.MINOR),
    (15, StrengthCategory.WEAK),
)
"""Minimum score for each category, highest first. Anything lower is NONE."""


CATEGORY_PROFILES: Final[dict[StrengthCategory, CategoryProfile]] = {
    StrengthCategory.EXTREME: CategoryProfile(
        category=StrengthCategory.EXTREME,
        label="EXTREME AURORA",
        aurora_type="Extreme geomagnetic storm (G4-G5)",
        aurora_colors="Deep red, green, purple, pink and blue",
        aurora_structure="Corona overhead with fast-moving rays and curtains filling the sky",
        duration_hours="6-12",
        alert_level="EXTREME: Severe storm in progress",
        viewing_tip="Go outside now. Aurora may be visible far from the usual aurora zone, even at mid-latitudes.",
        min_city_tier=QualityTier.POOR,
    ),
    StrengthCategory.MAJOR: CategoryProfile(
        category=StrengthCategory.MAJOR,
        label="MAJOR AURORA",
        aurora_type="Major geomagnetic storm (G3)",
        aurora_colors="Green and red with purple fringes",
        aurora_structure="Bright curtains and rays, corona possible under the oval",
        duration_hours="4-8",
        alert_level="MAJOR: Strong storm in progress",
        viewing_tip="Aurora likely well equatorward of normal. Find a dark site with a clear poleward horizon.",
        min_city_tier=QualityTier.POOR,
    ),
    StrengthCategory.STRONG: CategoryProfile(
        category=StrengthCategory.STRONG,
        label="STRONG AURORA",
        aurora_type="Strong geomagnetic activity (G2)",
        aurora_colors="Bright green with red upper borders",
        aurora_structure="Active curtains and rays",
        duration_hours="3-6",
        alert_level="STRONG: Storm conditions",
        viewing_tip="A good display is expected across the auroral zone. Head out after dark.",
        min_city_tier=QualityTier.FAIR,
    ),
    StrengthCategory.MODERATE: CategoryProfile(
        category=StrengthCategory.MODERATE,
        label="MODERATE AURORA",
        aurora_type="Moderate geomagnetic activity (G1)",
        aurora_colors="Green, occasional red tops",
        aurora_structure="Arcs and bands with occasional rays",
        duration_hours="2-4",
        alert_level="MODERATE: Active conditions",
        viewing_tip="Worth watching from aurora-zone locations. Displays can brighten suddenly.",
        min_city_tier=QualityTier.FAIR,
    ),
    StrengthCategory.MINOR: CategoryProfile(
        category=StrengthCategory.MINOR,
        label="MINOR AURORA",
        aurora_type="Minor activity",
        aurora_colors="Pale green",
        aurora_structure="Quiet arcs",
        duration_hours="1-3",
        alert_level="MINOR: Unsettled",
        viewing_tip="Visible from high latitudes under dark, clear skies.",
        min_city_tier=QualityTier.GOOD,
    ),
    StrengthCategory.WEAK: CategoryProfile(
        category=StrengthCategory.WEAK,
        label="WEAK AURORA",
        aurora_type="Weak activity",
        aurora_colors="Faint green, often grey to the eye",
        aurora_structure="Diffuse glow or a faint arc",
        duration_hours="0-2",
        alert_level="WEAK: Low activity",
        viewing_tip="Only high-latitude observers with dark skies are likely to see anything.",
        min_city_tier=QualityTier.GOOD,
    ),
    StrengthCategory.NONE: CategoryProfile(
        category=StrengthCategory.NONE,
        label="NO AURORA",
        aurora_type="No significant activity",
        aurora_colors="None",
        aurora_structure="None",
        duration_hours="0",
        alert_level="QUIET: No Activity",
        viewing_tip="Aurora unlikely. Check back when solar wind conditions change.",
        min_city_tier=None,
    ),
}
"""Verbatim metadata per category."""


@deal.pre(lambda score: 0 <= score <= 100, message="Score must be clamped to 0-100")
def category_for_score(score: int) -> StrengthCategory:
    """Map a clamped 0-100 score to its strength category."""
    for threshold, category in CATEGORY_THRESHOLDS:
        if score >= threshold:
            return category
    return StrengthCategory.NONE


def category_profile(category: StrengthCategory) -> CategoryProfile:
    return CATEGORY_PROFILES[category]
