"""
Aurora Visibility Classifier

Combines a location's geomagnetic latitude with the auroral oval to give a
discrete visibility quality tier. Works in both hemispheres: the tier only
depends on the absolute geomagnetic latitude, while the wording follows the
hemisphere so that southern observers are told to look south.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import deal

from aurora_verdict.api.core.constants import DEFAULT_POLE, KP_MAX, OVAL_COEFFICIENTS, MagneticPole
from aurora_verdict.api.core.enums import Hemisphere, QualityTier
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import GeographicPoint, GeomagneticPoint
from aurora_verdict.api.core.validation import validate_kp, validate_latitude
from aurora_verdict.api.geomagnetic.coordinates import to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry


logger = logging.getLogger(__name__)


__all__ = [
    "LocationDescription",
    "VisibilityAssessment",
    "assess_visibility",
    "describe_location",
    "kp_needed",
]


@dataclass(frozen=True)
class VisibilityAssessment:
    """Whether and how well the aurora can be seen from a geomagnetic latitude."""

    is_visible: bool
    quality_tier: QualityTier
    message: str  # Directional wording for the observer's hemisphere
    hemisphere: Hemisphere
    geomagnetic_latitude: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "isVisible": self.is_visible,
            "qualityTier": self.quality_tier.value,
            "message": self.message,
            "hemisphere": self.hemisphere.value,
            "geomagneticLatitude": self.geomagnetic_latitude,
        }


@dataclass(frozen=True)
class LocationDescription:
    """Geomagnetic position, oval and visibility for a geographic location."""

    geographic: GeographicPoint
    geomagnetic: GeomagneticPoint
    oval: AuroralOvalGeometry
    visibility: VisibilityAssessment

    def to_dict(self) -> dict[str, Any]:
        return {
            "geographic": self.geographic.to_dict(),
            "geomagnetic": self.geomagnetic.to_dict(),
            "ovalPosition": self.oval.to_dict(),
            "visibility": self.visibility.to_dict(),
        }


@deal.pre(lambda abs_geomagnetic_latitude: abs_geomagnetic_latitude >= 0)
def kp_needed(abs_geomagnetic_latitude: float) -> int:
    """Kp at which the oval's equatorward edge reaches the given latitude."""
    needed = math.ceil((OVAL_COEFFICIENTS.quiet_edge - abs_geomagnetic_latitude) / OVAL_COEFFICIENTS.edge_per_kp)
    return max(0, needed)


def _too_far_equatorward_message(abs_lat: float, poleward: str) -> str:
    needed = kp_needed(abs_lat)
    if needed > KP_MAX:
        return f"Aurora too far {poleward} (out of reach even at Kp 9)"
    return f"Aurora too far {poleward} (need Kp {needed}+)"


@deal.raises(InputRangeError)
def assess_visibility(geomagnetic_latitude: float, kp: float) -> VisibilityAssessment:
    """
    Assess aurora visibility at a geomagnetic latitude.

    Args:
        geomagnetic_latitude: Signed geomagnetic latitude (negative for south)
        kp: Planetary Kp index (0-9)

    Returns:
        Visibility assessment with hemisphere-specific wording

    Raises:
        InputRangeError: If latitude or kp is out of range
    """
    validate_latitude(geomagnetic_latitude, field="geomagnetic_latitude")
    oval = oval_geometry(kp)

    abs_lat = abs(geomagnetic_latitude)
    northern = geomagnetic_latitude >= 0
    hemisphere = Hemisphere.NORTHERN if northern else Hemisphere.SOUTHERN
    # Toward the magnetic pole / toward the equator
    poleward = "north" if northern else "south"
    equatorward = "south" if northern else "north"

    if abs_lat < oval.equatorward_edge - 3:
        is_visible, tier, message = False, QualityTier.NONE, _too_far_equatorward_message(abs_lat, poleward)
    elif abs_lat < oval.equatorward_edge:
        is_visible, tier, message = True, QualityTier.POOR, f"Faint glow on {poleward}ern horizon"
    elif abs_lat < oval.equatorward_edge + 2:
        is_visible, tier, message = True, QualityTier.FAIR, f"Aurora low on {poleward}ern horizon"
    elif abs_lat < oval.center_latitude - 2:
        is_visible, tier, message = True, QualityTier.GOOD, f"Aurora visible in {poleward}ern sky"
    elif abs_lat < oval.poleward_edge - 2:
        is_visible, tier, message = True, QualityTier.EXCELLENT, f"Aurora overhead or in {equatorward} sky"
    elif abs_lat < oval.poleward_edge + 3:
        is_visible, tier, message = True, QualityTier.GOOD, f"Aurora visible to the {equatorward}"
    else:
        is_visible, tier, message = False, QualityTier.NONE, f"Too far {poleward} - inside polar cap"

    logger.debug(f"Visibility at {geomagnetic_latitude}° geomagnetic, Kp {kp}: {tier.value}")
    return VisibilityAssessment(
        is_visible=is_visible,
        quality_tier=tier,
        message=message,
        hemisphere=hemisphere,
        geomagnetic_latitude=geomagnetic_latitude,
    )


@deal.raises(InputRangeError)
def describe_location(
    latitude: float, longitude: float, kp: float, pole: MagneticPole = DEFAULT_POLE
) -> LocationDescription:
    """
    Describe aurora visibility for a geographic location.

    Validates all inputs before transforming, so nothing is computed for a
    location or Kp that is out of range.
    """
    validate_kp(kp)
    geomagnetic = to_geomagnetic(latitude, longitude, pole)
    return LocationDescription(
        geographic=GeographicPoint(latitude=latitude, longitude=longitude),
        geomagnetic=geomagnetic,
        oval=oval_geometry(kp),
        visibility=assess_visibility(geomagnetic.latitude, kp),
    )
