"""
Common Enums

Enumerations used throughout the aurora verdict API. Enum values are the
strings existing consumers expect, so they must not be renamed.
"""

from enum import StrEnum


__all__ = [
    "ApparentBrightness",
    "CityRating",
    "CouplingLevel",
    "Hemisphere",
    "LookingToward",
    "PhysicsFlag",
    "QualityTier",
    "StrengthCategory",
    "SubstormPhase",
    "ViewingScenario",
]


class QualityTier(StrEnum):
    """Visibility quality of the aurora from a geomagnetic latitude."""

    NONE = "none"
    POOR = "poor"  # Faint glow on the horizon
    FAIR = "fair"  # Low on the horizon
    GOOD = "good"  # Clearly in the sky
    EXCELLENT = "excellent"  # Overhead or high in the sky
    OVERHEAD = "overhead"

    @property
    def rank(self) -> int:
        """Ordinal position, NONE lowest."""
        return list(QualityTier).index(self)


class StrengthCategory(StrEnum):
    """Strength tier derived from the 0-100 intensity score."""

    EXTREME = "EXTREME"
    MAJOR = "MAJOR"
    STRONG = "STRONG"
    MODERATE = "MODERATE"
    MINOR = "MINOR"
    WEAK = "WEAK"
    NONE = "NONE"


class PhysicsFlag(StrEnum):
    """Outcome of the physics plausibility check."""

    VALID = "valid"
    IMPOSSIBLE = "impossible"  # Internally inconsistent telemetry
    UNLIKELY = "unlikely"
    RARE = "rare"  # Real but unusual solar wind structure
    TIMING_DEPENDENT = "timing-dependent"  # Kp lagging or persisting


class Hemisphere(StrEnum):
    """Geomagnetic hemisphere of an observer."""

    NORTHERN = "northern"
    SOUTHERN = "southern"


class LookingToward(StrEnum):
    """Where in the sky the observer should look."""

    OVERHEAD = "overhead"
    NORTHERN_HORIZON = "northern_horizon"
    SOUTHERN_HORIZON = "southern_horizon"
    NOT_VISIBLE = "not_visible"


class ApparentBrightness(StrEnum):
    """Brightness of the aurora as seen from the observer's location."""

    BRILLIANT = "brilliant"
    BRIGHT = "bright"
    MODERATE = "moderate"
    FAINT = "faint"
    VERY_FAINT = "very_faint"
    NOT_VISIBLE = "not_visible"


class ViewingScenario(StrEnum):
    """Observer position relative to the auroral oval."""

    UNDER_OVAL_CENTER = "under_oval_center"  # Directly under the oval
    UNDER_OVAL_EDGE = "under_oval_edge"  # Between equatorward edge and center
    BELOW_OVAL_CLOSE = "below_oval_close"  # Up to 5 degrees equatorward of the edge
    BELOW_OVAL_FAR = "below_oval_far"  # Well below the oval, down to 45 degrees
    EXTREME_LOW_LAT = "extreme_low_lat"  # Below 45 degrees geomagnetic
    POLAR_CAP = "polar_cap"  # Poleward of the oval
    NOT_VISIBLE = "not_visible"


class SubstormPhase(StrEnum):
    """Magnetospheric substorm phase reported by a magnetometer network."""

    QUIET = "quiet"
    GROWTH = "growth"
    ONSET = "onset"
    EXPANSION = "expansion"
    RECOVERY = "recovery"


class CouplingLevel(StrEnum):
    """Solar wind-magnetosphere coupling strength."""

    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"
    EXTREME = "extreme"


class CityRating(StrEnum):
    """How readily a reference city sees the aurora."""

    EXCELLENT = "excellent"  # Good displays at Kp 3 or less
    GOOD = "good"  # Kp 4-5
    POSSIBLE = "possible"  # Kp 6-7
    RARE = "rare"  # Kp 8-9
    EXTREME_ONLY = "extreme_only"  # Beyond the oval model's reach
