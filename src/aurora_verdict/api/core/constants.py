"""
Physical and Empirical Constants

Constants used throughout the aurora verdict API. The oval coefficients and
the pole position are empirical calibrations, not derived quantities: change
them as a unit when recalibrating.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


__all__ = [
    "DEFAULT_POLE",
    "GEOMAGNETIC_PRECISION",
    "KP_MAX",
    "KP_MIN",
    "MAX_EXAMPLE_CITIES",
    "OVAL_COEFFICIENTS",
    "POLE_SINGULARITY_LATITUDE",
    "MagneticPole",
    "OvalCoefficients",
]


@dataclass(frozen=True)
class MagneticPole:
    """Position of the north magnetic pole used by the tilted-dipole transform."""

    latitude: float  # Degrees north
    longitude: float  # Degrees east (negative for west)
    epoch: int  # Year the position was taken for
    review_by: int  # Year by which the position must be re-checked


@dataclass(frozen=True)
class OvalCoefficients:
    """
    Linear fit of the auroral oval boundaries against Kp.

    equatorward edge = max(edge_floor, quiet_edge - edge_per_kp * kp)
    center           = min(center_cap, edge + center_offset)
    poleward edge    = min(poleward_cap, edge + poleward_offset)

    Calibrated against the NOAA OVATION model. The five numbers are fitted
    together and must be recalibrated together.
    """

    quiet_edge: float = 67.0
    edge_per_kp: float = 2.5
    edge_floor: float = 45.0
    center_offset: float = 6.0
    center_cap: float = 73.0
    poleward_offset: float = 11.0
    poleward_cap: float = 78.0


# The magnetic pole drifts ~40-50 km/year toward Siberia
DEFAULT_POLE: Final[MagneticPole] = MagneticPole(latitude=86.1, longitude=-156.8, epoch=2025, review_by=2030)
"""North magnetic pole position (86.1 N, 156.8 W)."""

OVAL_COEFFICIENTS: Final[OvalCoefficients] = OvalCoefficients()
"""Empirical auroral oval fit."""

KP_MIN: Final[float] = 0.0
"""Lowest value of the planetary Kp index."""

KP_MAX: Final[float] = 9.0
"""Highest value of the planetary Kp index."""

GEOMAGNETIC_PRECISION: Final[int] = 2
"""Decimal places geomagnetic coordinates are rounded to."""

POLE_SINGULARITY_LATITUDE: Final[float] = 89.9
"""Above this geomagnetic latitude the longitude is undefined and reported as 0."""

MAX_EXAMPLE_CITIES: Final[int] = 5
"""Maximum number of example cities attached to a verdict."""
