"""
Auroral Oval Model

Maps the planetary Kp index to the three boundary latitudes of the auroral
oval. The oval contracts toward the pole in quiet conditions and expands
toward the equator as activity rises:

- Kp 0: equatorward edge at ~67° (quiet)
- Kp 3: ~60° (unsettled)
- Kp 5: ~55° (minor storm)
- Kp 7: ~50° (strong storm)
- Kp 9: ~45° (severe storm)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import deal

from aurora_verdict.api.core.constants import OVAL_COEFFICIENTS, OvalCoefficients
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.validation import validate_kp


logger = logging.getLogger(__name__)


__all__ = [
    "AuroralOvalGeometry",
    "oval_geometry",
]


@dataclass(frozen=True)
class AuroralOvalGeometry:
    """Boundary latitudes of the auroral oval, in geomagnetic degrees."""

    equatorward_edge: float  # Lowest latitude the oval reaches
    center_latitude: float  # Where aurora is most intense
    poleward_edge: float  # Highest latitude of the oval

    def to_dict(self) -> dict[str, Any]:
        return {
            "equatorwardEdge": self.equatorward_edge,
            "centerLatitude": self.center_latitude,
            "polewardEdge": self.poleward_edge,
        }


def _within_bounds(result: AuroralOvalGeometry) -> bool:
    return (
        45.0 <= result.equatorward_edge <= result.center_latitude <= result.poleward_edge <= 78.0
    )


@deal.raises(InputRangeError)
@deal.post(_within_bounds, message="Oval must satisfy edge <= center <= poleward within 45-78 degrees")
def oval_geometry(kp: float, coefficients: OvalCoefficients = OVAL_COEFFICIENTS) -> AuroralOvalGeometry:
    """
    Calculate the auroral oval boundaries for a Kp index.

    Args:
        kp: Planetary Kp index (0-9); rejected rather than clamped when out of range
        coefficients: Empirical oval fit

    Returns:
        Oval geometry

    Raises:
        InputRangeError: If kp is outside 0-9
    """
    validate_kp(kp)

    edge = max(coefficients.edge_floor, coefficients.quiet_edge - coefficients.edge_per_kp * kp)
    geometry = AuroralOvalGeometry(
        equatorward_edge=edge,
        center_latitude=min(coefficients.center_cap, edge + coefficients.center_offset),
        poleward_edge=min(coefficients.poleward_cap, edge + coefficients.poleward_offset),
    )
    logger.debug(f"Oval at Kp {kp}: {geometry}")
    return geometry
