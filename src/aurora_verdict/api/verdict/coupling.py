"""
Newell Coupling Function

The Newell coupling function estimates the rate of magnetic flux opening at
the magnetopause, the best single predictor of auroral power:

    dPhi/dt = v^(4/3) * Bt^(2/3) * sin^(8/3)(theta / 2)

where v is the solar wind speed, Bt the transverse IMF magnitude and theta
the IMF clock angle atan2(By, Bz). Purely northward IMF gives zero coupling.

Reference: Newell et al., 2007, JGR.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Final

import deal

from aurora_verdict.api.core.enums import CouplingLevel
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.validation import check_finite, check_non_negative


logger = logging.getLogger(__name__)


__all__ = [
    "COUPLING_LEVELS",
    "COUPLING_DESCRIPTIONS",
    "COUPLING_SCALE",
    "NewellCoupling",
    "calculate_newell_coupling",
    "coupling_description",
]


COUPLING_LEVELS: Final[tuple[tuple[float, CouplingLevel], ...]] = (
    (40000, CouplingLevel.EXTREME),
    (25000, CouplingLevel.VERY_HIGH),
    (15000, CouplingLevel.HIGH),
    (8000, CouplingLevel.MODERATE),
    (3000, CouplingLevel.LOW),
)
"""Minimum coupling for each level, highest first. Anything lower is very low."""

COUPLING_SCALE: Final[float] = 100.0
"""Empirical divisor bringing the raw product into the observed 0-50000 range."""

COUPLING_DESCRIPTIONS: Final[dict[CouplingLevel, str]] = {
    CouplingLevel.VERY_LOW: "Minimal solar wind-magnetosphere coupling. Aurora unlikely except at very high latitudes.",
    CouplingLevel.LOW: "Weak coupling. Aurora may be visible in the auroral zone under dark, clear skies.",
    CouplingLevel.MODERATE: "Moderate coupling. Good chance of aurora at auroral latitudes.",
    CouplingLevel.HIGH: "Strong coupling. Active aurora expected. May be visible at sub-auroral latitudes.",
    CouplingLevel.VERY_HIGH: "Very strong coupling. Bright, active aurora. Visible well equatorward of normal.",
    CouplingLevel.EXTREME: "Extreme coupling! Major geomagnetic storm. Aurora visible at mid-latitudes.",
}
"""Reader-facing description of each coupling level."""

_NORMALIZATION_CEILING: Final[float] = 40000.0
_FAVORABLE_MINIMUM: Final[float] = 3000.0


@dataclass(frozen=True)
class NewellCoupling:
    """Coupling estimate and the observables predicted from it."""

    coupling: int  # Scaled dPhi/dt
    coupling_normalized: float  # 0-100 against the extreme threshold
    level: CouplingLevel
    speed_factor: int  # v^(4/3)
    bt_factor: float  # Bt^(2/3)
    clock_angle_factor: float  # sin^(8/3)(theta/2)
    clock_angle: int  # Degrees, 0 = northward, 180 = southward
    predicted_hemispheric_power: float  # GW
    predicted_kp: float
    predicted_auroral_latitude: int  # Equatorward edge, geomagnetic degrees
    is_favorable: bool
    favorability_reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "coupling": self.coupling,
            "couplingNormalized": self.coupling_normalized,
            "couplingLevel": self.level.value,
            "speedFactor": self.speed_factor,
            "btFactor": self.bt_factor,
            "clockAngleFactor": self.clock_angle_factor,
            "clockAngle": self.clock_angle,
            "predictedHemispherePower": self.predicted_hemispheric_power,
            "predictedKp": self.predicted_kp,
            "predictedAuroralLatitude": self.predicted_auroral_latitude,
            "isFavorable": self.is_favorable,
            "favorabilityReason": self.favorability_reason,
        }


def coupling_description(level: CouplingLevel) -> str:
    return COUPLING_DESCRIPTIONS[level]


def _level_for(coupling: float) -> CouplingLevel:
    for threshold, level in COUPLING_LEVELS:
        if coupling >= threshold:
            return level
    return CouplingLevel.VERY_LOW


def _favorability(coupling: float, speed: float, bz: float) -> tuple[bool, str]:
    if bz < -5 and speed > 400:
        return True, "Southward IMF and elevated solar wind - good coupling"
    if bz < 0 and speed > 500:
        return True, "Fast solar wind with negative Bz - moderate coupling"
    if bz > 5:
        return False, "Strong northward IMF - poor coupling, minimal activity expected"
    if speed < 350:
        return False, "Slow solar wind - weak coupling regardless of IMF"
    if bz > 0:
        return False, "Northward IMF - energy not entering magnetosphere effectively"
    if coupling > _FAVORABLE_MINIMUM:
        return True, "Moderate conditions for aurora"
    return False, "Weak coupling - low aurora probability"


@deal.raises(InputRangeError)
@deal.post(lambda result: result.coupling >= 0, message="Coupling must be non-negative")
@deal.post(lambda result: 0 <= result.predicted_kp <= 9, message="Predicted Kp must be 0-9")
def calculate_newell_coupling(speed: float, bz: float, by: float, bt: float | None = None) -> NewellCoupling:
    """
    Calculate the Newell coupling function.

    Args:
        speed: Solar wind speed in km/s
        bz: IMF Bz in nT (positive = northward)
        by: IMF By in nT
        bt: Transverse IMF magnitude in nT (default: sqrt(By² + Bz²))

    Returns:
        Coupling estimate with predicted observables

    Raises:
        InputRangeError: If speed or bt is negative, or any value is not finite
    """
    check_non_negative("speed", speed)
    check_finite("bz", bz)
    check_finite("by", by)
    if bt is not None:
        check_non_negative("bt", bt)

    transverse = bt if bt is not None else math.hypot(by, bz)
    clock_angle_rad = math.atan2(by, bz)
    clock_angle_deg = (math.degrees(clock_angle_rad) + 360) % 360

    speed_factor = speed ** (4 / 3)
    bt_factor = transverse ** (2 / 3)
    clock_angle_factor = math.sin(abs(clock_angle_rad) / 2) ** (8 / 3)

    coupling = max(0.0, speed_factor * bt_factor * clock_angle_factor / COUPLING_SCALE)

    hemispheric_power = 2 * (coupling / 1000) ** 0.8
    predicted_kp = 0.0 if coupling <= 0 else min(9.0, max(0.0, math.log10(coupling / 500) * 3))
    auroral_latitude = max(40.0, 72 - math.log10(max(1.0, coupling / 500)) * 4)
    is_favorable, reason = _favorability(coupling, speed, bz)

    result = NewellCoupling(
        coupling=round(coupling),
        coupling_normalized=round(min(100.0, coupling / _NORMALIZATION_CEILING * 100), 1),
        level=_level_for(coupling),
        speed_factor=round(speed_factor),
        bt_factor=round(bt_factor, 2),
        clock_angle_factor=round(clock_angle_factor, 3),
        clock_angle=round(clock_angle_deg),
        predicted_hemispheric_power=round(hemispheric_power, 1),
        predicted_kp=round(predicted_kp, 1),
        predicted_auroral_latitude=round(auroral_latitude),
        is_favorable=is_favorable,
        favorability_reason=reason,
    )
    logger.debug(f"Newell coupling {result.coupling} ({result.level.value}), favorable={is_favorable}")
    return result
