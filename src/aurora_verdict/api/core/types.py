"""
Type definitions for the aurora verdict engine.

Input records are immutable and supplied per call. Every record exposes
``to_dict()`` with the camelCase field names used by presentation code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aurora_verdict.api.core.enums import SubstormPhase


__all__ = [
    "GeographicPoint",
    "GeomagneticPoint",
    "SpaceWeatherSample",
]


@dataclass(frozen=True)
class SpaceWeatherSample:
    """A single sample of interplanetary space weather telemetry."""

    kp: float  # Planetary Kp index (0-9)
    bz: float  # IMF north-south component in nT (negative = southward)
    bt: float  # Total IMF magnitude in nT
    speed: float  # Solar wind bulk speed in km/s
    density: float  # Solar wind proton density in particles/cm³
    by: float | None = None  # IMF east-west component in nT, enables Newell coupling
    hp30: float | None = None  # Half-hourly Hp index, responds faster than Kp
    magnetometer_delta_b: float | None = None  # Ground magnetometer disturbance in nT
    substorm_phase: SubstormPhase | None = None

    def __post_init__(self) -> None:
        # Accept the plain string form of a phase; unknown names are left for validation
        if isinstance(self.substorm_phase, str) and not isinstance(self.substorm_phase, SubstormPhase):
            if self.substorm_phase in {phase.value for phase in SubstormPhase}:
                object.__setattr__(self, "substorm_phase", SubstormPhase(self.substorm_phase))

    @property
    def effective_kp(self) -> float:
        """Kp used for the oval and scoring: Hp30 when reported, otherwise Kp."""
        return self.hp30 if self.hp30 is not None else self.kp

    @property
    def has_enhanced_inputs(self) -> bool:
        return any(
            value is not None for value in (self.by, self.hp30, self.magnetometer_delta_b, self.substorm_phase)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kp": self.kp,
            "bz": self.bz,
            "bt": self.bt,
            "speed": self.speed,
            "density": self.density,
            "by": self.by,
            "hp30": self.hp30,
            "magnetometerDeltaB": self.magnetometer_delta_b,
            "substormPhase": str(self.substorm_phase) if self.substorm_phase is not None else None,
        }


@dataclass(frozen=True)
class GeographicPoint:
    """Geographic position in decimal degrees (WGS84)."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)

    def to_dict(self) -> dict[str, Any]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class GeomagneticPoint:
    """Position in the tilted-dipole geomagnetic frame."""

    latitude: float
    longitude: float

    @property
    def is_northern(self) -> bool:
        return self.latitude >= 0

    @property
    def abs_latitude(self) -> float:
        return abs(self.latitude)

    def to_dict(self) -> dict[str, Any]:
        return {"latitude": self.latitude, "longitude": self.longitude}
