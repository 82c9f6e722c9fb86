"""
Input range validation.

Every public entry point validates its inputs here before computing anything,
so a verdict is either produced in full or an InputRangeError is raised.
"""

from __future__ import annotations

import logging
import math

import deal

from aurora_verdict.api.core.constants import KP_MAX, KP_MIN
from aurora_verdict.api.core.enums import SubstormPhase
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import GeographicPoint, SpaceWeatherSample


logger = logging.getLogger(__name__)


__all__ = [
    "check_finite",
    "check_non_negative",
    "check_range",
    "validate_coordinates",
    "validate_kp",
    "validate_latitude",
    "validate_point",
    "validate_sample",
    "validate_substorm_phase",
]


def check_finite(field: str, value: float) -> None:
    """Reject booleans, non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        raise InputRangeError(field, value, "a finite number")


def check_range(field: str, value: float, low: float, high: float) -> None:
    check_finite(field, value)
    if not low <= value <= high:
        raise InputRangeError(field, value, f"{low:g} to {high:g}")


def check_non_negative(field: str, value: float) -> None:
    check_finite(field, value)
    if value < 0:
        raise InputRangeError(field, value, ">= 0")


@deal.raises(InputRangeError)
def validate_kp(kp: float, field: str = "kp") -> float:
    """
    Validate a Kp-scale index.

    Args:
        kp: Index value
        field: Name reported in the error

    Returns:
        The value unchanged

    Raises:
        InputRangeError: If the value is outside 0-9
    """
    check_range(field, kp, KP_MIN, KP_MAX)
    return kp


@deal.raises(InputRangeError)
def validate_latitude(latitude: float, field: str = "latitude") -> float:
    check_range(field, latitude, -90.0, 90.0)
    return latitude


@deal.raises(InputRangeError)
def validate_coordinates(latitude: float, longitude: float) -> None:
    """Validate a geographic latitude/longitude pair."""
    check_range("latitude", latitude, -90.0, 90.0)
    check_range("longitude", longitude, -180.0, 180.0)


@deal.raises(InputRangeError)
def validate_point(point: GeographicPoint) -> GeographicPoint:
    validate_coordinates(point.latitude, point.longitude)
    return point


@deal.raises(InputRangeError)
def validate_substorm_phase(phase: SubstormPhase | str) -> SubstormPhase:
    """Coerce a substorm phase name, rejecting anything that is not a known phase."""
    try:
        return SubstormPhase(phase)
    except ValueError as e:
        names = ", ".join(member.value for member in SubstormPhase)
        raise InputRangeError("substorm_phase", phase, f"one of {names}") from e


@deal.raises(InputRangeError)
def validate_sample(sample: SpaceWeatherSample) -> SpaceWeatherSample:
    """
    Validate every field of a space weather sample.

    Bz and By are signed and only need to be finite. Optional enhanced
    inputs are checked when present.

    Raises:
        InputRangeError: On the first field out of range
    """
    validate_kp(sample.kp)
    check_finite("bz", sample.bz)
    check_non_negative("bt", sample.bt)
    check_non_negative("speed", sample.speed)
    check_non_negative("density", sample.density)

    if sample.by is not None:
        check_finite("by", sample.by)
    if sample.hp30 is not None:
        validate_kp(sample.hp30, field="hp30")
    if sample.magnetometer_delta_b is not None:
        check_non_negative("magnetometer_delta_b", sample.magnetometer_delta_b)
    if sample.substorm_phase is not None:
        validate_substorm_phase(sample.substorm_phase)

    logger.debug(f"Validated sample {sample}")
    return sample
