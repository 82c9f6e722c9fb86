"""
Angle utilities for the aurora verdict engine.

Uses Astropy's Angle for degree/DMS conversion and formatting so that
coordinates are presented consistently across the CLI and the records.
"""

from __future__ import annotations

import logging

from astropy import units as u
from astropy.coordinates import Angle


logger = logging.getLogger(__name__)


__all__ = [
    "degrees_to_dms",
    "format_latitude",
    "format_longitude",
    "normalize_longitude",
]


def degrees_to_dms(degrees: float) -> tuple[int, int, float, str]:
    """
    Convert decimal degrees to degrees/minutes/seconds format.

    Args:
        degrees: Decimal degrees

    Returns:
        Tuple of (degrees, minutes, seconds, sign)
    """
    angle = Angle(degrees, unit=u.deg)
    dms = angle.dms
    sign = "+" if degrees >= 0 else "-"
    return int(abs(dms.d)), int(abs(dms.m)), abs(dms.s), sign


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into the -180 to +180 degree range."""
    angle = Angle(longitude, unit=u.deg).wrap_at(180 * u.deg)
    return float(angle.degree)


def format_latitude(latitude: float) -> str:
    """
    Format a latitude as a readable string.

    Args:
        latitude: Latitude in decimal degrees

    Returns:
        Formatted string like "65°42'36\\" N"
    """
    d, m, s, sign = degrees_to_dms(latitude)
    hemisphere = "N" if sign == "+" else "S"
    return f"{d}°{m:02d}'{s:02.0f}\" {hemisphere}"


def format_longitude(longitude: float) -> str:
    """Format a longitude as a readable string (E/W)."""
    d, m, s, sign = degrees_to_dms(normalize_longitude(longitude))
    hemisphere = "E" if sign == "+" else "W"
    return f"{d}°{m:02d}'{s:02.0f}\" {hemisphere}"
