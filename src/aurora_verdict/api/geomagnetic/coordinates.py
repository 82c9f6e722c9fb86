"""
Geomagnetic Coordinate Transform

Converts geographic coordinates to geomagnetic coordinates using a
tilted-dipole approximation anchored on the north magnetic pole. Accurate
enough for aurora visibility, which depends on distance from the magnetic
pole rather than from the rotational one.
"""

from __future__ import annotations

import logging
import math

import deal

from aurora_verdict.api.core.constants import (
    DEFAULT_POLE,
    GEOMAGNETIC_PRECISION,
    POLE_SINGULARITY_LATITUDE,
    MagneticPole,
)
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import GeomagneticPoint
from aurora_verdict.api.core.utils import format_latitude, format_longitude
from aurora_verdict.api.core.validation import validate_coordinates


logger = logging.getLogger(__name__)


__all__ = [
    "format_geomagnetic",
    "to_geomagnetic",
]


@deal.raises(InputRangeError)
@deal.post(lambda result: -90.0 <= result.latitude <= 90.0, message="Geomagnetic latitude must be -90 to +90")
@deal.post(lambda result: -180.0 <= result.longitude <= 180.0, message="Geomagnetic longitude must be -180 to +180")
def to_geomagnetic(latitude: float, longitude: float, pole: MagneticPole = DEFAULT_POLE) -> GeomagneticPoint:
    """
    Convert geographic coordinates to geomagnetic coordinates.

    Uses the spherical law of cosines for the angular distance to the pole,
    then the two-argument arctangent of the azimuth components for the
    longitude. Within 0.1 degrees of the geomagnetic pole the longitude is
    undefined and reported as 0.

    Args:
        latitude: Geographic latitude in degrees (-90 to +90)
        longitude: Geographic longitude in degrees (-180 to +180)
        pole: Magnetic pole the dipole is anchored on

    Returns:
        Geomagnetic point rounded to two decimal places

    Raises:
        InputRangeError: If latitude or longitude is out of range
    """
    validate_coordinates(latitude, longitude)

    lat = math.radians(latitude)
    lon = math.radians(longitude)
    pole_lat = math.radians(pole.latitude)
    pole_lon = math.radians(pole.longitude)

    cos_distance = math.sin(pole_lat) * math.sin(lat) + math.cos(pole_lat) * math.cos(lat) * math.cos(lon - pole_lon)
    colatitude = math.acos(max(-1.0, min(1.0, cos_distance)))
    geomagnetic_lat = 90.0 - math.degrees(colatitude)

    geomagnetic_lon = 0.0
    if abs(geomagnetic_lat) < POLE_SINGULARITY_LATITUDE:
        sin_colat = math.sin(colatitude)
        sin_az = math.cos(pole_lat) * math.sin(lon - pole_lon) / sin_colat
        cos_az = (math.sin(lat) - math.sin(pole_lat) * math.cos(colatitude)) / (math.cos(pole_lat) * sin_colat)
        geomagnetic_lon = math.degrees(math.atan2(sin_az, cos_az))

    point = GeomagneticPoint(
        latitude=round(geomagnetic_lat, GEOMAGNETIC_PRECISION),
        longitude=round(geomagnetic_lon, GEOMAGNETIC_PRECISION),
    )
    logger.debug(f"Geographic ({latitude}, {longitude}) -> geomagnetic ({point.latitude}, {point.longitude})")
    return point


def format_geomagnetic(point: GeomagneticPoint) -> str:
    """Format a geomagnetic point as DMS text, e.g. "65°42'36\" N, 116°07'12\" E"."""
    return f"{format_latitude(point.latitude)}, {format_longitude(point.longitude)}"
