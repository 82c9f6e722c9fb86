"""Geomagnetic coordinates, auroral oval, and visibility classification."""

from aurora_verdict.api.geomagnetic.coordinates import format_geomagnetic, to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry
from aurora_verdict.api.geomagnetic.visibility import (
    LocationDescription,
    VisibilityAssessment,
    assess_visibility,
    describe_location,
)


__all__ = [
    "AuroralOvalGeometry",
    "LocationDescription",
    "VisibilityAssessment",
    "assess_visibility",
    "describe_location",
    "format_geomagnetic",
    "oval_geometry",
    "to_geomagnetic",
]
