"""
Aurora Engine

Facade binding the engine configuration (magnetic pole and reference cities)
to the calculation modules. The configuration is passed in at construction,
so a pole update or an alternative city list never touches algorithm code.
"""

from __future__ import annotations

import logging

from aurora_verdict.api.appearance.prediction import LocationPrediction, predict_appearance
from aurora_verdict.api.core.config import EngineConfig, get_engine_config
from aurora_verdict.api.core.enums import QualityTier
from aurora_verdict.api.core.types import GeographicPoint, GeomagneticPoint, SpaceWeatherSample
from aurora_verdict.api.geomagnetic.coordinates import to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry
from aurora_verdict.api.geomagnetic.visibility import (
    LocationDescription,
    VisibilityAssessment,
    assess_visibility,
    describe_location,
)
from aurora_verdict.api.verdict.verdict import CityVisibility, IntensityVerdict, calculate_verdict, city_visibility


logger = logging.getLogger(__name__)


__all__ = [
    "AuroraEngine",
    "clear_default_engine",
    "get_default_engine",
]


class AuroraEngine:
    """
    Aurora verdict engine bound to a configuration.

    Every method is a pure function of its arguments and the configuration;
    the engine holds no other state and can be shared freely.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        """
        Initialize the engine.

        Args:
            config: Pole and reference cities (default: loaded from the environment)
        """
        self.config = config if config is not None else get_engine_config()
        logger.debug(
            f"Engine using pole {self.config.pole.latitude}, {self.config.pole.longitude} "
            f"and {len(self.config.reference_cities)} reference cities"
        )

    def to_geomagnetic(self, latitude: float, longitude: float) -> GeomagneticPoint:
        return to_geomagnetic(latitude, longitude, self.config.pole)

    def oval_geometry(self, kp: float) -> AuroralOvalGeometry:
        return oval_geometry(kp)

    def assess_visibility(self, geomagnetic_latitude: float, kp: float) -> VisibilityAssessment:
        return assess_visibility(geomagnetic_latitude, kp)

    def describe_location(self, latitude: float, longitude: float, kp: float) -> LocationDescription:
        return describe_location(latitude, longitude, kp, self.config.pole)

    def calculate_verdict(self, sample: SpaceWeatherSample) -> IntensityVerdict:
        return calculate_verdict(sample, self.config)

    def predict_appearance(
        self, observer: GeographicPoint, kp: float, sample: SpaceWeatherSample | None = None
    ) -> LocationPrediction:
        return predict_appearance(observer, kp, sample, self.config)

    def city_visibility(self, kp: float) -> list[CityVisibility]:
        """Visibility at every reference city, in dataset order."""
        return list(city_visibility(self.config.reference_cities, kp, self.config.pole))

    def visible_cities(self, kp: float, min_tier: QualityTier = QualityTier.POOR) -> list[CityVisibility]:
        """
        Reference cities where the aurora is visible at a Kp index.

        Args:
            kp: Planetary Kp index (0-9)
            min_tier: Lowest acceptable quality tier

        Returns:
            Visible cities in dataset order
        """
        return [
            entry
            for entry in self.city_visibility(kp)
            if entry.visibility.is_visible and entry.visibility.quality_tier.rank >= min_tier.rank
        ]


# Global engine instance
_default_engine: AuroraEngine | None = None


def get_default_engine() -> AuroraEngine:
    """Get the shared engine built from the cached configuration."""
    global _default_engine

    if _default_engine is None:
        _default_engine = AuroraEngine()

    return _default_engine


def clear_default_engine() -> None:
    """Drop the shared engine (rebuilt on next access)."""
    global _default_engine
    _default_engine = None
