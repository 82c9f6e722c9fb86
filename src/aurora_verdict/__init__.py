"""
Aurora Verdict Engine

Predicts whether, how brightly and in what form an aurora will be visible,
from a single sample of space weather telemetry and an observer's position.

Example:
    >>> from aurora_verdict import AuroraEngine, GeographicPoint, SpaceWeatherSample
    >>> engine = AuroraEngine()
    >>> sample = SpaceWeatherSample(kp=5, bz=-8, bt=12, speed=550, density=8)
    >>> verdict = engine.calculate_verdict(sample)
    >>> verdict.intensity_score, verdict.strength_category
    (62, <StrengthCategory.STRONG: 'STRONG'>)
    >>> prediction = engine.predict_appearance(GeographicPoint(69.6, 18.9), kp=3)
    >>> prediction.scenario
    <ViewingScenario.UNDER_OVAL_CENTER: 'under_oval_center'>
"""

# Engine facade
from aurora_verdict.api.appearance.prediction import LocationPrediction, predict_appearance
from aurora_verdict.api.core.config import EngineConfig, load_engine_config

# Enums
from aurora_verdict.api.core.enums import (
    ApparentBrightness,
    LookingToward,
    PhysicsFlag,
    QualityTier,
    StrengthCategory,
    ViewingScenario,
)

# Exceptions
from aurora_verdict.api.core.exceptions import (
    AuroraVerdictError,
    ConfigurationError,
    InputRangeError,
    InvalidConfigurationError,
    ReferenceDataError,
)

# Type definitions
from aurora_verdict.api.core.types import GeographicPoint, GeomagneticPoint, SpaceWeatherSample
from aurora_verdict.api.engine import AuroraEngine, get_default_engine

# Calculations
from aurora_verdict.api.geomagnetic.coordinates import to_geomagnetic
from aurora_verdict.api.geomagnetic.oval import AuroralOvalGeometry, oval_geometry
from aurora_verdict.api.geomagnetic.visibility import VisibilityAssessment, assess_visibility
from aurora_verdict.api.verdict.verdict import IntensityVerdict, calculate_verdict


__version__ = "0.1.0"

__all__ = [
    "ApparentBrightness",
    "AuroraEngine",
    "AuroraVerdictError",
    "AuroralOvalGeometry",
    "ConfigurationError",
    "EngineConfig",
    "GeographicPoint",
    "GeomagneticPoint",
    "InputRangeError",
    "IntensityVerdict",
    "InvalidConfigurationError",
    "LocationPrediction",
    "LookingToward",
    "PhysicsFlag",
    "QualityTier",
    "ReferenceDataError",
    "SpaceWeatherSample",
    "StrengthCategory",
    "ViewingScenario",
    "VisibilityAssessment",
    "__version__",
    "assess_visibility",
    "calculate_verdict",
    "get_default_engine",
    "load_engine_config",
    "oval_geometry",
    "predict_appearance",
    "to_geomagnetic",
]
