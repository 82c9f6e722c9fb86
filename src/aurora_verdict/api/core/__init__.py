"""Core subpackage for shared types, constants, validation, and exceptions."""

from aurora_verdict.api.core.enums import (
    PhysicsFlag,
    QualityTier,
    StrengthCategory,
    ViewingScenario,
)
from aurora_verdict.api.core.exceptions import (
    AuroraVerdictError,
    ConfigurationError,
    InputRangeError,
    InvalidConfigurationError,
    ReferenceDataError,
)
from aurora_verdict.api.core.types import GeographicPoint, GeomagneticPoint, SpaceWeatherSample


__all__ = [
    "AuroraVerdictError",
    "ConfigurationError",
    "GeographicPoint",
    "GeomagneticPoint",
    "InputRangeError",
    "InvalidConfigurationError",
    "PhysicsFlag",
    "QualityTier",
    "ReferenceDataError",
    "SpaceWeatherSample",
    "StrengthCategory",
    "ViewingScenario",
]
