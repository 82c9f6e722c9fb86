"""
Custom exception classes for the aurora verdict engine.

This module defines specific exceptions for the error conditions that can
occur before a verdict or prediction is computed. Physically implausible
telemetry is *not* an error: it is reported through the verdict's physics flag.
"""

from __future__ import annotations


__all__ = [
    # Base exception
    "AuroraVerdictError",
    # Configuration exceptions
    "ConfigurationError",
    # Input exceptions
    "InputRangeError",
    "InvalidConfigurationError",
    "ReferenceDataError",
]


class AuroraVerdictError(Exception):
    """
    Base exception for all aurora verdict errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all engine-related errors.
    """

    pass


class InputRangeError(AuroraVerdictError, ValueError):
    """
    Raised when an input value is outside its valid range.

    This occurs when attempting to use values that are:
    - Latitude outside -90 to +90 degrees
    - Longitude outside -180 to +180 degrees
    - Kp (or Hp30) outside 0 to 9
    - Negative Bt, solar wind speed, density or magnetometer delta-B
    - NaN or infinite
    - A substorm phase name that is not a known phase

    Values are never clamped: a bad reading from upstream telemetry must
    surface here rather than be silently turned into a plausible one.
    """

    def __init__(self, field: str, value: float, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"{field}={value!r} is out of range (expected {expected})")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(AuroraVerdictError):
    """Base exception for configuration-related errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when a configuration value (environment or file) is invalid."""

    pass


class ReferenceDataError(ConfigurationError):
    """Raised when the reference city dataset is missing or malformed."""

    pass
