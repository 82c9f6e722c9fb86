"""
Engine Configuration

The pole position and the reference city list are injected into the engine
rather than read from hidden globals, so the pole can be updated as the real
magnetic pole drifts without touching any algorithm code.

Configuration is read from environment variables (a ``.env`` file is loaded
by the CLI before this runs):

- AURORA_POLE_LATITUDE / AURORA_POLE_LONGITUDE: override the magnetic pole
- AURORA_REFERENCE_CITIES: path to an alternative reference city dataset
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from aurora_verdict.api.core.constants import DEFAULT_POLE, MagneticPole
from aurora_verdict.api.core.exceptions import InvalidConfigurationError
from aurora_verdict.api.reference.cities import ReferenceCity, load_reference_cities


logger = logging.getLogger(__name__)


__all__ = [
    "ENV_POLE_LATITUDE",
    "ENV_POLE_LONGITUDE",
    "ENV_REFERENCE_CITIES",
    "EngineConfig",
    "check_pole_review",
    "clear_engine_config",
    "get_engine_config",
    "load_engine_config",
    "set_engine_config",
]


ENV_POLE_LATITUDE: Final[str] = "AURORA_POLE_LATITUDE"
"""Environment variable overriding the magnetic pole latitude."""

ENV_POLE_LONGITUDE: Final[str] = "AURORA_POLE_LONGITUDE"
"""Environment variable overriding the magnetic pole longitude."""

ENV_REFERENCE_CITIES: Final[str] = "AURORA_REFERENCE_CITIES"
"""Environment variable pointing at an alternative reference city JSON file."""


@dataclass(frozen=True)
class EngineConfig:
    """Read-only data the engine is constructed with."""

    pole: MagneticPole = DEFAULT_POLE
    reference_cities: tuple[ReferenceCity, ...] = field(default_factory=tuple)


# Global cached configuration
_current_config: EngineConfig | None = None


def _read_float(environ: Mapping[str, str], name: str, low: float, high: float) -> float | None:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None

    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidConfigurationError(f"{name}={raw!r} is not a number") from e

    if not math.isfinite(value) or not low <= value <= high:
        raise InvalidConfigurationError(f"{name}={raw!r} must be between {low:g} and {high:g}")
    return value


def check_pole_review(pole: MagneticPole, year: int | None = None) -> bool:
    """
    Check whether the pole position is still within its review window.

    Logs a warning when the review year has passed.

    Returns:
        True if the pole position is current, False if it is overdue for review
    """
    current_year = year if year is not None else datetime.now(UTC).year
    if current_year > pole.review_by:
        logger.warning(
            f"Magnetic pole position from {pole.epoch} was due for review by {pole.review_by}; "
            f"geomagnetic latitudes may be drifting"
        )
        return False
    return True


def load_engine_config(environ: Mapping[str, str] | None = None) -> EngineConfig:
    """
    Build an engine configuration from environment variables.

    Args:
        environ: Variables to read (default: os.environ)

    Returns:
        Engine configuration with the pole and the loaded reference cities

    Raises:
        InvalidConfigurationError: If a variable holds an invalid value
        ReferenceDataError: If the reference city dataset cannot be loaded
    """
    env = os.environ if environ is None else environ

    # The pole must stay off the rotational pole or the azimuth terms degenerate
    latitude = _read_float(env, ENV_POLE_LATITUDE, 0.0, 89.99)
    longitude = _read_float(env, ENV_POLE_LONGITUDE, -180.0, 180.0)

    pole = DEFAULT_POLE
    if latitude is not None or longitude is not None:
        pole = MagneticPole(
            latitude=latitude if latitude is not None else DEFAULT_POLE.latitude,
            longitude=longitude if longitude is not None else DEFAULT_POLE.longitude,
            epoch=DEFAULT_POLE.epoch,
            review_by=DEFAULT_POLE.review_by,
        )
        logger.info(f"Using magnetic pole override {pole.latitude}, {pole.longitude}")

    cities_path = env.get(ENV_REFERENCE_CITIES)
    if cities_path:
        logger.info(f"Using reference cities from {cities_path}")
        cities = load_reference_cities(Path(cities_path).expanduser())
    else:
        cities = load_reference_cities()

    check_pole_review(pole)
    return EngineConfig(pole=pole, reference_cities=cities)


def get_engine_config() -> EngineConfig:
    """
    Get the current engine configuration.

    Loads from the environment on first use and caches the result for the
    life of the process.
    """
    global _current_config

    if _current_config is None:
        _current_config = load_engine_config()

    return _current_config


def set_engine_config(config: EngineConfig) -> None:
    """Replace the cached engine configuration."""
    global _current_config
    _current_config = config


def clear_engine_config() -> None:
    """Clear the cached configuration (reloaded on next access)."""
    global _current_config
    _current_config = None
