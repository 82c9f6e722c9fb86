"""
Reference City Dataset

Static list of cities used to populate a verdict's example cities. The list
ships as a JSON data file, ordered from the classic aurora destinations to the
low-latitude cities that only see the most extreme storms. It is loaded once
and treated as immutable for the life of the process.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import deal

from aurora_verdict.api.core.enums import CityRating
from aurora_verdict.api.core.exceptions import ReferenceDataError
from aurora_verdict.api.core.validation import validate_coordinates, validate_kp


logger = logging.getLogger(__name__)


__all__ = [
    "DEFAULT_REFERENCE_CITIES_PATH",
    "ReferenceCity",
    "load_reference_cities",
]


DEFAULT_REFERENCE_CITIES_PATH = Path(__file__).parent / "data" / "reference_cities.json"


@dataclass(frozen=True)
class ReferenceCity:
    """A city with a well-known aurora viewing record."""

    name: str
    geographic_latitude: float  # Degrees north
    geographic_longitude: float  # Degrees east
    note: str
    min_kp: int = 9  # Lowest Kp for good viewing
    rating: CityRating = CityRating.RARE

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "geographicLatitude": self.geographic_latitude,
            "geographicLongitude": self.geographic_longitude,
            "note": self.note,
            "minKp": self.min_kp,
            "rating": self.rating.value,
        }


def _whole_kp(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float) or not float(value).is_integer():
        raise ValueError(f"min_kp must be a whole number, got {value!r}")
    return int(value)


def _parse_city(entry: dict[str, Any]) -> ReferenceCity:
    try:
        city = ReferenceCity(
            name=str(entry["name"]),
            geographic_latitude=float(entry["latitude"]),
            geographic_longitude=float(entry["longitude"]),
            note=str(entry.get("note", "")),
            min_kp=_whole_kp(entry.get("min_kp", 9)),
            rating=CityRating(entry.get("rating", CityRating.RARE.value)),
        )
        validate_coordinates(city.geographic_latitude, city.geographic_longitude)
        validate_kp(city.min_kp, field="min_kp")
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        # InputRangeError is a ValueError, so range problems land here too
        raise ReferenceDataError(f"Invalid reference city entry {entry!r}: {e}") from e
    return city


@deal.raises(ReferenceDataError)
@deal.post(lambda result: len(result) > 0, message="Reference dataset must not be empty")
def load_reference_cities(path: Path | None = None) -> tuple[ReferenceCity, ...]:
    """
    Load the reference city dataset from a JSON file.

    Args:
        path: Dataset path (default: the bundled reference_cities.json)

    Returns:
        Cities in dataset order

    Raises:
        ReferenceDataError: If the file is missing, malformed or empty
    """
    json_path = path or DEFAULT_REFERENCE_CITIES_PATH

    if not json_path.exists():
        raise ReferenceDataError(f"Reference city dataset not found: {json_path}")

    logger.debug(f"Loading reference cities from {json_path}")

    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ReferenceDataError(f"Cannot read reference city dataset {json_path}: {e}") from e

    entries = data.get("cities") if isinstance(data, dict) else data
    if not isinstance(entries, list) or not entries:
        raise ReferenceDataError(f"Reference city dataset has no cities: {json_path}")

    cities = tuple(_parse_city(entry) for entry in entries)
    logger.info(f"Loaded {len(cities)} reference cities from {json_path.name}")
    return cities
