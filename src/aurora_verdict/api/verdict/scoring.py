"""
Intensity Scoring

Combines five solar wind parameters into a 0-100 aurora intensity score.
Each parameter contributes points from its own threshold table:

- Kp: 5-30 points
- Bz: 5-40 points, the dominant term because southward Bz drives
  reconnection; northward Bz (>= 5 nT) subtracts 20 instead
- Speed: 2-15 points
- Bt: 2-10 points
- Density: 1-5 points

Contributions are added in that order. The northward Bz penalty is applied
to the running total the moment Bz is evaluated, floored at zero, before the
remaining terms are added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Final

import deal

from aurora_verdict.api.core.enums import StrengthCategory
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import SpaceWeatherSample
from aurora_verdict.api.core.validation import validate_sample
from aurora_verdict.api.verdict.categories import category_for_score


logger = logging.getLogger(__name__)


__all__ = [
    "BT_POINTS",
    "BZ_NORTHWARD_PENALTY",
    "BZ_POINTS",
    "DENSITY_POINTS",
    "KP_POINTS",
    "SPEED_POINTS",
    "IntensityScore",
    "ScoreBreakdown",
    "score_intensity",
]


KP_POINTS: Final[tuple[tuple[float, int], ...]] = ((8, 30), (6, 25), (5, 20), (4, 15), (3, 10), (0, 5))
"""Kp at or above the threshold earns the points."""

BZ_POINTS: Final[tuple[tuple[float, int], ...]] = ((-20, 40), (-10, 35), (-5, 25), (0, 15), (5, 5))
"""Bz strictly below the threshold earns the points."""

BZ_NORTHWARD_PENALTY: Final[int] = 20
"""Points removed from the running total when Bz is northward (>= 5 nT)."""

SPEED_POINTS: Final[tuple[tuple[float, int], ...]] = ((800, 15), (650, 12), (500, 8), (400, 5))
"""Speed strictly above the threshold earns the points; otherwise 2."""

BT_POINTS: Final[tuple[tuple[float, int], ...]] = ((20, 10), (15, 8), (10, 6), (5, 4))
"""Bt strictly above the threshold earns the points; otherwise 2."""

DENSITY_POINTS: Final[tuple[tuple[float, int], ...]] = ((25, 5), (15, 4), (7, 3))
"""Density strictly above the threshold earns the points; otherwise 1."""


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points contributed by each parameter, in evaluation order."""

    kp: int
    bz: int  # Negative when the northward penalty was applied
    speed: int
    bt: int
    density: int
    northward_penalty: bool = False

    @property
    def total(self) -> int:
        return self.kp + self.bz + self.speed + self.bt + self.density

    def to_dict(self) -> dict[str, Any]:
        return {
            "kp": self.kp,
            "bz": self.bz,
            "speed": self.speed,
            "bt": self.bt,
            "density": self.density,
            "northwardPenalty": self.northward_penalty,
        }


@dataclass(frozen=True)
class IntensityScore:
    """Intensity score with its category and per-parameter breakdown."""

    score: int  # 0-100
    category: StrengthCategory
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "category": self.category.value,
            "breakdown": self.breakdown.to_dict(),
        }


def _points_at_least(value: float, table: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in table:
        if value >= threshold:
            return points
    return table[-1][1]


def _points_above(value: float, table: tuple[tuple[float, int], ...], otherwise: int) -> int:
    for threshold, points in table:
        if value > threshold:
            return points
    return otherwise


def _points_below(value: float, table: tuple[tuple[float, int], ...]) -> int | None:
    for threshold, points in table:
        if value < threshold:
            return points
    return None


@deal.raises(InputRangeError)
@deal.post(lambda result: 0 <= result.score <= 100, message="Intensity score must be 0-100")
def score_intensity(sample: SpaceWeatherSample) -> IntensityScore:
    """
    Score aurora intensity from a space weather sample.

    The effective Kp (Hp30 when reported) is used for the Kp term.

    Args:
        sample: Space weather sample

    Returns:
        Clamped score, category and breakdown

    Raises:
        InputRangeError: If any sample field is out of range
    """
    validate_sample(sample)

    kp_points = _points_at_least(sample.effective_kp, KP_POINTS)
    total = kp_points

    bz_points = _points_below(sample.bz, BZ_POINTS)
    northward = bz_points is None
    if northward:
        penalized = max(0, total - BZ_NORTHWARD_PENALTY)
        bz_points = penalized - total
        total = penalized
    else:
        total += bz_points

    speed_points = _points_above(sample.speed, SPEED_POINTS, 2)
    bt_points = _points_above(sample.bt, BT_POINTS, 2)
    density_points = _points_above(sample.density, DENSITY_POINTS, 1)
    total += speed_points + bt_points + density_points

    score = max(0, min(100, total))
    breakdown = ScoreBreakdown(
        kp=kp_points,
        bz=bz_points,
        speed=speed_points,
        bt=bt_points,
        density=density_points,
        northward_penalty=northward,
    )
    category = category_for_score(score)
    logger.debug(f"Intensity score {score} ({category.value}) from {breakdown}")
    return IntensityScore(score=score, category=category, breakdown=breakdown)
