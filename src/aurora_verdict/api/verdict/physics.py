"""
Physics Plausibility Validator

Cross-checks the solar wind parameters for combinations that are internally
inconsistent or physically unusual. Implausibility is reported as a flag on
the verdict, not raised: an impossible combination is real, informative
output that must be shown to the user as "check data quality".

Rules are evaluated in table order and the first match wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

import deal

from aurora_verdict.api.core.enums import PhysicsFlag
from aurora_verdict.api.core.exceptions import InputRangeError
from aurora_verdict.api.core.types import SpaceWeatherSample
from aurora_verdict.api.core.validation import validate_sample


logger = logging.getLogger(__name__)


__all__ = [
    "CERTAINTY_LABELS",
    "PHYSICS_RULES",
    "PhysicsAssessment",
    "PhysicsRule",
    "certainty_label",
    "validate_physics",
]


@dataclass(frozen=True)
class PhysicsRule:
    """A single plausibility rule."""

    name: str
    flag: PhysicsFlag
    certainty: int  # 0-100
    notes: str
    applies: Callable[[SpaceWeatherSample], bool]
    tip_note: str | None = None  # Appended to the viewing tip when the rule matches


@dataclass(frozen=True)
class PhysicsAssessment:
    """Result of the plausibility check."""

    flag: PhysicsFlag
    certainty: int
    notes: str
    rule: str
    tip_note: str | None = None

    @property
    def is_impossible(self) -> bool:
        """Impossible verdicts force score 0, category NONE and certainty 0."""
        return self.flag is PhysicsFlag.IMPOSSIBLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "flag": self.flag.value,
            "certainty": self.certainty,
            "notes": self.notes,
            "rule": self.rule,
            "tipNote": self.tip_note,
        }


PHYSICS_RULES: Final[tuple[PhysicsRule, ...]] = (
    PhysicsRule(
        name="severe_storm_northward_bz",
        flag=PhysicsFlag.IMPOSSIBLE,
        certainty=0,
        notes="Kp 8+ cannot be sustained with northward Bz - check data quality",
        applies=lambda s: s.effective_kp >= 8 and s.bz > 0,
    ),
    PhysicsRule(
        name="severe_storm_quiet_wind",
        flag=PhysicsFlag.IMPOSSIBLE,
        certainty=0,
        notes="Kp 8+ with slow, sparse solar wind is physically inconsistent - check data quality",
        applies=lambda s: s.effective_kp >= 8 and s.speed < 400 and s.density < 3,
    ),
    PhysicsRule(
        name="storm_strong_northward_bz",
        flag=PhysicsFlag.UNLIKELY,
        certainty=30,
        notes="Kp 6+ with strongly northward Bz and slow wind is highly unlikely",
        applies=lambda s: s.effective_kp >= 6 and s.bz > 10 and s.speed < 500,
    ),
    PhysicsRule(
        name="coronal_hole_stream",
        flag=PhysicsFlag.RARE,
        certainty=75,
        notes="Fast, tenuous solar wind - typical of a coronal hole high-speed stream",
        applies=lambda s: s.speed > 800 and s.density < 3,
    ),
    PhysicsRule(
        name="compression_region",
        flag=PhysicsFlag.RARE,
        certainty=75,
        notes="Slow, dense solar wind - typical of a compression region",
        applies=lambda s: s.speed < 400 and s.density > 25,
    ),
    PhysicsRule(
        name="kp_lagging",
        flag=PhysicsFlag.TIMING_DEPENDENT,
        certainty=90,
        notes="Storm onset - strong southward Bz and fast wind while Kp has not yet risen",
        applies=lambda s: s.effective_kp < 4 and s.bz < -10 and s.speed > 600,
        tip_note="NOTE: Kp index lagging - conditions may intensify soon!",
    ),
    PhysicsRule(
        name="kp_persistence",
        flag=PhysicsFlag.TIMING_DEPENDENT,
        certainty=85,
        notes="Storm ending - Kp still high while Bz has turned northward",
        applies=lambda s: s.effective_kp >= 7 and s.bz > 0,
        tip_note="NOTE: Storm weakening - activity declining despite high Kp.",
    ),
)
"""Plausibility rules in priority order."""

_VALID = PhysicsAssessment(
    flag=PhysicsFlag.VALID,
    certainty=100,
    notes="Parameters are physically consistent",
    rule="valid",
)


CERTAINTY_LABELS: Final[tuple[tuple[int, str], ...]] = (
    (95, "Very certain"),
    (85, "Confident"),
    (70, "Fairly confident"),
    (50, "Uncertain"),
    (30, "Low confidence"),
)
"""Minimum certainty for each display label, highest first."""


@deal.raises(InputRangeError)
@deal.post(lambda result: 0 <= result.certainty <= 100, message="Certainty must be 0-100")
def validate_physics(sample: SpaceWeatherSample) -> PhysicsAssessment:
    """
    Check a sample against the plausibility rules.

    Args:
        sample: Space weather sample

    Returns:
        Assessment from the first matching rule, or a valid assessment

    Raises:
        InputRangeError: If any sample field is out of range
    """
    validate_sample(sample)

    for rule in PHYSICS_RULES:
        if rule.applies(sample):
            logger.warning(f"Physics check {rule.flag.value} ({rule.name}): {rule.notes}")
            return PhysicsAssessment(
                flag=rule.flag,
                certainty=rule.certainty,
                notes=rule.notes,
                rule=rule.name,
                tip_note=rule.tip_note,
            )

    return _VALID


@deal.pre(lambda certainty: 0 <= certainty <= 100)
def certainty_label(certainty: int) -> str:
    """Coarse display label for a certainty value. Display only."""
    for threshold, label in CERTAINTY_LABELS:
        if certainty >= threshold:
            return label
    return "Very low confidence"
