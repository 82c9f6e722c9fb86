"""Intensity scoring, physics validation, Newell coupling, and verdict assembly."""

from aurora_verdict.api.verdict.categories import CategoryProfile, category_for_score, category_profile
from aurora_verdict.api.verdict.coupling import NewellCoupling, calculate_newell_coupling
from aurora_verdict.api.verdict.physics import PhysicsAssessment, certainty_label, validate_physics
from aurora_verdict.api.verdict.scoring import IntensityScore, ScoreBreakdown, score_intensity
from aurora_verdict.api.verdict.verdict import (
    IMPOSSIBLE_HEADLINE,
    CityVisibility,
    IntensityVerdict,
    calculate_verdict,
)


__all__ = [
    "IMPOSSIBLE_HEADLINE",
    "CategoryProfile",
    "CityVisibility",
    "IntensityScore",
    "IntensityVerdict",
    "NewellCoupling",
    "PhysicsAssessment",
    "ScoreBreakdown",
    "calculate_newell_coupling",
    "calculate_verdict",
    "category_for_score",
    "category_profile",
    "certainty_label",
    "score_intensity",
    "validate_physics",
]
