"""Breakout scoring engine."""

from .adjustments import adjust, age_multiplier, elite_profile_rules, sample_size_multiplier
from .advisory import build_advisory
from .filtering import filter_cohort
from .outlook import project_outlook, realized_breakout
from .ranking import confidence_tier, quality_tier, rank_players
from .service import CohortValidationError, score_cohort, validate_cohort

__all__ = [
    "CohortValidationError",
    "adjust",
    "age_multiplier",
    "build_advisory",
    "confidence_tier",
    "elite_profile_rules",
    "filter_cohort",
    "project_outlook",
    "quality_tier",
    "rank_players",
    "realized_breakout",
    "sample_size_multiplier",
    "score_cohort",
    "validate_cohort",
]
