"""Configuration helpers for breakout model versions."""

from .rules import (
    CANONICAL_WEIGHTS,
    DEFAULT_MODEL_VERSION,
    AdvisoryRules,
    AgeCurve,
    CohortFilterRules,
    EliteProfileRules,
    SampleSizeCurve,
    ScoringConfig,
    get_config,
    iter_configs,
)

__all__ = [
    "CANONICAL_WEIGHTS",
    "DEFAULT_MODEL_VERSION",
    "AdvisoryRules",
    "AgeCurve",
    "CohortFilterRules",
    "EliteProfileRules",
    "SampleSizeCurve",
    "ScoringConfig",
    "get_config",
    "iter_configs",
]
