"""Scoring configuration for supported breakout model versions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pybreakout.models import FEATURE_NAMES


CANONICAL_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "hardHitRate": 0.14,
        "barrelRate": 0.14,
        "batSpeed": 0.09,
        "barrelImprovement": 0.15,
        "hardHitImprovement": 0.10,
        "chaseImprovement": 0.08,
        "kRateInverse": 0.10,
        "chaseRateInverse": 0.10,
        "xwobaSurplus": 0.07,
        "xwobaLevel": 0.03,
    }
)

WEIGHT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class CohortFilterRules:
    pitcher_tokens: Tuple[str, ...] = ("SP", "RP")
    pitcher_positions: Tuple[str, ...] = ("P",)
    star_woba: float = 0.350
    young_age: int = 24
    limited_pa: int = 400


@dataclass(frozen=True)
class AgeCurve:
    """Upper-bounded age steps: the first ``(max_age, multiplier)`` that fits wins."""

    steps: Tuple[Tuple[int, float], ...] = ((23, 1.15), (26, 1.25), (28, 1.00), (30, 0.85))
    beyond: float = 0.70
    unknown: float = 1.0


@dataclass(frozen=True)
class SampleSizeCurve:
    """Lower-bounded plate appearance steps, checked from the largest bound down."""

    steps: Tuple[Tuple[int, float], ...] = ((500, 1.00), (300, 0.95), (200, 0.85), (150, 0.75))
    floor: float = 0.60
    unknown: float = 0.60


@dataclass(frozen=True)
class EliteProfileRules:
    hard_hit_threshold: float = 0.45
    hard_hit_bonus: float = 1.10
    barrel_threshold: float = 0.10
    barrel_bonus: float = 1.10
    bat_speed_threshold: float = 73.0
    bat_speed_bonus: float = 1.08
    k_rate_threshold: float = 0.20
    k_rate_bonus: float = 1.08

    barrel_gain_threshold: float = 0.02
    barrel_gain_bonus: float = 1.15
    hard_hit_gain_threshold: float = 0.03
    hard_hit_gain_bonus: float = 1.12
    chase_gain_threshold: float = 0.02
    chase_gain_bonus: float = 1.10

    # k_rate_improvement is prior minus current, so negative means more strikeouts.
    k_rate_stable_floor: float = -0.03
    k_rate_explosion_threshold: float = -0.05
    k_rate_explosion_penalty: float = 0.75

    complete_profile_bonus: float = 1.15
    multi_improvement_count: int = 2
    multi_improvement_bonus: float = 1.20

    elite_young_hard_hit: float = 0.55
    elite_young_barrel: float = 0.13
    elite_young_scale: Tuple[Tuple[int, float], ...] = ((21, 1.40), (22, 1.30), (23, 1.20), (24, 1.10))


@dataclass(frozen=True)
class AdvisoryRules:
    k_rate_severe: float = 0.30
    k_rate_moderate: float = 0.25
    k_rate_severe_penalty: float = 0.85
    k_rate_moderate_penalty: float = 0.95

    chase_very_high: float = 0.33
    chase_high: float = 0.30
    chase_elevated: float = 0.27
    surplus_reliability_threshold: float = 0.035
    surplus_high_chase_discount: float = 0.70
    surplus_elevated_chase_discount: float = 0.85

    career_year_margin: float = 0.025
    career_year_multiplier: float = 0.75
    down_year_margin: float = -0.020
    down_year_multiplier: float = 1.10

    sophomore_min_years: int = 1
    sophomore_max_years: int = 3
    sophomore_margin: float = 0.030
    sophomore_multiplier: float = 0.65

    service_unknown_multiplier: float = 0.85
    service_multipliers: Tuple[Tuple[int, float], ...] = ((1, 0.80), (2, 0.90), (3, 0.95))
    service_veteran_years: int = 6
    service_veteran_multiplier: float = 0.95
    service_veteran_flag_years: int = 7

    bat_speed_elite: float = 74.0
    bat_speed_plus: float = 73.0
    bat_speed_woba_ceiling: float = 0.330
    bat_speed_multiplier: float = 1.10

    launch_angle_delta: float = 3.0
    launch_angle_max_age: int = 27
    launch_angle_multiplier: float = 1.12

    pull_rate_threshold: float = 0.48
    shift_ban_year: int = 2023
    pull_rate_multiplier: float = 1.08

    small_sample_pa: int = 200
    moderate_sample_pa: int = 300
    veteran_age: int = 29
    old_age: int = 32
    extreme_surplus: float = 0.070
    extreme_surplus_pa: int = 250


@dataclass(frozen=True)
class ScoringConfig:
    """Everything the engine needs besides the cohort itself.

    Instances are immutable and passed explicitly into every pipeline call, so
    several model versions can be scored side by side.
    """

    version: str
    weights: Mapping[str, float] = field(default_factory=lambda: dict(CANONICAL_WEIGHTS))
    neutral_score: float = 50.0
    cohort: CohortFilterRules = field(default_factory=CohortFilterRules)
    age_curve: AgeCurve = field(default_factory=AgeCurve)
    sample_curve: SampleSizeCurve = field(default_factory=SampleSizeCurve)
    elite: EliteProfileRules = field(default_factory=EliteProfileRules)
    advisory: AdvisoryRules = field(default_factory=AdvisoryRules)
    quality_tiers: Tuple[Tuple[int, str], ...] = ((80, "ELITE"), (68, "HIGH"), (55, "MED"))
    quality_floor: str = "LOW"
    confidence_tiers: Tuple[Tuple[int, str], ...] = ((400, "HIGH"), (200, "MED"))
    confidence_floor: str = "LOW"
    confidence_unknown: str = "SPEC"

    def __post_init__(self) -> None:
        unknown = sorted(set(self.weights) - set(FEATURE_NAMES))
        if unknown:
            raise ValueError(f"Unknown feature weights for {self.version!r}: {', '.join(unknown)}")
        total = math.fsum(self.weights.values())
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(f"Feature weights for {self.version!r} sum to {total:.6f}, expected 1.0")
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    @property
    def weight_total(self) -> float:
        return math.fsum(self.weights.values())


DEFAULT_MODEL_VERSION = "v5.4"

_SCORING_CONFIGS: Dict[str, ScoringConfig] = {
    "v5.4": ScoringConfig(version="v5.4"),
}


def iter_configs() -> Iterable[ScoringConfig]:
    """Return an iterator of all registered model configurations."""

    return _SCORING_CONFIGS.values()


def get_config(version: Optional[str] = None) -> ScoringConfig:
    """Fetch a model configuration by version, raising KeyError if missing."""

    key = (version or DEFAULT_MODEL_VERSION).strip().lower()
    if key not in _SCORING_CONFIGS:
        raise KeyError(f"No scoring model configured for version={version!r}")
    return _SCORING_CONFIGS[key]
