"""Multiplicative adjustments applied to the raw composite score."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from typing import Callable, List, Optional, Sequence, Tuple

from pybreakout.config import AgeCurve, EliteProfileRules, SampleSizeCurve, ScoringConfig
from pybreakout.models import AdjustmentFactors

from .seasons import PlayerContext


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def age_multiplier(age: Optional[int], curve: AgeCurve) -> float:
    if age is None:
        return curve.unknown
    for max_age, multiplier in curve.steps:
        if age <= max_age:
            return multiplier
    return curve.beyond


def sample_size_multiplier(pa: Optional[int], curve: SampleSizeCurve) -> float:
    if pa is None:
        return curve.unknown
    for min_pa, multiplier in curve.steps:
        if pa >= min_pa:
            return multiplier
    return curve.floor


def _above(value: Optional[float], threshold: float) -> bool:
    return value is not None and value > threshold


@dataclass(frozen=True)
class ProfileSignals:
    """Boolean view of a player's skill profile that the elite rules key off."""

    age: Optional[int]
    hard_hit: bool
    barrel: bool
    bat_speed: bool
    low_k_rate: bool
    barrel_gain: bool
    hard_hit_gain: bool
    chase_gain: bool
    k_rate_stable: bool
    k_rate_exploded: bool
    elite_contact: bool

    @property
    def complete_profile(self) -> bool:
        return self.hard_hit and self.barrel and self.bat_speed and self.low_k_rate

    @property
    def sustainable_improvements(self) -> int:
        return sum(
            (
                self.barrel_gain and self.k_rate_stable,
                self.hard_hit_gain and self.k_rate_stable,
                self.chase_gain,
            )
        )


def profile_signals(context: PlayerContext, rules: EliteProfileRules) -> ProfileSignals:
    record = context.record
    k_change = context.k_rate_improvement
    return ProfileSignals(
        age=record.age,
        hard_hit=_above(record.hard_hit_rate, rules.hard_hit_threshold),
        barrel=_above(record.barrel_rate, rules.barrel_threshold),
        bat_speed=_above(record.bat_speed, rules.bat_speed_threshold),
        low_k_rate=record.k_rate is not None and record.k_rate < rules.k_rate_threshold,
        barrel_gain=_above(context.barrel_improvement, rules.barrel_gain_threshold),
        hard_hit_gain=_above(context.hard_hit_improvement, rules.hard_hit_gain_threshold),
        chase_gain=_above(context.chase_improvement, rules.chase_gain_threshold),
        k_rate_stable=k_change is None or k_change >= rules.k_rate_stable_floor,
        k_rate_exploded=k_change is not None and k_change < rules.k_rate_explosion_threshold,
        elite_contact=(
            _above(record.hard_hit_rate, rules.elite_young_hard_hit)
            and _above(record.barrel_rate, rules.elite_young_barrel)
        ),
    )


@dataclass(frozen=True)
class AdjustmentRule:
    name: str
    predicate: Callable[[ProfileSignals], bool]
    multiplier: float

    def applies(self, signals: ProfileSignals) -> bool:
        return bool(self.predicate(signals))


def _young_talent_rule(name: str, low: Optional[int], high: int, multiplier: float) -> AdjustmentRule:
    def predicate(signals: ProfileSignals) -> bool:
        if not signals.elite_contact or signals.age is None:
            return False
        return signals.age <= high and (low is None or signals.age > low)

    return AdjustmentRule(name, predicate, multiplier)


def elite_profile_rules(rules: EliteProfileRules) -> Tuple[AdjustmentRule, ...]:
    """Ordered elite-profile rule set; the product of every matching multiplier is applied."""

    ordered: List[AdjustmentRule] = [
        AdjustmentRule("hard_hit", lambda s: s.hard_hit, rules.hard_hit_bonus),
        AdjustmentRule("barrel", lambda s: s.barrel, rules.barrel_bonus),
        AdjustmentRule("bat_speed", lambda s: s.bat_speed, rules.bat_speed_bonus),
        AdjustmentRule("low_k_rate", lambda s: s.low_k_rate, rules.k_rate_bonus),
        AdjustmentRule(
            "sustained_barrel_gain", lambda s: s.barrel_gain and s.k_rate_stable, rules.barrel_gain_bonus
        ),
        AdjustmentRule(
            "sustained_hard_hit_gain",
            lambda s: s.hard_hit_gain and s.k_rate_stable,
            rules.hard_hit_gain_bonus,
        ),
        AdjustmentRule("chase_gain", lambda s: s.chase_gain, rules.chase_gain_bonus),
        AdjustmentRule("k_rate_explosion", lambda s: s.k_rate_exploded, rules.k_rate_explosion_penalty),
        AdjustmentRule("complete_profile", lambda s: s.complete_profile, rules.complete_profile_bonus),
        AdjustmentRule(
            "multiple_improvements",
            lambda s: s.sustainable_improvements >= rules.multi_improvement_count,
            rules.multi_improvement_bonus,
        ),
    ]
    previous: Optional[int] = None
    for max_age, multiplier in rules.elite_young_scale:
        ordered.append(_young_talent_rule(f"elite_young_talent_{max_age}", previous, max_age, multiplier))
        previous = max_age
    return tuple(ordered)


def elite_profile_multiplier(
    signals: ProfileSignals,
    rules: Sequence[AdjustmentRule],
) -> Tuple[float, List[str]]:
    matched = [rule for rule in rules if rule.applies(signals)]
    multiplier = reduce(lambda total, rule: total * rule.multiplier, matched, 1.0)
    return multiplier, [rule.name for rule in matched]


def adjust(
    raw_composite: float,
    context: PlayerContext,
    config: ScoringConfig,
    *,
    rules: Optional[Sequence[AdjustmentRule]] = None,
) -> Tuple[int, AdjustmentFactors]:
    """Return the final integer breakout score and the factors that produced it."""

    if rules is None:
        rules = elite_profile_rules(config.elite)
    age = age_multiplier(context.age, config.age_curve)
    sample = sample_size_multiplier(context.pa, config.sample_curve)
    elite, applied = elite_profile_multiplier(profile_signals(context, config.elite), rules)
    score = round_half_up(raw_composite * age * sample * elite)
    factors = AdjustmentFactors(
        age=age,
        sample_size=sample,
        elite_profile=elite,
        raw_score=round_half_up(raw_composite),
        raw_composite=raw_composite,
        applied_rules=applied,
    )
    return score, factors
