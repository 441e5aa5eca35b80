"""Ordering and display tiers for scored hitters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from pybreakout.config import ScoringConfig
from pybreakout.models import AdjustmentFactors, AdvisoryReport, FeatureVector, Outlook, PlayerRecord, RankedPlayer


@dataclass(frozen=True)
class ScoredPlayer:
    """Engine output for one hitter before it has a rank."""

    record: PlayerRecord
    features: FeatureVector
    normalized: Dict[str, float]
    adjustments: AdjustmentFactors
    breakout_score: int
    advisory: AdvisoryReport
    outlook: Outlook


def quality_tier(score: int, config: ScoringConfig) -> str:
    for minimum, label in config.quality_tiers:
        if score >= minimum:
            return label
    return config.quality_floor


def confidence_tier(pa: Optional[int], config: ScoringConfig) -> str:
    if pa is None:
        return config.confidence_unknown
    for minimum, label in config.confidence_tiers:
        if pa >= minimum:
            return label
    return config.confidence_floor


def rank_players(scored: Sequence[ScoredPlayer], config: ScoringConfig) -> List[RankedPlayer]:
    """Sort descending by score; equal scores keep their input order."""

    ordered = sorted(scored, key=lambda entry: entry.breakout_score, reverse=True)
    return [
        RankedPlayer(
            rank=position,
            player=entry.record,
            features=entry.features,
            normalized=entry.normalized,
            adjustments=entry.adjustments,
            breakout_score=entry.breakout_score,
            tier=quality_tier(entry.breakout_score, config),
            confidence=confidence_tier(entry.record.pa, config),
            advisory=entry.advisory,
            outlook=entry.outlook,
        )
        for position, entry in enumerate(ordered, start=1)
    ]
