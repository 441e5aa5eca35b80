"""Helpers for slicing ranked breakout lists for display."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from statistics import fmean, median, pstdev
from typing import Iterable, Sequence

from pybreakout.models import RankedPlayer


@dataclass(frozen=True)
class FilterCriteria:
    """Display filters applied after scoring; none of them change a score."""

    position: str | None = None
    team: str | None = None
    min_age: int | None = None
    max_age: int | None = None
    min_score: int | None = None
    tiers: tuple[str, ...] = ()
    limit: int | None = None


@dataclass(frozen=True)
class FilteredPlayer:
    player: RankedPlayer
    rank: int


@dataclass(frozen=True)
class FilterSummary:
    available_players: int
    selected_players: int
    score_mean: float | None
    score_median: float | None
    score_std: float | None
    tier_counts: dict[str, int]


@dataclass(frozen=True)
class FilterResult:
    players: list[FilteredPlayer]
    summary: FilterSummary


def _passes_criteria(ranked: RankedPlayer, criteria: FilterCriteria) -> bool:
    record = ranked.player
    if criteria.position and criteria.position.upper() not in record.position.upper():
        return False
    if criteria.team and record.team.upper() != criteria.team.upper():
        return False
    # Unknown ages pass the age window.
    if record.age is not None:
        if criteria.min_age is not None and record.age < criteria.min_age:
            return False
        if criteria.max_age is not None and record.age > criteria.max_age:
            return False
    if criteria.min_score is not None and ranked.breakout_score < criteria.min_score:
        return False
    if criteria.tiers and ranked.tier not in criteria.tiers:
        return False
    return True


def _build_summary(available: int, selected: Sequence[RankedPlayer]) -> FilterSummary:
    def _safe_stats(values: Iterable[float]) -> tuple[float | None, float | None, float | None]:
        values = list(values)
        if not values:
            return None, None, None
        return fmean(values), median(values), pstdev(values) if len(values) > 1 else 0.0

    mean, med, std = _safe_stats(float(player.breakout_score) for player in selected)
    return FilterSummary(
        available_players=available,
        selected_players=len(selected),
        score_mean=mean,
        score_median=med,
        score_std=std,
        tier_counts=dict(Counter(player.tier for player in selected)),
    )


def filter_ranked(players: Sequence[RankedPlayer], criteria: FilterCriteria) -> FilterResult:
    """Filter an already-ranked list, keeping its order, then apply the limit."""

    matching = [player for player in players if _passes_criteria(player, criteria)]
    if criteria.limit is not None and criteria.limit > 0:
        matching = matching[: criteria.limit]
    return FilterResult(
        players=[FilteredPlayer(player=player, rank=index) for index, player in enumerate(matching, start=1)],
        summary=_build_summary(len(players), matching),
    )


__all__ = [
    "FilterCriteria",
    "FilterResult",
    "FilterSummary",
    "FilteredPlayer",
    "filter_ranked",
]
