"""Resolve which seasons feed a prediction and derive per-player trajectories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pybreakout.models import PlayerRecord


@dataclass(frozen=True)
class SeasonWindow:
    """Seasonal values picked for one prediction year.

    Data from ``year - 1`` predicts ``year``; ``year - 2`` is the trajectory
    baseline.
    """

    data_season: int
    baseline_season: int
    current_woba: Optional[float]
    prior_woba: Optional[float]
    current_xwoba: Optional[float]
    prior_xwoba: Optional[float]
    current_launch_angle: Optional[float]
    prior_launch_angle: Optional[float]


@dataclass(frozen=True)
class PlayerContext:
    """A record plus every value the engine derives from it before scoring."""

    record: PlayerRecord
    window: SeasonWindow
    current_woba: Optional[float]
    career_woba: Optional[float]
    years_in_mlb: Optional[int]
    xwoba_surplus: Optional[float]
    xwoba_trajectory: Optional[float]
    barrel_improvement: Optional[float]
    hard_hit_improvement: Optional[float]
    chase_improvement: Optional[float]
    k_rate_improvement: Optional[float]
    launch_angle_delta: Optional[float]

    @property
    def age(self) -> Optional[int]:
        return self.record.age

    @property
    def pa(self) -> Optional[int]:
        return self.record.pa


def _first(*values: Optional[float]) -> Optional[float]:
    for value in values:
        if value is not None:
            return value
    return None


def _delta(current: Optional[float], prior: Optional[float]) -> Optional[float]:
    if current is None or prior is None:
        return None
    return current - prior


def resolve_season_window(record: PlayerRecord, year: int) -> SeasonWindow:
    data_season = year - 1
    baseline_season = year - 2
    return SeasonWindow(
        data_season=data_season,
        baseline_season=baseline_season,
        current_woba=record.season_woba(data_season),
        prior_woba=record.season_woba(baseline_season),
        current_xwoba=_first(record.season_xwoba(data_season), record.xwoba),
        prior_xwoba=record.season_xwoba(baseline_season),
        current_launch_angle=_first(record.launch_angle_by_season.get(data_season), record.launch_angle),
        prior_launch_angle=record.launch_angle_by_season.get(baseline_season),
    )


def representative_woba(record: PlayerRecord, year: int) -> Optional[float]:
    """wOBA used to decide whether a hitter has already broken out."""

    return _first(
        record.current_woba,
        record.season_woba(year - 1),
        record.season_woba(year - 2),
    )


def estimate_years_in_mlb(record: PlayerRecord, window: SeasonWindow) -> Optional[int]:
    """Guess service time from age and whether a baseline season exists."""

    if record.years_in_mlb is not None:
        return record.years_in_mlb
    age = record.age
    if age is None:
        return None
    if window.prior_woba is None and age <= 23:
        return 1
    if window.prior_woba is not None and age <= 24:
        return 2
    if age <= 26:
        return 3
    if age <= 28:
        return 4
    return 6


def derive_context(record: PlayerRecord, year: int) -> PlayerContext:
    """Build the derived view of ``record``; values supplied on the record win."""

    window = resolve_season_window(record, year)
    current_woba = _first(record.current_woba, window.current_woba)
    return PlayerContext(
        record=record,
        window=window,
        current_woba=current_woba,
        career_woba=_first(record.career_woba, current_woba),
        years_in_mlb=estimate_years_in_mlb(record, window),
        xwoba_surplus=_first(record.xwoba_surplus, _delta(window.current_xwoba, current_woba)),
        xwoba_trajectory=_first(record.xwoba_trajectory, _delta(window.current_xwoba, window.prior_xwoba)),
        barrel_improvement=_first(
            record.barrel_improvement, _delta(record.barrel_rate, record.prior_barrel_rate)
        ),
        hard_hit_improvement=_first(
            record.hard_hit_improvement, _delta(record.hard_hit_rate, record.prior_hard_hit_rate)
        ),
        chase_improvement=_first(
            record.chase_improvement, _delta(record.prior_chase_rate, record.chase_rate)
        ),
        k_rate_improvement=_first(record.k_rate_improvement, _delta(record.prior_k_rate, record.k_rate)),
        launch_angle_delta=_first(
            record.launch_angle_delta,
            _delta(window.current_launch_angle, window.prior_launch_angle),
        ),
    )
