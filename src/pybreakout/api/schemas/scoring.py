from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from .ingest import MergeReportResponse


class ScoreFilterRequest(BaseModel):
    position: str | None = None
    team: str | None = None
    min_age: int | None = Field(default=None, ge=0)
    max_age: int | None = Field(default=None, ge=0)
    min_score: int | None = None
    tiers: List[str] | None = None
    limit: int | None = Field(default=None, ge=1, le=500)


class ScoreRequest(BaseModel):
    year: int | None = Field(default=None, ge=2000, le=2100)
    model: str | None = None
    players: List[Any]
    filters: ScoreFilterRequest | None = None


class AdvisoryFlagResponse(BaseModel):
    code: str
    severity: str
    message: str


class PlayerScoreResponse(BaseModel):
    rank: int
    name: str
    team: str
    position: str
    age: int | None
    pa: int | None
    breakout_score: int
    raw_score: int
    tier: str
    confidence: str
    age_multiplier: float
    sample_multiplier: float
    elite_multiplier: float
    applied_rules: List[str]
    normalized: dict[str, float]
    risks: List[AdvisoryFlagResponse]
    positives: List[AdvisoryFlagResponse]
    advisory_multipliers: dict[str, float]
    projected_woba: float | None
    projected_wrc_plus: int | None
    projected_home_runs: int | None
    breakout_types: List[str]
    likelihood: str
    likelihood_pct: int
    realized_breakout: str | None = None
    actual_result: str | None = None


class ScoreSummaryResponse(BaseModel):
    available_players: int
    selected_players: int
    score_mean: float | None
    score_median: float | None
    score_std: float | None
    tier_counts: dict[str, int]


class ScoreResponse(BaseModel):
    year: int
    model: str
    cohort_size: int
    summary: ScoreSummaryResponse
    players: List[PlayerScoreResponse]
    report: MergeReportResponse | None = None
