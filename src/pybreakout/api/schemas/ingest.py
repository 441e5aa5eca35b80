from __future__ import annotations

from pydantic import BaseModel, Field


class MergeReportResponse(BaseModel):
    total_rows: int
    kept_players: int
    skipped_small_sample: list[str] = Field(default_factory=list)
    skipped_missing_expected: list[str] = Field(default_factory=list)
    invalid_rows: list[str] = Field(default_factory=list)
    missing_statcast: list[str] = Field(default_factory=list)
    missing_prior_season: list[str] = Field(default_factory=list)
