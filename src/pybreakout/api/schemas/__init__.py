"""Pydantic models for API I/O."""

from .ingest import MergeReportResponse
from .model import ModelListResponse, ModelResponse
from .scoring import (
    AdvisoryFlagResponse,
    PlayerScoreResponse,
    ScoreFilterRequest,
    ScoreRequest,
    ScoreResponse,
    ScoreSummaryResponse,
)

__all__ = [
    "AdvisoryFlagResponse",
    "MergeReportResponse",
    "ModelListResponse",
    "ModelResponse",
    "PlayerScoreResponse",
    "ScoreFilterRequest",
    "ScoreRequest",
    "ScoreResponse",
    "ScoreSummaryResponse",
]
