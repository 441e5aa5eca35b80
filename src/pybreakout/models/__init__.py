"""Pydantic models shared by ingestion, the engine and the API."""

from .player import PlayerRecord, coerce_number
from .scoring import (
    FEATURE_NAMES,
    AdjustmentFactors,
    AdvisoryFlag,
    AdvisoryReport,
    FeatureVector,
    Outlook,
    RankedPlayer,
)

__all__ = [
    "FEATURE_NAMES",
    "AdjustmentFactors",
    "AdvisoryFlag",
    "AdvisoryReport",
    "FeatureVector",
    "Outlook",
    "PlayerRecord",
    "RankedPlayer",
    "coerce_number",
]
