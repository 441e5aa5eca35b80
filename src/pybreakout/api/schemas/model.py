from __future__ import annotations

from pydantic import BaseModel


class ModelResponse(BaseModel):
    version: str
    default: bool
    weights: dict[str, float]
    neutral_score: float
    quality_tiers: dict[str, int]
    confidence_tiers: dict[str, int]


class ModelListResponse(BaseModel):
    default: str
    models: list[ModelResponse]
