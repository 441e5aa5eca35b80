"""Output models produced by the scoring engine."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from .player import PlayerRecord


_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

Severity = Literal["high", "medium", "positive"]


class FeatureVector(BaseModel):
    """Named features the composite score is built from; each may be unknown."""

    hard_hit_rate: Optional[float] = None
    barrel_rate: Optional[float] = None
    bat_speed: Optional[float] = None
    barrel_improvement: Optional[float] = None
    hard_hit_improvement: Optional[float] = None
    chase_improvement: Optional[float] = None
    k_rate_inverse: Optional[float] = None
    chase_rate_inverse: Optional[float] = None
    xwoba_surplus: Optional[float] = None
    xwoba_level: Optional[float] = None

    model_config = _MODEL_CONFIG

    def as_mapping(self) -> Dict[str, Optional[float]]:
        """Feature values keyed by the names used in the weight table."""

        return self.model_dump(by_alias=True)


FEATURE_NAMES: tuple[str, ...] = tuple(to_camel(name) for name in FeatureVector.model_fields)


class AdjustmentFactors(BaseModel):
    age: float = 1.0
    sample_size: float = 1.0
    elite_profile: float = 1.0
    raw_score: int = 0
    raw_composite: float = 0.0
    applied_rules: List[str] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class AdvisoryFlag(BaseModel):
    code: str
    severity: Severity
    message: str

    model_config = _MODEL_CONFIG


class AdvisoryReport(BaseModel):
    """Presentation-facing annotations; none of these feed the breakout score."""

    risks: List[AdvisoryFlag] = Field(default_factory=list)
    positives: List[AdvisoryFlag] = Field(default_factory=list)
    k_rate_penalty: float = 1.0
    surplus_reliability: float = 1.0
    career_context: float = 1.0
    sophomore_slump: float = 1.0
    years_of_service: float = 1.0
    bat_speed_upside: float = 1.0
    launch_angle_change: float = 1.0
    pull_rate_boost: float = 1.0

    model_config = _MODEL_CONFIG

    @property
    def codes(self) -> List[str]:
        return [flag.code for flag in (*self.risks, *self.positives)]


class Outlook(BaseModel):
    projected_woba_gain: float = 0.0
    projected_woba: Optional[float] = None
    projected_wrc_plus: Optional[int] = None
    projected_home_runs: Optional[int] = None
    breakout_types: List[str] = Field(default_factory=list)
    likelihood: str = "Low"
    likelihood_pct: int = 35
    realized_breakout: Optional[Literal["major", "minor"]] = None

    model_config = _MODEL_CONFIG


class RankedPlayer(BaseModel):
    """A scored hitter with everything needed to explain the score."""

    rank: int = Field(..., ge=1)
    player: PlayerRecord
    features: FeatureVector
    normalized: Dict[str, float]
    adjustments: AdjustmentFactors
    breakout_score: int
    tier: str
    confidence: str
    advisory: AdvisoryReport = Field(default_factory=AdvisoryReport)
    outlook: Outlook = Field(default_factory=Outlook)

    model_config = _MODEL_CONFIG

    @property
    def name(self) -> str:
        return self.player.name
