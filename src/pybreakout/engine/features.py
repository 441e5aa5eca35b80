"""Map derived player context onto the scored feature vector."""

from __future__ import annotations

from typing import Optional

from pybreakout.models import FeatureVector

from .seasons import PlayerContext


def _inverse(rate: Optional[float]) -> Optional[float]:
    return 1 - rate if rate is not None else None


def extract_features(context: PlayerContext) -> FeatureVector:
    record = context.record
    return FeatureVector(
        hard_hit_rate=record.hard_hit_rate,
        barrel_rate=record.barrel_rate,
        bat_speed=record.bat_speed,
        barrel_improvement=context.barrel_improvement,
        hard_hit_improvement=context.hard_hit_improvement,
        chase_improvement=context.chase_improvement,
        k_rate_inverse=_inverse(record.k_rate),
        chase_rate_inverse=_inverse(record.chase_rate),
        xwoba_surplus=context.xwoba_surplus,
        xwoba_level=context.window.current_xwoba,
    )
