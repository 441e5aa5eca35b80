"""Weighted sum of normalized feature scores."""

from __future__ import annotations

import math
from typing import Mapping


def weighted_composite(
    scores: Mapping[str, float],
    weights: Mapping[str, float],
    *,
    neutral: float = 50.0,
) -> float:
    """Raw composite on roughly 0-100; features missing from ``scores`` count as ``neutral``."""

    return math.fsum(scores.get(name, neutral) * weight for name, weight in weights.items())
