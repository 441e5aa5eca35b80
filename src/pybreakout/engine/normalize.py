"""Cohort-relative min/max normalization onto a 0-100 scale."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from pybreakout.models import FeatureVector


def normalize_feature(
    values: Sequence[Optional[float]],
    *,
    neutral: float = 50.0,
) -> Optional[List[float]]:
    """Rescale one feature across the cohort.

    Returns ``None`` when no player has a value, otherwise one score per input
    where the cohort minimum maps to 0, the maximum to 100 and unknown values
    to ``neutral``. A zero-width range is treated as a range of 1.
    """

    known = [value for value in values if value is not None]
    if not known:
        return None
    low = min(known)
    span = (max(known) - low) or 1
    return [neutral if value is None else ((value - low) / span) * 100 for value in values]


def normalize_cohort(
    vectors: Sequence[FeatureVector],
    feature_names: Sequence[str],
    *,
    neutral: float = 50.0,
) -> List[Dict[str, float]]:
    """Normalize every named feature independently; unset features are omitted."""

    mappings = [vector.as_mapping() for vector in vectors]
    scores: List[Dict[str, float]] = [{} for _ in vectors]
    for name in feature_names:
        column = normalize_feature([mapping.get(name) for mapping in mappings], neutral=neutral)
        if column is None:
            continue
        for player_scores, value in zip(scores, column):
            player_scores[name] = value
    return scores
