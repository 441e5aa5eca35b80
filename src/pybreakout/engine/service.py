"""Run a cohort through the full breakout scoring pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from pydantic import ValidationError

from pybreakout.config import ScoringConfig, get_config
from pybreakout.models import FEATURE_NAMES, PlayerRecord, RankedPlayer

from .adjustments import adjust, elite_profile_rules
from .advisory import build_advisory
from .aggregate import weighted_composite
from .features import extract_features
from .filtering import filter_cohort
from .normalize import normalize_cohort
from .outlook import project_outlook
from .ranking import ScoredPlayer, rank_players
from .seasons import derive_context


logger = logging.getLogger(__name__)


class CohortValidationError(ValueError):
    """Raised when a cohort is not a sequence of usable player records."""


def validate_cohort(cohort: Any) -> List[PlayerRecord]:
    """Coerce ``cohort`` into player records, failing before any scoring runs."""

    if isinstance(cohort, (str, bytes)) or not isinstance(cohort, Sequence):
        raise CohortValidationError(
            f"Cohort must be a sequence of player records, got {type(cohort).__name__}"
        )
    records: List[PlayerRecord] = []
    for index, item in enumerate(cohort):
        if isinstance(item, PlayerRecord):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            raise CohortValidationError(
                f"Cohort entry {index} must be a mapping or PlayerRecord, got {type(item).__name__}"
            )
        try:
            records.append(PlayerRecord.model_validate(dict(item)))
        except ValidationError as exc:
            raise CohortValidationError(f"Cohort entry {index} is not a valid player record: {exc}") from exc
    return records


def score_cohort(
    cohort: Sequence[Any],
    *,
    year: int,
    config: Optional[ScoringConfig] = None,
) -> List[RankedPlayer]:
    """Score and rank every eligible hitter in ``cohort`` for prediction ``year``.

    Data from ``year - 1`` is scored against the ``year - 2`` baseline. The
    input is never mutated; an empty cohort (before or after filtering)
    produces an empty result.
    """

    config = config or get_config()
    records = validate_cohort(cohort)
    eligible = filter_cohort(records, year=year, config=config)
    if not eligible:
        logger.info("No eligible hitters for %d (model %s, %d records)", year, config.version, len(records))
        return []

    contexts = [derive_context(record, year) for record in eligible]
    vectors = [extract_features(context) for context in contexts]
    normalized = normalize_cohort(vectors, FEATURE_NAMES, neutral=config.neutral_score)
    rules = elite_profile_rules(config.elite)

    scored: List[ScoredPlayer] = []
    for context, vector, scores in zip(contexts, vectors, normalized):
        raw = weighted_composite(scores, config.weights, neutral=config.neutral_score)
        score, factors = adjust(raw, context, config, rules=rules)
        scored.append(
            ScoredPlayer(
                record=context.record,
                features=vector,
                normalized=scores,
                adjustments=factors,
                breakout_score=score,
                advisory=build_advisory(context, year=year, rules=config.advisory),
                outlook=project_outlook(context, score, year=year),
            )
        )

    ranked = rank_players(scored, config)
    leader = ranked[0]
    logger.info(
        "Scored %d of %d hitters for %d with model %s; top %s (%d)",
        len(ranked),
        len(records),
        year,
        config.version,
        leader.name,
        leader.breakout_score,
    )
    return ranked
