"""Cohort filter: keep hitters who have not already broken out."""

from __future__ import annotations

import logging
from typing import List, Sequence

from pybreakout.config import CohortFilterRules, ScoringConfig
from pybreakout.models import PlayerRecord

from .seasons import representative_woba


logger = logging.getLogger(__name__)


def is_pitcher(record: PlayerRecord, rules: CohortFilterRules) -> bool:
    position = (record.position or "").strip().upper()
    if position in rules.pitcher_positions:
        return True
    return any(token in position for token in rules.pitcher_tokens)


def is_established_star(record: PlayerRecord, *, year: int, rules: CohortFilterRules) -> bool:
    """High-wOBA hitters are excluded unless they are young with a limited sample."""

    woba = representative_woba(record, year)
    if woba is None or woba <= rules.star_woba:
        return False
    age, pa = record.age, record.pa
    if age is not None and age < rules.young_age and pa is not None and pa < rules.limited_pa:
        return False
    return True


def filter_cohort(
    records: Sequence[PlayerRecord],
    *,
    year: int,
    config: ScoringConfig,
) -> List[PlayerRecord]:
    rules = config.cohort
    hitters = [record for record in records if not is_pitcher(record, rules)]
    kept = [record for record in hitters if not is_established_star(record, year=year, rules=rules)]
    logger.debug(
        "Cohort filter kept %d of %d records (%d pitchers, %d established)",
        len(kept),
        len(records),
        len(records) - len(hitters),
        len(hitters) - len(kept),
    )
    return kept
