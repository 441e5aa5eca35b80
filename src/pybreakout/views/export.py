"""CSV export helpers for ranked breakout lists."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Optional, Sequence

from pybreakout.models import RankedPlayer


EXPORT_HEADERS: tuple[str, ...] = (
    "rank",
    "name",
    "team",
    "position",
    "age",
    "pa",
    "breakout_score",
    "raw_score",
    "tier",
    "confidence",
    "age_multiplier",
    "sample_multiplier",
    "elite_multiplier",
    "projected_woba",
    "likelihood",
    "risks",
    "positives",
)


def _fmt(value: Optional[float], digits: int = 3) -> str:
    return "" if value is None else f"{value:.{digits}f}"


def export_ranked_to_csv(players: Sequence[RankedPlayer]) -> str:
    """Serialize ranked players, one row each, in rank order."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)
    for ranked in players:
        record = ranked.player
        writer.writerow(
            [
                ranked.rank,
                record.name,
                record.team,
                record.position,
                "" if record.age is None else record.age,
                "" if record.pa is None else record.pa,
                ranked.breakout_score,
                ranked.adjustments.raw_score,
                ranked.tier,
                ranked.confidence,
                _fmt(ranked.adjustments.age, 2),
                _fmt(ranked.adjustments.sample_size, 2),
                _fmt(ranked.adjustments.elite_profile, 4),
                _fmt(ranked.outlook.projected_woba),
                ranked.outlook.likelihood,
                ";".join(flag.code for flag in ranked.advisory.risks),
                ";".join(flag.code for flag in ranked.advisory.positives),
            ]
        )
    return buffer.getvalue()


__all__ = ["EXPORT_HEADERS", "export_ranked_to_csv"]
