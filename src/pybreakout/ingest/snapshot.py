"""Load the JSON player snapshots written by the data refresh job."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from pybreakout.models import PlayerRecord, coerce_number

from .savant import age_on


logger = logging.getLogger(__name__)

# The export stores these as differences of Savant percents (3.1 == +3.1 points).
_POINT_DELTA_KEYS = (
    "barrelImprovement",
    "hardHitImprovement",
    "kRateImprovement",
    "chaseImprovement",
    "barrel_improvement",
    "hard_hit_improvement",
    "k_rate_improvement",
    "chase_improvement",
)


@dataclass(frozen=True)
class Snapshot:
    year: int
    players: List[PlayerRecord]
    last_updated: Optional[str] = None


def with_ages(players: Sequence[PlayerRecord], *, reference_date: Optional[date] = None) -> List[PlayerRecord]:
    """Fill ``age`` from ``birth_date`` where only the latter is known."""

    reference_date = reference_date or date.today()
    return [
        player.model_copy(update={"age": age_on(player.birth_date, reference_date)})
        if player.age is None and player.birth_date is not None
        else player
        for player in players
    ]


def _point_deltas_to_fractions(item: Any) -> Any:
    if not isinstance(item, Mapping):
        return item
    converted = dict(item)
    for key in _POINT_DELTA_KEYS:
        if key in converted:
            number = coerce_number(converted[key])
            converted[key] = number / 100 if number is not None else None
    return converted


def parse_snapshot(payload: Mapping[str, Any], *, reference_date: Optional[date] = None) -> Snapshot:
    if not payload.get("success") or not isinstance(payload.get("players"), list):
        raise ValueError("Snapshot payload is not a successful player export")
    try:
        year = int(payload["year"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Snapshot payload has no valid year") from exc
    players = [PlayerRecord.model_validate(_point_deltas_to_fractions(item)) for item in payload["players"]]
    logger.debug("Parsed %d players from %d snapshot", len(players), year)
    return Snapshot(
        year=year,
        players=with_ages(players, reference_date=reference_date),
        last_updated=payload.get("lastUpdated"),
    )


def load_snapshot(path: Path, *, reference_date: Optional[date] = None) -> Snapshot:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path} does not contain a snapshot object")
    return parse_snapshot(payload, reference_date=reference_date)
