"""Helpers to load Baseball Savant leaderboard CSVs and emit canonical records."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from pybreakout.models import PlayerRecord, coerce_number


logger = logging.getLogger(__name__)

Row = Mapping[str, str]

MIN_PLATE_APPEARANCES = 100
DEFAULT_POSITION = "OF"

EXPECTED_REQUIRED_COLUMNS = ("player_id", "pa", "woba", "est_woba")
_NAME_COLUMN = "last_name, first_name"
_ID_COLUMNS = ("player_id", "id")


@dataclass(frozen=True)
class MergeReport:
    total_rows: int
    kept_players: int
    skipped_small_sample: List[str] = field(default_factory=list)
    skipped_missing_expected: List[str] = field(default_factory=list)
    invalid_rows: List[str] = field(default_factory=list)
    missing_statcast: List[str] = field(default_factory=list)
    missing_prior_season: List[str] = field(default_factory=list)


def _read_rows(handle: Iterable[str], *, source: str, required: Sequence[str] = ()) -> List[Dict[str, str]]:
    reader = csv.DictReader(handle)
    if reader.fieldnames is None:
        raise ValueError(f"{source} has no header row")
    # Savant exports sometimes prefix the first header with a byte-order mark.
    fieldnames = [name.lstrip("\ufeff").strip() for name in reader.fieldnames]
    missing = [column for column in required if column not in fieldnames]
    if missing:
        raise ValueError(f"{source} is missing required columns: {', '.join(missing)}")
    reader.fieldnames = fieldnames
    return [dict(row) for row in reader]


def load_leaderboard_csv(path: Path, *, required: Sequence[str] = ()) -> List[Dict[str, str]]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return _read_rows(f, source=str(path), required=required)


def parse_leaderboard_text(text: str, *, source: str = "upload", required: Sequence[str] = ()) -> List[Dict[str, str]]:
    return _read_rows(io.StringIO(text.lstrip("\ufeff")), source=source, required=required)


def _player_id(row: Row) -> Optional[str]:
    for column in _ID_COLUMNS:
        raw = (row.get(column) or "").strip()
        if raw:
            number = coerce_number(raw)
            return str(int(number)) if number is not None and number.is_integer() else raw
    return None


def index_by_player(rows: Optional[Sequence[Row]]) -> Dict[str, Row]:
    """Key leaderboard rows by player id; the bat-tracking board uses ``id``."""

    indexed: Dict[str, Row] = {}
    for row in rows or ():
        player_id = _player_id(row)
        if player_id is not None:
            indexed[player_id] = row
    return indexed


def _overlay(player_id: str, *tables: Mapping[str, Row]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for table in tables:
        row = table.get(player_id)
        if row:
            merged.update({key: value for key, value in row.items() if value not in (None, "")})
    return merged


def _percent(value: Optional[str]) -> Optional[float]:
    number = coerce_number(value)
    return number / 100 if number is not None else None


def _first_number(row: Row, *columns: str) -> Optional[float]:
    for column in columns:
        number = coerce_number(row.get(column))
        if number is not None:
            return number
    return None


def display_name(row: Row) -> str:
    """Savant writes names as ``"Last, First"``; return ``"First Last"``."""

    combined = (row.get(_NAME_COLUMN) or "").strip()
    if combined:
        last, _, first = combined.partition(",")
        return f"{first.strip()} {last.strip()}".strip()
    first = (row.get("first_name") or "").strip()
    last = (row.get("last_name") or "").strip()
    return f"{first} {last}".strip()


def age_on(birth_date: date, reference: date) -> int:
    age = reference.year - birth_date.year
    if (reference.month, reference.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def merge_leaderboards(
    expected_rows: Sequence[Row],
    *,
    year: int,
    custom_rows: Optional[Sequence[Row]] = None,
    statcast_rows: Optional[Sequence[Row]] = None,
    bat_tracking_rows: Optional[Sequence[Row]] = None,
    chase_rows: Optional[Sequence[Row]] = None,
    prior_expected_rows: Optional[Sequence[Row]] = None,
    prior_custom_rows: Optional[Sequence[Row]] = None,
    prior_statcast_rows: Optional[Sequence[Row]] = None,
    prior_chase_rows: Optional[Sequence[Row]] = None,
    actual_expected_rows: Optional[Sequence[Row]] = None,
    birth_dates: Optional[Mapping[str, date]] = None,
    reference_date: Optional[date] = None,
    min_pa: int = MIN_PLATE_APPEARANCES,
) -> Tuple[List[PlayerRecord], MergeReport]:
    """Join leaderboards for prediction ``year`` into player records.

    ``expected_rows`` holds the ``year - 1`` expected-statistics board and
    decides which players exist. Every other board is optional and only adds
    fields. Columns already present on the expected row are used when a
    separate board is not supplied, so a single combined export also works.
    """

    data_season, baseline_season = year - 1, year - 2
    current = (
        index_by_player(custom_rows),
        index_by_player(statcast_rows),
        index_by_player(bat_tracking_rows),
        index_by_player(chase_rows),
    )
    prior_expected = index_by_player(prior_expected_rows)
    prior = (index_by_player(prior_custom_rows), index_by_player(prior_statcast_rows), index_by_player(prior_chase_rows))
    actual = index_by_player(actual_expected_rows)
    birth_dates = birth_dates or {}
    reference_date = reference_date or date.today()

    records: List[PlayerRecord] = []
    small_sample: List[str] = []
    missing_expected: List[str] = []
    invalid: List[str] = []
    missing_statcast: List[str] = []
    missing_prior: List[str] = []

    for row in expected_rows:
        name = display_name(row) or (row.get("player_id") or "").strip()
        pa = coerce_number(row.get("pa"))
        if pa is None or pa < min_pa:
            small_sample.append(name)
            continue
        woba = coerce_number(row.get("woba"))
        xwoba = coerce_number(row.get("est_woba"))
        if woba is None or xwoba is None:
            missing_expected.append(name)
            continue

        player_id = _player_id(row)
        stats = {**row, **_overlay(player_id, *current)} if player_id else dict(row)
        before = _overlay(player_id, *prior) if player_id else {}
        if player_id and any(current) and not any(player_id in table for table in current):
            missing_statcast.append(name)

        woba_seasons: Dict[int, float] = {data_season: woba}
        xwoba_seasons: Dict[int, float] = {data_season: xwoba}
        angle_seasons: Dict[int, float] = {}
        launch_angle = _first_number(stats, "launch_angle", "avg_hit_angle")
        if launch_angle is not None:
            angle_seasons[data_season] = launch_angle
        prior_angle = _first_number(before, "launch_angle", "avg_hit_angle")
        if prior_angle is not None:
            angle_seasons[baseline_season] = prior_angle

        baseline = prior_expected.get(player_id) if player_id else None
        if baseline is not None:
            prior_woba = coerce_number(baseline.get("woba"))
            prior_xwoba = coerce_number(baseline.get("est_woba"))
            if prior_woba is not None:
                woba_seasons[baseline_season] = prior_woba
            if prior_xwoba is not None:
                xwoba_seasons[baseline_season] = prior_xwoba
        elif prior_expected:
            missing_prior.append(name)

        outcome = actual.get(player_id) if player_id else None
        actual_woba = coerce_number(outcome.get("woba")) if outcome is not None else None
        if actual_woba is not None:
            woba_seasons[year] = actual_woba

        age = coerce_number(stats.get("age") or stats.get("player_age"))
        birth_date = birth_dates.get(player_id) if player_id else None
        if age is None and birth_date is not None:
            age = age_on(birth_date, reference_date)

        payload = {
            "player_id": player_id,
            "name": name,
            "team": (row.get("team_name_abbrev") or row.get("team") or "").strip(),
            "position": (row.get("pos") or row.get("primary_position") or DEFAULT_POSITION).strip().upper(),
            "pa": pa,
            "age": age,
            "birth_date": birth_date,
            "current_woba": woba,
            "xwoba": xwoba,
            "hard_hit_rate": _percent(stats.get("hard_hit_percent")),
            "barrel_rate": _percent(stats.get("barrel_batted_rate")),
            "k_rate": _percent(stats.get("k_percent")),
            "chase_rate": _percent(stats.get("o_swing_percent")),
            "pull_rate": _percent(stats.get("pull_percent")),
            "bat_speed": _first_number(stats, "avg_bat_speed", "bat_speed"),
            "launch_angle": launch_angle,
            "prior_hard_hit_rate": _percent(before.get("hard_hit_percent")),
            "prior_barrel_rate": _percent(before.get("barrel_batted_rate")),
            "prior_k_rate": _percent(before.get("k_percent")),
            "prior_chase_rate": _percent(before.get("o_swing_percent")),
            "woba_by_season": woba_seasons,
            "xwoba_by_season": xwoba_seasons,
            "launch_angle_by_season": angle_seasons,
        }

        try:
            records.append(PlayerRecord.model_validate(payload))
        except ValidationError as exc:
            logger.warning("Skipping Savant row for %r: %s", name, exc)
            invalid.append(name)

    if small_sample or missing_expected:
        logger.warning(
            "Skipped %d Savant rows below %d PA and %d without wOBA/xwOBA",
            len(small_sample),
            min_pa,
            len(missing_expected),
        )
    report = MergeReport(
        total_rows=len(expected_rows),
        kept_players=len(records),
        skipped_small_sample=small_sample,
        skipped_missing_expected=missing_expected,
        invalid_rows=invalid,
        missing_statcast=missing_statcast,
        missing_prior_season=missing_prior,
    )
    logger.info("Merged %d of %d Savant rows for %d", report.kept_players, report.total_rows, year)
    return records, report


def _optional_rows(path: Optional[Path]) -> Optional[List[Dict[str, str]]]:
    return load_leaderboard_csv(path) if path is not None else None


def merge_savant_files(
    *,
    expected_path: Path,
    year: int,
    custom_path: Optional[Path] = None,
    statcast_path: Optional[Path] = None,
    bat_tracking_path: Optional[Path] = None,
    chase_path: Optional[Path] = None,
    prior_expected_path: Optional[Path] = None,
    prior_custom_path: Optional[Path] = None,
    prior_statcast_path: Optional[Path] = None,
    prior_chase_path: Optional[Path] = None,
    actual_expected_path: Optional[Path] = None,
    birth_dates: Optional[Mapping[str, date]] = None,
    reference_date: Optional[date] = None,
) -> Tuple[List[PlayerRecord], MergeReport]:
    return merge_leaderboards(
        load_leaderboard_csv(expected_path, required=EXPECTED_REQUIRED_COLUMNS),
        year=year,
        custom_rows=_optional_rows(custom_path),
        statcast_rows=_optional_rows(statcast_path),
        bat_tracking_rows=_optional_rows(bat_tracking_path),
        chase_rows=_optional_rows(chase_path),
        prior_expected_rows=_optional_rows(prior_expected_path),
        prior_custom_rows=_optional_rows(prior_custom_path),
        prior_statcast_rows=_optional_rows(prior_statcast_path),
        prior_chase_rows=_optional_rows(prior_chase_path),
        actual_expected_rows=_optional_rows(actual_expected_path),
        birth_dates=birth_dates,
        reference_date=reference_date,
    )
