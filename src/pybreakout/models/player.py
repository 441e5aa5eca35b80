"""Canonical hitter record shared across ingestion and the scoring engine."""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


_SEASON_KEY = re.compile(r"^(?P<stat>xwoba|woba|launchAngle|launch_angle)_?(?P<year>\d{4}|\d{2})$")

_SEASON_TARGETS = {
    "woba": "woba_by_season",
    "xwoba": "xwoba_by_season",
    "launchAngle": "launch_angle_by_season",
    "launch_angle": "launch_angle_by_season",
}

# Keys the provider and dashboard snapshots spell differently from to_camel().
_KEY_ALIASES = {
    "yearsInMLB": "years_in_mlb",
    "primary_position": "position",
    "actualResult": "actual_result",
}

_MISSING_TOKENS = {"", "null", "none", "nan", "n/a", "na", "-", "--"}


def _season_year(token: str) -> int:
    year = int(token)
    return year + 2000 if year < 100 else year


def coerce_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it is missing or malformed."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if text.lower() in _MISSING_TOKENS:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _coerce_int(value: Any) -> Optional[int]:
    number = coerce_number(value)
    return int(number) if number is not None else None


class PlayerRecord(BaseModel):
    """Per-hitter seasonal statistics fed to the breakout engine.

    Rates are fractions on a 0-1 scale. Everything except the identity strings
    is optional; malformed numbers are treated as unknown rather than rejected.
    """

    name: str = Field(..., min_length=1)
    team: str
    position: str
    player_id: Optional[str] = None
    age: Optional[int] = None
    birth_date: Optional[date] = None
    pa: Optional[int] = None

    current_woba: Optional[float] = None
    xwoba: Optional[float] = None
    career_woba: Optional[float] = None
    years_in_mlb: Optional[int] = None

    hard_hit_rate: Optional[float] = None
    barrel_rate: Optional[float] = None
    k_rate: Optional[float] = None
    chase_rate: Optional[float] = None
    pull_rate: Optional[float] = None
    bat_speed: Optional[float] = None
    launch_angle: Optional[float] = None

    prior_hard_hit_rate: Optional[float] = None
    prior_barrel_rate: Optional[float] = None
    prior_k_rate: Optional[float] = None
    prior_chase_rate: Optional[float] = None

    barrel_improvement: Optional[float] = None
    hard_hit_improvement: Optional[float] = None
    chase_improvement: Optional[float] = None
    k_rate_improvement: Optional[float] = None
    xwoba_surplus: Optional[float] = None
    xwoba_trajectory: Optional[float] = None
    launch_angle_delta: Optional[float] = None

    woba_by_season: Dict[int, float] = Field(default_factory=dict)
    xwoba_by_season: Dict[int, float] = Field(default_factory=dict)
    launch_angle_by_season: Dict[int, float] = Field(default_factory=dict)

    actual_result: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _collect_season_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload: Dict[str, Any] = {}
        seasons: Dict[str, Dict[int, float]] = {target: {} for target in set(_SEASON_TARGETS.values())}
        for key, value in data.items():
            key = _KEY_ALIASES.get(key, key)
            match = _SEASON_KEY.match(key) if isinstance(key, str) else None
            if match:
                number = coerce_number(value)
                if number is not None:
                    seasons[_SEASON_TARGETS[match["stat"]]][_season_year(match["year"])] = number
                continue
            payload[key] = value
        for target, values in seasons.items():
            if not values:
                continue
            camel = to_camel(target)
            existing = payload.get(target, payload.get(camel)) or {}
            merged = {**values, **dict(existing)}
            payload.pop(camel, None)
            payload[target] = merged
        return payload

    @field_validator("age", "pa", "years_in_mlb", mode="before")
    @classmethod
    def _parse_int(cls, value: Any) -> Optional[int]:
        return _coerce_int(value)

    @field_validator(
        "current_woba",
        "xwoba",
        "career_woba",
        "hard_hit_rate",
        "barrel_rate",
        "k_rate",
        "chase_rate",
        "pull_rate",
        "bat_speed",
        "launch_angle",
        "prior_hard_hit_rate",
        "prior_barrel_rate",
        "prior_k_rate",
        "prior_chase_rate",
        "barrel_improvement",
        "hard_hit_improvement",
        "chase_improvement",
        "k_rate_improvement",
        "xwoba_surplus",
        "xwoba_trajectory",
        "launch_angle_delta",
        mode="before",
    )
    @classmethod
    def _parse_float(cls, value: Any) -> Optional[float]:
        return coerce_number(value)

    @field_validator("woba_by_season", "xwoba_by_season", "launch_angle_by_season", mode="before")
    @classmethod
    def _parse_seasons(cls, value: Any) -> Dict[int, float]:
        if not value:
            return {}
        parsed: Dict[int, float] = {}
        for season, raw in dict(value).items():
            number = coerce_number(raw)
            if number is not None:
                parsed[_season_year(str(season))] = number
        return parsed

    def season_woba(self, season: int) -> Optional[float]:
        return self.woba_by_season.get(season)

    def season_xwoba(self, season: int) -> Optional[float]:
        return self.xwoba_by_season.get(season)
