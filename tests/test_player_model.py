import math
from datetime import date

import pytest
from pydantic import ValidationError

from pybreakout.models import PlayerRecord, coerce_number


def test_player_record_is_frozen():
    record = PlayerRecord(name="Test Hitter", team="NYM", position="OF", age=24, pa=410)

    assert record.age == 24
    assert record.woba_by_season == {}

    with pytest.raises((TypeError, ValidationError)):
        record.age = 25  # type: ignore[misc]


def test_player_record_requires_identity_fields():
    with pytest.raises(ValidationError):
        PlayerRecord.model_validate({"team": "NYM", "position": "OF"})
    with pytest.raises(ValidationError):
        PlayerRecord.model_validate({"name": "", "team": "NYM", "position": "OF"})


def test_player_record_accepts_camel_case_and_ignores_extras():
    record = PlayerRecord.model_validate(
        {
            "name": "Camel Case",
            "team": "SEA",
            "position": "SS",
            "hardHitRate": 0.47,
            "barrelRate": 0.081,
            "kRate": 0.22,
            "yearsInMLB": 2,
            "birthDate": "2002-05-01",
            "favouriteColour": "teal",
        }
    )

    assert record.hard_hit_rate == pytest.approx(0.47)
    assert record.barrel_rate == pytest.approx(0.081)
    assert record.k_rate == pytest.approx(0.22)
    assert record.years_in_mlb == 2
    assert record.birth_date == date(2002, 5, 1)


def test_player_record_collects_year_suffixed_fields():
    record = PlayerRecord.model_validate(
        {
            "name": "Season Keys",
            "team": "BAL",
            "position": "OF",
            "woba24": 0.318,
            "woba25": 0.316,
            "xwoba24": "0.330",
            "xwoba_2025": 0.360,
            "launchAngle25": 14.5,
            "woba23": None,
        }
    )

    assert record.woba_by_season == {2024: pytest.approx(0.318), 2025: pytest.approx(0.316)}
    assert record.xwoba_by_season == {2024: pytest.approx(0.330), 2025: pytest.approx(0.360)}
    assert record.launch_angle_by_season == {2025: pytest.approx(14.5)}
    assert record.season_woba(2023) is None
    assert record.season_xwoba(2025) == pytest.approx(0.360)


def test_primary_position_alias():
    record = PlayerRecord.model_validate({"name": "Alias", "team": "TB", "primary_position": "3B"})

    assert record.position == "3B"


def test_malformed_numbers_become_unknown():
    record = PlayerRecord.model_validate(
        {
            "name": "Messy Row",
            "team": "CIN",
            "position": "3B",
            "pa": "n/a",
            "age": True,
            "kRate": "abc",
            "hardHitRate": float("nan"),
            "barrelRate": "",
            "batSpeed": "74.1",
        }
    )

    assert record.pa is None
    assert record.age is None
    assert record.k_rate is None
    assert record.hard_hit_rate is None
    assert record.barrel_rate is None
    assert record.bat_speed == pytest.approx(74.1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("", None),
        ("null", None),
        ("--", None),
        (False, None),
        (math.inf, None),
        ("0.355", 0.355),
        (12, 12.0),
    ],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected
