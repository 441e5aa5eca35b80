from pybreakout.config import get_config
from pybreakout.engine import filter_cohort
from pybreakout.engine.filtering import is_established_star, is_pitcher
from pybreakout.models import PlayerRecord


def _record(name: str, **fields) -> PlayerRecord:
    fields.setdefault("team", "NYM")
    fields.setdefault("position", "OF")
    return PlayerRecord(name=name, **fields)


def test_pitchers_are_excluded():
    config = get_config()
    records = [
        _record("Starter", position="SP"),
        _record("Reliever", position="rp"),
        _record("Generic Arm", position="P"),
        _record("Hitter", position="1B"),
    ]

    kept = filter_cohort(records, year=2026, config=config)

    assert [record.name for record in kept] == ["Hitter"]
    assert is_pitcher(records[1], config.cohort)
    assert not is_pitcher(records[3], config.cohort)


def test_young_limited_sample_star_is_retained():
    young = _record("Young Star", age=23, pa=350, current_woba=0.400)

    kept = filter_cohort([young], year=2026, config=get_config())

    assert kept == [young]


def test_established_star_is_excluded():
    star = _record("Established Star", age=26, pa=500, current_woba=0.400)
    young_full_season = _record("Full Season", age=23, pa=450, current_woba=0.380)

    kept = filter_cohort([star, young_full_season], year=2026, config=get_config())

    assert kept == []


def test_unknown_age_star_is_excluded():
    rules = get_config().cohort
    record = _record("No Age", pa=200, current_woba=0.370)

    assert is_established_star(record, year=2026, rules=rules)


def test_star_check_falls_back_to_season_woba():
    rules = get_config().cohort
    last_season = _record("Last Season", age=27, pa=550, woba_by_season={2025: 0.380})
    two_back = _record("Two Back", age=27, pa=550, woba_by_season={2024: 0.360})
    too_old = _record("Too Old", age=27, pa=550, woba_by_season={2023: 0.420})

    assert is_established_star(last_season, year=2026, rules=rules)
    assert is_established_star(two_back, year=2026, rules=rules)
    assert not is_established_star(too_old, year=2026, rules=rules)


def test_threshold_is_strict():
    record = _record("On The Line", age=28, pa=600, current_woba=0.350)

    assert filter_cohort([record], year=2026, config=get_config()) == [record]


def test_empty_cohort():
    assert filter_cohort([], year=2026, config=get_config()) == []
