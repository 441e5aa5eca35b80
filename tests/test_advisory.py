import pytest

from pybreakout.config import get_config
from pybreakout.engine import build_advisory, project_outlook, realized_breakout
from pybreakout.engine.advisory import (
    k_rate_flag,
    k_rate_penalty,
    surplus_reliability,
    years_of_service_multiplier,
)
from pybreakout.engine.outlook import breakout_types, likelihood
from pybreakout.engine.seasons import derive_context
from pybreakout.models import PlayerRecord


RULES = get_config().advisory


def _context(year: int = 2026, **fields):
    fields.setdefault("name", "Test Hitter")
    fields.setdefault("team", "MIA")
    fields.setdefault("position", "2B")
    return derive_context(PlayerRecord(**fields), year)


def _advisory(year: int = 2026, **fields):
    return build_advisory(_context(year, **fields), year=year, rules=RULES)


@pytest.mark.parametrize(
    "k_rate, penalty, code",
    [(0.31, 0.85, "k_rate_high"), (0.26, 0.95, "k_rate_elevated"), (0.20, 1.0, None), (None, 1.0, None)],
)
def test_k_rate_penalty_and_flag(k_rate, penalty, code):
    flag = k_rate_flag(k_rate, RULES)

    assert k_rate_penalty(k_rate, RULES) == penalty
    assert (flag.code if flag else None) == code


@pytest.mark.parametrize(
    "chase_rate, code",
    [(0.34, "chase_very_high"), (0.31, "chase_high"), (0.28, "chase_elevated"), (0.25, None)],
)
def test_chase_rate_flags(chase_rate, code):
    report = _advisory(chase_rate=chase_rate)

    chase_codes = [flag.code for flag in report.risks if flag.code.startswith("chase")]
    assert chase_codes == ([code] if code else [])


def test_surplus_reliability_discounts_high_chase():
    assert surplus_reliability(0.31, 0.04, RULES) == 0.70
    assert surplus_reliability(0.28, 0.04, RULES) == 0.85
    assert surplus_reliability(0.25, 0.04, RULES) == 1.0
    assert surplus_reliability(0.31, 0.03, RULES) == 1.0
    assert surplus_reliability(None, 0.04, RULES) == 1.0


def test_career_year_is_a_risk():
    report = _advisory(current_woba=0.340, career_woba=0.300, years_in_mlb=5)

    assert "career_year" in [flag.code for flag in report.risks]
    assert report.career_context == 0.75


def test_down_year_is_a_positive():
    report = _advisory(current_woba=0.280, career_woba=0.310, years_in_mlb=5)

    assert [flag.code for flag in report.positives] == ["down_year"]
    assert report.career_context == 1.10


def test_sophomore_slump():
    report = _advisory(current_woba=0.340, career_woba=0.300, years_in_mlb=2)

    codes = [flag.code for flag in report.risks]
    assert "sophomore_slump" in codes
    assert "sophomore" in codes
    assert report.sophomore_slump == 0.65
    severity = {flag.code: flag.severity for flag in report.risks}
    assert severity["sophomore_slump"] == "high"


@pytest.mark.parametrize(
    "years, expected",
    [(None, 0.85), (1, 0.80), (2, 0.90), (3, 0.95), (4, 1.0), (5, 1.0), (6, 0.95), (9, 0.95)],
)
def test_years_of_service_multiplier(years, expected):
    assert years_of_service_multiplier(years, RULES) == expected


def test_service_time_is_estimated_when_missing():
    rookie = _context(age=22)
    second_year = _context(age=24, woba_by_season={2024: 0.300})
    veteran = _context(age=31)

    assert rookie.years_in_mlb == 1
    assert second_year.years_in_mlb == 2
    assert veteran.years_in_mlb == 6
    assert _context().years_in_mlb is None


def test_bat_speed_flags():
    upside = _advisory(bat_speed=74.5, current_woba=0.320)
    already_producing = _advisory(bat_speed=74.5, current_woba=0.340)
    plus = _advisory(bat_speed=73.5, current_woba=0.320)

    assert [flag.code for flag in upside.positives] == ["bat_speed_upside"]
    assert upside.bat_speed_upside == 1.10
    assert [flag.code for flag in already_producing.positives] == ["bat_speed_plus"]
    assert already_producing.bat_speed_upside == 1.0
    assert [flag.code for flag in plus.positives] == ["bat_speed_plus"]


def test_launch_angle_change_only_for_younger_hitters():
    young = _advisory(age=25, launch_angle_delta=3.5)
    older = _advisory(age=28, launch_angle_delta=3.5)

    assert "launch_angle_change" in young.codes
    assert young.launch_angle_change == 1.12
    assert "launch_angle_change" not in older.codes


def test_pull_boost_after_shift_ban():
    assert "shift_ban_pull" in _advisory(pull_rate=0.50).codes
    assert _advisory(pull_rate=0.50).pull_rate_boost == 1.08
    assert "shift_ban_pull" not in _advisory(year=2022, pull_rate=0.50).codes
    assert "shift_ban_pull" not in _advisory(pull_rate=0.48).codes


def test_sample_age_and_surplus_flags():
    report = _advisory(pa=180, age=33, xwoba_surplus=0.08)
    severity = {flag.code: flag.severity for flag in report.risks}

    assert severity["small_sample"] == "high"
    assert severity["age"] == "high"
    assert severity["extreme_surplus"] == "medium"
    assert {flag.code: flag.severity for flag in _advisory(pa=250, age=30).risks} == {
        "moderate_sample": "medium",
        "age": "medium",
    }


def test_quiet_profile_has_no_flags():
    report = _advisory(pa=550, age=26, years_in_mlb=4, k_rate=0.20, chase_rate=0.25)

    assert report.codes == []
    assert report.k_rate_penalty == 1.0


def test_projected_gain_from_surplus_and_trajectory():
    context = _context(current_woba=0.300, xwoba_surplus=0.04, xwoba_trajectory=0.02, barrel_rate=0.10, pa=500)

    outlook = project_outlook(context, 70, year=2026)

    assert outlook.projected_woba_gain == pytest.approx(0.038)
    assert outlook.projected_woba == pytest.approx(0.338)
    assert outlook.projected_wrc_plus == 39
    assert outlook.projected_home_runs == 16
    assert (outlook.likelihood, outlook.likelihood_pct) == ("High", 65)


def test_projected_gain_is_clamped():
    big = project_outlook(_context(current_woba=0.300, xwoba_surplus=0.10), 50, year=2026)
    negative = project_outlook(_context(current_woba=0.300, xwoba_surplus=-0.03), 50, year=2026)

    assert big.projected_woba_gain == pytest.approx(0.060)
    assert negative.projected_woba_gain == 0.0
    assert negative.projected_woba == pytest.approx(0.300)


def test_projection_falls_back_to_xwoba():
    outlook = project_outlook(_context(xwoba=0.330), 40, year=2026)

    assert outlook.projected_woba == pytest.approx(0.330)
    assert outlook.projected_home_runs is None


def test_breakout_types():
    assert breakout_types(_context(barrel_rate=0.09, hard_hit_rate=0.50)) == ["Power", "Contact"]
    assert breakout_types(_context(xwoba_trajectory=0.03, launch_angle_delta=3.0)) == [
        "Developing",
        "Swing Change",
    ]
    assert breakout_types(_context()) == ["All-Around"]


@pytest.mark.parametrize(
    "score, expected",
    [(95, ("Very High", 75)), (80, ("Very High", 75)), (68, ("High", 65)), (55, ("Medium", 50)), (54, ("Low", 35))],
)
def test_likelihood(score, expected):
    assert likelihood(score) == expected


def test_realized_breakout():
    def record(actual):
        return PlayerRecord(
            name="Back Test", team="KC", position="SS", woba_by_season={2024: 0.300, 2025: actual}
        )

    assert realized_breakout(record(0.355), 2025) == "major"
    assert realized_breakout(record(0.335), 2025) == "minor"
    assert realized_breakout(record(0.320), 2025) is None
    assert realized_breakout(record(0.355), 2026) is None
