import pytest

from pybreakout.config import get_config
from pybreakout.engine import adjust, age_multiplier, elite_profile_rules, sample_size_multiplier
from pybreakout.engine.adjustments import elite_profile_multiplier, profile_signals, round_half_up
from pybreakout.engine.seasons import derive_context
from pybreakout.models import PlayerRecord


def _context(**fields):
    fields.setdefault("name", "Test Hitter")
    fields.setdefault("team", "SEA")
    fields.setdefault("position", "OF")
    return derive_context(PlayerRecord(**fields), 2026)


def _applied(context):
    config = get_config()
    return elite_profile_multiplier(profile_signals(context, config.elite), elite_profile_rules(config.elite))


@pytest.mark.parametrize(
    "age, expected",
    [
        (21, 1.15),
        (23, 1.15),
        (24, 1.25),
        (25, 1.25),
        (26, 1.25),
        (27, 1.00),
        (28, 1.00),
        (29, 0.85),
        (30, 0.85),
        (33, 0.70),
        (None, 1.0),
    ],
)
def test_age_multiplier(age, expected):
    assert age_multiplier(age, get_config().age_curve) == expected


@pytest.mark.parametrize(
    "pa, expected",
    [
        (600, 1.00),
        (500, 1.00),
        (350, 0.95),
        (250, 0.85),
        (175, 0.75),
        (150, 0.75),
        (80, 0.60),
        (None, 0.60),
    ],
)
def test_sample_size_multiplier(pa, expected):
    assert sample_size_multiplier(pa, get_config().sample_curve) == expected


@pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (2.49, 2), (-0.5, 0), (99.5, 100)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_complete_profile_stacks_bonuses():
    context = _context(hard_hit_rate=0.50, barrel_rate=0.11, bat_speed=74.0, k_rate=0.18)

    multiplier, applied = _applied(context)

    assert applied == ["hard_hit", "barrel", "bat_speed", "low_k_rate", "complete_profile"]
    assert multiplier == pytest.approx(1.10 * 1.10 * 1.08 * 1.08 * 1.15)


def test_thresholds_are_strict():
    context = _context(hard_hit_rate=0.45, barrel_rate=0.10, bat_speed=73.0, k_rate=0.20)

    assert _applied(context) == (1.0, [])


def test_k_rate_explosion_blocks_contact_gains():
    context = _context(barrel_improvement=0.03, hard_hit_improvement=0.04, k_rate_improvement=-0.06)

    multiplier, applied = _applied(context)

    assert applied == ["k_rate_explosion"]
    assert multiplier == pytest.approx(0.75)


def test_unknown_k_change_counts_as_stable():
    context = _context(barrel_improvement=0.03, hard_hit_improvement=0.04)

    multiplier, applied = _applied(context)

    assert applied == ["sustained_barrel_gain", "sustained_hard_hit_gain", "multiple_improvements"]
    assert multiplier == pytest.approx(1.15 * 1.12 * 1.20)


def test_improvements_derived_from_prior_rates():
    context = _context(
        barrel_rate=0.10,
        prior_barrel_rate=0.07,
        chase_rate=0.25,
        prior_chase_rate=0.29,
        k_rate=0.22,
        prior_k_rate=0.23,
    )

    assert context.barrel_improvement == pytest.approx(0.03)
    assert context.chase_improvement == pytest.approx(0.04)
    assert context.k_rate_improvement == pytest.approx(0.01)
    _, applied = _applied(context)
    assert applied == ["sustained_barrel_gain", "chase_gain", "multiple_improvements"]


@pytest.mark.parametrize(
    "age, rule",
    [
        (20, "elite_young_talent_21"),
        (21, "elite_young_talent_21"),
        (22, "elite_young_talent_22"),
        (23, "elite_young_talent_23"),
        (24, "elite_young_talent_24"),
    ],
)
def test_elite_young_talent_scale(age, rule):
    context = _context(age=age, hard_hit_rate=0.56, barrel_rate=0.14)

    _, applied = _applied(context)

    young = [name for name in applied if name.startswith("elite_young_talent")]
    assert young == [rule]


def test_elite_young_talent_requires_age_and_contact():
    for context in (
        _context(age=25, hard_hit_rate=0.56, barrel_rate=0.14),
        _context(hard_hit_rate=0.56, barrel_rate=0.14),
        _context(age=22, hard_hit_rate=0.55, barrel_rate=0.14),
    ):
        _, applied = _applied(context)
        assert not any(name.startswith("elite_young_talent") for name in applied)


def test_adjust_combines_multipliers():
    config = get_config()
    context = _context(age=25, pa=600)

    score, factors = adjust(80.0, context, config)

    assert score == 100
    assert factors.age == 1.25
    assert factors.sample_size == 1.0
    assert factors.elite_profile == 1.0
    assert factors.raw_score == 80
    assert factors.applied_rules == []


def test_adjust_rounds_half_up():
    config = get_config()
    context = _context(age=28, pa=600)

    score, factors = adjust(62.5, context, config)

    assert score == 63
    assert factors.raw_score == 63
