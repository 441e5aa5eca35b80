import pytest

from pybreakout.engine.aggregate import weighted_composite
from pybreakout.engine.normalize import normalize_cohort, normalize_feature
from pybreakout.models import FEATURE_NAMES, FeatureVector


def test_normalize_feature_maps_range_onto_0_100():
    scores = normalize_feature([0.30, 0.50, None, 0.40])

    assert scores == pytest.approx([0.0, 100.0, 50.0, 50.0])


def test_normalize_feature_zero_range():
    assert normalize_feature([0.42, 0.42]) == [0.0, 0.0]
    assert normalize_feature([0.42, None], neutral=40.0) == [0.0, 40.0]


def test_normalize_feature_without_values():
    assert normalize_feature([None, None]) is None
    assert normalize_feature([]) is None


def test_normalize_cohort_bounds_and_omits_unset_features():
    vectors = [
        FeatureVector(hard_hit_rate=0.38, bat_speed=70.1),
        FeatureVector(hard_hit_rate=0.52),
        FeatureVector(hard_hit_rate=0.45, bat_speed=74.8),
    ]

    scores = normalize_cohort(vectors, FEATURE_NAMES)

    for player_scores in scores:
        assert set(player_scores) == {"hardHitRate", "batSpeed"}
        assert all(0.0 <= value <= 100.0 for value in player_scores.values())
    assert scores[0]["hardHitRate"] == 0.0
    assert scores[1]["hardHitRate"] == 100.0
    assert scores[1]["batSpeed"] == 50.0
    assert scores[2]["batSpeed"] == 100.0


def test_normalization_is_cohort_relative():
    player = FeatureVector(barrel_rate=0.09)
    weak_cohort = [player, FeatureVector(barrel_rate=0.04)]
    strong_cohort = [player, FeatureVector(barrel_rate=0.15)]

    assert normalize_cohort(weak_cohort, FEATURE_NAMES)[0]["barrelRate"] == 100.0
    assert normalize_cohort(strong_cohort, FEATURE_NAMES)[0]["barrelRate"] == 0.0


def test_weighted_composite_treats_missing_features_as_neutral():
    weights = {"hardHitRate": 0.6, "barrelRate": 0.4}

    assert weighted_composite({"hardHitRate": 100.0, "barrelRate": 0.0}, weights) == pytest.approx(60.0)
    assert weighted_composite({"hardHitRate": 100.0}, weights) == pytest.approx(80.0)
    assert weighted_composite({}, weights) == pytest.approx(50.0)
