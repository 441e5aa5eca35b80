import csv
from io import StringIO

import pytest

from pybreakout.datasets import load_historical
from pybreakout.engine import score_cohort
from pybreakout.views import EXPORT_HEADERS, FilterCriteria, export_ranked_to_csv, filter_ranked


@pytest.fixture(scope="module")
def ranked():
    return score_cohort(load_historical(2026), year=2026)


def test_filter_by_position_substring(ranked):
    result = filter_ranked(ranked, FilterCriteria(position="ss"))

    positions = [entry.player.player.position for entry in result.players]
    assert positions
    assert all("SS" in position for position in positions)
    assert "SS/OF" in positions
    assert result.summary.available_players == len(ranked)


def test_filter_keeps_rank_order_and_renumbers(ranked):
    result = filter_ranked(ranked, FilterCriteria(team="mil"))

    engine_ranks = [entry.player.rank for entry in result.players]
    assert engine_ranks == sorted(engine_ranks)
    assert [entry.rank for entry in result.players] == list(range(1, len(result.players) + 1))
    assert all(entry.player.player.team == "MIL" for entry in result.players)


def test_filter_age_window_and_limit(ranked):
    result = filter_ranked(ranked, FilterCriteria(min_age=23, max_age=24, limit=5))

    assert len(result.players) == 5
    assert all(23 <= entry.player.player.age <= 24 for entry in result.players)
    assert result.summary.selected_players == 5


def test_unknown_age_passes_age_window():
    ranked = score_cohort(
        [
            {"name": "No Age", "team": "KC", "position": "OF", "pa": 300, "hardHitRate": 0.45},
            {"name": "Old", "team": "KC", "position": "OF", "age": 34, "pa": 300, "hardHitRate": 0.40},
        ],
        year=2026,
    )

    result = filter_ranked(ranked, FilterCriteria(max_age=30))

    assert [entry.player.name for entry in result.players] == ["No Age"]


def test_filter_by_score_and_tier(ranked):
    top = ranked[0]
    by_score = filter_ranked(ranked, FilterCriteria(min_score=top.breakout_score))
    by_tier = filter_ranked(ranked, FilterCriteria(tiers=(top.tier,)))

    assert by_score.players[0].player.name == top.name
    assert all(entry.player.breakout_score >= top.breakout_score for entry in by_score.players)
    assert set(by_tier.summary.tier_counts) == {top.tier}


def test_summary_statistics(ranked):
    result = filter_ranked(ranked, FilterCriteria())
    scores = [player.breakout_score for player in ranked]

    assert result.summary.selected_players == len(ranked)
    assert result.summary.score_mean == pytest.approx(sum(scores) / len(scores))
    assert sum(result.summary.tier_counts.values()) == len(ranked)


def test_empty_selection_summary(ranked):
    result = filter_ranked(ranked, FilterCriteria(team="XXX"))

    assert result.players == []
    assert result.summary.score_mean is None
    assert result.summary.tier_counts == {}


def test_export_ranked_to_csv(ranked):
    text = export_ranked_to_csv(ranked[:3])

    rows = list(csv.DictReader(StringIO(text)))
    assert tuple(rows[0]) == EXPORT_HEADERS
    assert [row["rank"] for row in rows] == ["1", "2", "3"]
    assert rows[0]["name"] == ranked[0].name
    assert rows[0]["breakout_score"] == str(ranked[0].breakout_score)
    assert rows[0]["risks"] == ";".join(flag.code for flag in ranked[0].advisory.risks)


def test_export_blank_for_unknown_values():
    ranked = score_cohort([{"name": "Blank", "team": "OAK", "position": "C"}], year=2026)

    row = next(csv.DictReader(StringIO(export_ranked_to_csv(ranked))))

    assert row["age"] == ""
    assert row["pa"] == ""
    assert row["projected_woba"] == ""
    assert row["confidence"] == "SPEC"
