import csv
import json
from pathlib import Path

import pytest

from pybreakout.cli import main


def test_curated_cohort(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    output = tmp_path / "ranked.csv"

    main(["--year", "2026", "--top", "5", "--output", str(output)])

    out = capsys.readouterr().out
    assert "2026 breakout candidates (v5.4): 45 scored, 5 shown" in out
    rows = list(csv.DictReader(output.read_text(encoding="utf-8").splitlines()))
    assert len(rows) == 5
    assert rows[0]["rank"] == "1"


def test_position_filter(capsys: pytest.CaptureFixture[str]):
    main(["--year", "2026", "--position", "C", "--top", "50"])

    lines = capsys.readouterr().out.splitlines()
    header = lines[0]
    assert header.startswith("2026 breakout candidates")
    assert "45 scored" in header
    assert len(lines) > 1


def test_snapshot_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    snapshot = tmp_path / "players.json"
    snapshot.write_text(
        json.dumps(
            {
                "success": True,
                "year": 2026,
                "players": [
                    {"name": "First Hitter", "team": "TB", "position": "SS", "age": 23, "pa": 450, "hardHitRate": 0.48},
                    {"name": "Second Hitter", "team": "TB", "position": "2B", "age": 29, "pa": 380, "hardHitRate": 0.39},
                ],
            }
        ),
        encoding="utf-8",
    )

    main([str(snapshot)])

    out = capsys.readouterr().out
    assert "2026 breakout candidates (v5.4): 2 scored, 2 shown" in out
    assert out.index("First Hitter") < out.index("Second Hitter")


def test_savant_input_writes_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    expected = tmp_path / "expected.csv"
    expected.write_text(
        '"last_name, first_name",player_id,pa,woba,est_woba,team_name_abbrev\n'
        '"Keith, Colt",690993,475,0.308,0.351,DET\n'
        '"Sample, Small",100001,80,0.300,0.320,NYM\n',
        encoding="utf-8",
    )
    report = tmp_path / "report.json"

    main([str(expected), "--year", "2026", "--report", str(report)])

    out = capsys.readouterr().out
    assert "Merged 1/2 Savant rows" in out
    assert "Skipped below minimum PA: Small Sample" in out
    assert json.loads(report.read_text(encoding="utf-8"))["kept_players"] == 1


def test_profile_round_trip(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    saved = tmp_path / "profile.json"

    main(["--year", "2025", "--top", "3", "--save-profile", str(saved)])

    assert json.loads(saved.read_text(encoding="utf-8"))["base_version"] == "v5.4"
    main(["--year", "2025", "--top", "3", "--profile", str(saved)])
    assert "(v5.4+profile)" in capsys.readouterr().out


def test_unknown_model_exits():
    with pytest.raises(SystemExit, match="Unknown model"):
        main(["--model", "v0"])


def test_unknown_year_exits():
    with pytest.raises(SystemExit, match="2019"):
        main(["--year", "2019"])


def test_bad_input_exits(tmp_path: Path):
    broken = tmp_path / "expected.csv"
    broken.write_text("player_id,pa\n1,300\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="missing required columns"):
        main([str(broken), "--year", "2026"])
