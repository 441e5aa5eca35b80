"""Command-line interface for ranking breakout candidates."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from pybreakout.config_loader import ConfigProfile, default_prediction_year, resolve_config
from pybreakout.datasets import load_historical
from pybreakout.engine import score_cohort
from pybreakout.ingest import MergeReport, load_snapshot, merge_savant_files
from pybreakout.models import PlayerRecord
from pybreakout.views import FilterCriteria, export_ranked_to_csv, filter_ranked


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank MLB hitters by breakout score")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Player snapshot JSON or Savant expected-statistics CSV (curated cohort when omitted)",
    )
    parser.add_argument("--year", type=int, default=None, help="Prediction year (data from the prior season)")
    parser.add_argument("--model", default=None, help="Model version (e.g., v5.4)")
    parser.add_argument("--profile", type=Path, default=None, help="Load scoring override profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save the effective profile JSON")
    parser.add_argument("--custom", type=Path, default=None, help="Savant custom leaderboard CSV")
    parser.add_argument("--statcast", type=Path, default=None, help="Savant statcast leaderboard CSV")
    parser.add_argument("--bat-tracking", type=Path, default=None, help="Savant bat-tracking leaderboard CSV")
    parser.add_argument("--chase", type=Path, default=None, help="Savant chase-rate leaderboard CSV")
    parser.add_argument("--prior-expected", type=Path, default=None, help="Baseline season expected stats CSV")
    parser.add_argument("--prior-custom", type=Path, default=None, help="Baseline season custom leaderboard CSV")
    parser.add_argument("--prior-statcast", type=Path, default=None, help="Baseline season statcast CSV")
    parser.add_argument("--prior-chase", type=Path, default=None, help="Baseline season chase-rate CSV")
    parser.add_argument("--actual", type=Path, default=None, help="Prediction season expected stats CSV")
    parser.add_argument("--position", default=None, help="Only show players whose position contains this")
    parser.add_argument("--team", default=None, help="Only show players from this team")
    parser.add_argument("--min-age", type=int, default=None, help="Minimum age (unknown ages always pass)")
    parser.add_argument("--max-age", type=int, default=None, help="Maximum age (unknown ages always pass)")
    parser.add_argument("--top", type=int, default=25, help="Number of players to show")
    parser.add_argument("--output", type=Path, default=None, help="Write the ranked list to this CSV path")
    parser.add_argument("--report", type=Path, default=None, help="Optional path to write merge summary JSON")
    return parser.parse_args(argv)


def _summarize(label: str, names: List[str]) -> None:
    if not names:
        return
    preview = ", ".join(names[:5])
    more = len(names) - 5
    suffix = f", +{more} more" if more > 0 else ""
    print(f"{label}: {preview}{suffix}")


def _load_records(args: argparse.Namespace) -> tuple[List[PlayerRecord], int, Optional[MergeReport]]:
    if args.input is None:
        year = args.year or default_prediction_year()
        return load_historical(year), year, None
    if args.input.suffix.lower() == ".json":
        snapshot = load_snapshot(args.input)
        return snapshot.players, args.year or snapshot.year, None
    year = args.year or default_prediction_year()
    records, report = merge_savant_files(
        expected_path=args.input,
        year=year,
        custom_path=args.custom,
        statcast_path=args.statcast,
        bat_tracking_path=args.bat_tracking,
        chase_path=args.chase,
        prior_expected_path=args.prior_expected,
        prior_custom_path=args.prior_custom,
        prior_statcast_path=args.prior_statcast,
        prior_chase_path=args.prior_chase,
        actual_expected_path=args.actual,
    )
    return records, year, report


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)

    try:
        config = resolve_config(args.model, args.profile)
    except KeyError as exc:
        raise SystemExit(f"Unknown model version: {args.model}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid profile {args.profile}: {exc}") from exc

    if args.save_profile:
        profile = ConfigProfile.load(args.profile) if args.profile else ConfigProfile(base_version=config.version)
        profile.save(args.save_profile)
        print(f"Saved scoring profile to {args.save_profile}")

    try:
        records, year, report = _load_records(args)
    except KeyError as exc:
        raise SystemExit(f"No curated cohort for {args.year or default_prediction_year()}") from exc
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if report is not None:
        print(f"Merged {report.kept_players}/{report.total_rows} Savant rows")
        _summarize("Skipped below minimum PA", report.skipped_small_sample)
        _summarize("Skipped without wOBA/xwOBA", report.skipped_missing_expected)
        _summarize("Missing statcast metrics", report.missing_statcast)
        if args.report:
            args.report.write_text(json.dumps(asdict(report), indent=2), encoding="utf-8")
            print(f"Wrote merge report to {args.report}")

    ranked = score_cohort(records, year=year, config=config)
    criteria = FilterCriteria(
        position=args.position,
        team=args.team,
        min_age=args.min_age,
        max_age=args.max_age,
        limit=args.top,
    )
    result = filter_ranked(ranked, criteria)
    print(f"{year} breakout candidates ({config.version}): {len(ranked)} scored, {len(result.players)} shown")
    for entry in result.players:
        player = entry.player
        print(
            f"{entry.rank:>3}. {player.name:<24} {player.player.team:<4} "
            f"{player.breakout_score:>4} {player.tier:<5} {player.confidence}"
        )

    if args.output:
        args.output.write_text(
            export_ranked_to_csv([entry.player for entry in result.players]),
            encoding="utf-8",
        )
        print(f"Wrote ranked list to {args.output}")


if __name__ == "__main__":
    main()
