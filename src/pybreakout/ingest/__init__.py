"""Input adapters that normalize raw leaderboard data."""

from .savant import (
    MergeReport,
    load_leaderboard_csv,
    merge_leaderboards,
    merge_savant_files,
    parse_leaderboard_text,
)
from .snapshot import Snapshot, load_snapshot, parse_snapshot

__all__ = [
    "MergeReport",
    "Snapshot",
    "load_leaderboard_csv",
    "load_snapshot",
    "merge_leaderboards",
    "merge_savant_files",
    "parse_leaderboard_text",
    "parse_snapshot",
]
