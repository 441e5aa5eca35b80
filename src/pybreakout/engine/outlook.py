"""Rough next-season projection shown alongside a breakout score."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pybreakout.models import Outlook, PlayerRecord

from .adjustments import round_half_up
from .seasons import PlayerContext

SURPLUS_CONVERSION = 0.70
TRAJECTORY_CARRYOVER = 0.50
MAX_WOBA_GAIN = 0.060

LEAGUE_WOBA_ANCHOR = 0.300
WRC_PLUS_BASE = 20
WRC_PLUS_SCALE = 500

BARREL_HOME_RUN_SHARE = 0.80
PA_PER_BARREL_HOME_RUN = 2.5

LIKELIHOOD_TIERS: Tuple[Tuple[int, str, int], ...] = (
    (80, "Very High", 75),
    (68, "High", 65),
    (55, "Medium", 50),
)
LIKELIHOOD_FLOOR: Tuple[str, int] = ("Low", 35)

MAJOR_BREAKOUT_GAIN = 0.050
MINOR_BREAKOUT_GAIN = 0.030


def breakout_types(context: PlayerContext) -> List[str]:
    record = context.record
    types: List[str] = []
    if record.barrel_rate is not None and record.barrel_rate > 0.08:
        types.append("Power")
    if record.hard_hit_rate is not None and record.hard_hit_rate > 0.48:
        types.append("Contact")
    if context.xwoba_trajectory is not None and context.xwoba_trajectory > 0.020:
        types.append("Developing")
    if context.launch_angle_delta is not None and context.launch_angle_delta > 2.5:
        types.append("Swing Change")
    return types or ["All-Around"]


def likelihood(score: int) -> Tuple[str, int]:
    for minimum, label, pct in LIKELIHOOD_TIERS:
        if score >= minimum:
            return label, pct
    return LIKELIHOOD_FLOOR


def realized_breakout(record: PlayerRecord, year: int) -> Optional[str]:
    """Classify what actually happened in ``year`` for back-tested seasons."""

    actual = record.season_woba(year)
    before = record.season_woba(year - 1)
    if actual is None or before is None:
        return None
    gain = actual - before
    if gain >= MAJOR_BREAKOUT_GAIN:
        return "major"
    if gain >= MINOR_BREAKOUT_GAIN:
        return "minor"
    return None


def project_outlook(context: PlayerContext, score: int, *, year: int) -> Outlook:
    record = context.record
    gain = (context.xwoba_surplus or 0.0) * SURPLUS_CONVERSION + (
        context.xwoba_trajectory or 0.0
    ) * TRAJECTORY_CARRYOVER
    gain = max(0.0, min(MAX_WOBA_GAIN, gain))

    if context.current_woba is not None:
        projected_woba: Optional[float] = context.current_woba + gain
    else:
        projected_woba = context.window.current_xwoba

    wrc_plus = None
    if projected_woba is not None:
        wrc_plus = round_half_up(WRC_PLUS_BASE + (projected_woba - LEAGUE_WOBA_ANCHOR) * WRC_PLUS_SCALE)

    home_runs = None
    if record.barrel_rate and record.pa:
        home_runs = round_half_up(record.barrel_rate * BARREL_HOME_RUN_SHARE * record.pa / PA_PER_BARREL_HOME_RUN)

    label, pct = likelihood(score)
    return Outlook(
        projected_woba_gain=gain,
        projected_woba=projected_woba,
        projected_wrc_plus=wrc_plus,
        projected_home_runs=home_runs,
        breakout_types=breakout_types(context),
        likelihood=label,
        likelihood_pct=pct,
        realized_breakout=realized_breakout(record, year),
    )
