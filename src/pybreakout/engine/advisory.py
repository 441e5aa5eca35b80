"""Risk and upside annotations shown next to a score.

Nothing here feeds back into ``breakout_score``. The multipliers are kept as
diagnostics so a reader can see how strongly each signal would have pulled the
score had it been wired in. The surplus-reliability discount in particular is
informational only.
"""

from __future__ import annotations

from typing import List, Optional

from pybreakout.config import AdvisoryRules
from pybreakout.models import AdvisoryFlag, AdvisoryReport

from .seasons import PlayerContext


def k_rate_penalty(k_rate: Optional[float], rules: AdvisoryRules) -> float:
    if k_rate is None:
        return 1.0
    if k_rate >= rules.k_rate_severe:
        return rules.k_rate_severe_penalty
    if k_rate >= rules.k_rate_moderate:
        return rules.k_rate_moderate_penalty
    return 1.0


def k_rate_flag(k_rate: Optional[float], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if k_rate is None:
        return None
    if k_rate >= rules.k_rate_severe:
        return AdvisoryFlag(
            code="k_rate_high", severity="high", message=f"High K-rate ({k_rate:.1%}), contact concerns"
        )
    if k_rate >= rules.k_rate_moderate:
        return AdvisoryFlag(
            code="k_rate_elevated", severity="medium", message=f"Elevated K-rate ({k_rate:.1%}), monitor contact"
        )
    return None


def chase_rate_flag(chase_rate: Optional[float], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if chase_rate is None:
        return None
    if chase_rate > rules.chase_very_high:
        return AdvisoryFlag(
            code="chase_very_high",
            severity="high",
            message=f"Very high chase rate ({chase_rate:.1%}), severe approach concerns",
        )
    if chase_rate > rules.chase_high:
        return AdvisoryFlag(
            code="chase_high", severity="high", message=f"High chase rate ({chase_rate:.1%}), approach concerns"
        )
    if chase_rate > rules.chase_elevated:
        return AdvisoryFlag(
            code="chase_elevated",
            severity="medium",
            message=f"Elevated chase rate ({chase_rate:.1%}), plate discipline issue",
        )
    return None


def surplus_reliability(
    chase_rate: Optional[float],
    xwoba_surplus: Optional[float],
    rules: AdvisoryRules,
) -> float:
    """How far to trust a positive xwOBA surplus given the hitter's chase rate."""

    if chase_rate is None or xwoba_surplus is None:
        return 1.0
    if xwoba_surplus <= rules.surplus_reliability_threshold:
        return 1.0
    if chase_rate > rules.chase_high:
        return rules.surplus_high_chase_discount
    if chase_rate > rules.chase_elevated:
        return rules.surplus_elevated_chase_discount
    return 1.0


def _woba_context(context: PlayerContext) -> Optional[float]:
    if context.current_woba is None or context.career_woba is None:
        return None
    return context.current_woba - context.career_woba


def career_context_multiplier(context: PlayerContext, rules: AdvisoryRules) -> float:
    delta = _woba_context(context)
    if delta is None:
        return 1.0
    if delta > rules.career_year_margin:
        return rules.career_year_multiplier
    if delta < rules.down_year_margin:
        return rules.down_year_multiplier
    return 1.0


def career_context_flag(context: PlayerContext, rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    delta = _woba_context(context)
    if delta is None:
        return None
    if delta > rules.career_year_margin:
        return AdvisoryFlag(
            code="career_year",
            severity="medium",
            message=f"Career year (+{delta:.3f} vs career avg), regression risk",
        )
    if delta < rules.down_year_margin:
        return AdvisoryFlag(
            code="down_year",
            severity="positive",
            message=f"Down year ({delta:.3f} vs career avg), bounce-back candidate",
        )
    return None


def _in_sophomore_window(context: PlayerContext, rules: AdvisoryRules) -> bool:
    years = context.years_in_mlb
    delta = _woba_context(context)
    if years is None or delta is None:
        return False
    return rules.sophomore_min_years <= years <= rules.sophomore_max_years and delta > rules.sophomore_margin


def sophomore_slump_multiplier(context: PlayerContext, rules: AdvisoryRules) -> float:
    return rules.sophomore_multiplier if _in_sophomore_window(context, rules) else 1.0


def sophomore_slump_flag(context: PlayerContext, rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if not _in_sophomore_window(context, rules):
        return None
    delta = _woba_context(context)
    return AdvisoryFlag(
        code="sophomore_slump",
        severity="high",
        message=f"Early-career season after a breakout (+{delta:.3f} vs career), regression risk",
    )


def years_of_service_multiplier(years: Optional[int], rules: AdvisoryRules) -> float:
    if years is None:
        return rules.service_unknown_multiplier
    for service_years, multiplier in rules.service_multipliers:
        if years == service_years:
            return multiplier
    if years >= rules.service_veteran_years:
        return rules.service_veteran_multiplier
    return 1.0


def years_of_service_flag(years: Optional[int], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if years is None:
        return None
    if years == 1:
        return AdvisoryFlag(code="rookie", severity="medium", message="Rookie, limited track record")
    if years == 2:
        return AdvisoryFlag(code="sophomore", severity="medium", message="Second year, approach may still change")
    if years >= rules.service_veteran_flag_years:
        return AdvisoryFlag(
            code="veteran", severity="medium", message=f"Veteran ({years} years), less growth potential"
        )
    return None


def bat_speed_multiplier(
    bat_speed: Optional[float], current_woba: Optional[float], rules: AdvisoryRules
) -> float:
    if bat_speed is None or current_woba is None:
        return 1.0
    if bat_speed >= rules.bat_speed_elite and current_woba < rules.bat_speed_woba_ceiling:
        return rules.bat_speed_multiplier
    return 1.0


def bat_speed_flag(
    bat_speed: Optional[float], current_woba: Optional[float], rules: AdvisoryRules
) -> Optional[AdvisoryFlag]:
    if bat_speed is None:
        return None
    if (
        bat_speed >= rules.bat_speed_elite
        and current_woba is not None
        and current_woba < rules.bat_speed_woba_ceiling
    ):
        return AdvisoryFlag(
            code="bat_speed_upside",
            severity="positive",
            message=f"Elite bat speed ({bat_speed:.1f} mph) with room to grow",
        )
    if bat_speed >= rules.bat_speed_plus:
        return AdvisoryFlag(
            code="bat_speed_plus", severity="positive", message=f"Plus bat speed ({bat_speed:.1f} mph)"
        )
    return None


def _swing_change(delta: Optional[float], age: Optional[int], rules: AdvisoryRules) -> bool:
    if delta is None or age is None:
        return False
    return delta >= rules.launch_angle_delta and age <= rules.launch_angle_max_age


def launch_angle_multiplier(delta: Optional[float], age: Optional[int], rules: AdvisoryRules) -> float:
    return rules.launch_angle_multiplier if _swing_change(delta, age, rules) else 1.0


def launch_angle_flag(delta: Optional[float], age: Optional[int], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if not _swing_change(delta, age, rules):
        return None
    return AdvisoryFlag(
        code="launch_angle_change",
        severity="positive",
        message=f"Launch angle up {delta:.1f} degrees, swing change in progress",
    )


def _pull_boost(pull_rate: Optional[float], year: Optional[int], rules: AdvisoryRules) -> bool:
    if pull_rate is None or year is None:
        return False
    return pull_rate > rules.pull_rate_threshold and year >= rules.shift_ban_year


def pull_rate_multiplier(pull_rate: Optional[float], year: Optional[int], rules: AdvisoryRules) -> float:
    return rules.pull_rate_multiplier if _pull_boost(pull_rate, year, rules) else 1.0


def pull_rate_flag(pull_rate: Optional[float], year: Optional[int], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if not _pull_boost(pull_rate, year, rules):
        return None
    return AdvisoryFlag(
        code="shift_ban_pull",
        severity="positive",
        message=f"Extreme pull hitter ({pull_rate:.1%}), shift ban beneficiary",
    )


def _sample_flag(pa: Optional[int], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if pa is None:
        return None
    if pa < rules.small_sample_pa:
        return AdvisoryFlag(code="small_sample", severity="high", message=f"Small sample ({pa} PA), high variance")
    if pa < rules.moderate_sample_pa:
        return AdvisoryFlag(
            code="moderate_sample", severity="medium", message=f"Moderate sample ({pa} PA), some uncertainty"
        )
    return None


def _age_flag(age: Optional[int], rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    if age is None or age < rules.veteran_age:
        return None
    severity = "high" if age >= rules.old_age else "medium"
    return AdvisoryFlag(code="age", severity=severity, message=f"Age {age}, breakouts rare for veterans")


def _extreme_surplus_flag(context: PlayerContext, rules: AdvisoryRules) -> Optional[AdvisoryFlag]:
    surplus, pa = context.xwoba_surplus, context.pa
    if surplus is None or pa is None:
        return None
    if surplus > rules.extreme_surplus and pa < rules.extreme_surplus_pa:
        return AdvisoryFlag(
            code="extreme_surplus",
            severity="medium",
            message=f"Extreme surplus (+{surplus:.3f}) on a small sample",
        )
    return None


def build_advisory(context: PlayerContext, *, year: int, rules: AdvisoryRules) -> AdvisoryReport:
    record = context.record
    career = career_context_flag(context, rules)

    risks: List[Optional[AdvisoryFlag]] = [
        _sample_flag(context.pa, rules),
        k_rate_flag(record.k_rate, rules),
        chase_rate_flag(record.chase_rate, rules),
        sophomore_slump_flag(context, rules),
        years_of_service_flag(context.years_in_mlb, rules),
        career if career is not None and career.severity != "positive" else None,
        _age_flag(context.age, rules),
        _extreme_surplus_flag(context, rules),
    ]
    positives: List[Optional[AdvisoryFlag]] = [
        career if career is not None and career.severity == "positive" else None,
        bat_speed_flag(record.bat_speed, context.current_woba, rules),
        launch_angle_flag(context.launch_angle_delta, context.age, rules),
        pull_rate_flag(record.pull_rate, year, rules),
    ]
    return AdvisoryReport(
        risks=[flag for flag in risks if flag is not None],
        positives=[flag for flag in positives if flag is not None],
        k_rate_penalty=k_rate_penalty(record.k_rate, rules),
        surplus_reliability=surplus_reliability(record.chase_rate, context.xwoba_surplus, rules),
        career_context=career_context_multiplier(context, rules),
        sophomore_slump=sophomore_slump_multiplier(context, rules),
        years_of_service=years_of_service_multiplier(context.years_in_mlb, rules),
        bat_speed_upside=bat_speed_multiplier(record.bat_speed, context.current_woba, rules),
        launch_angle_change=launch_angle_multiplier(context.launch_angle_delta, context.age, rules),
        pull_rate_boost=pull_rate_multiplier(record.pull_rate, year, rules),
    )
