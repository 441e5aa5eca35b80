"""REST API for the breakout scoring engine."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Sequence

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile

from pybreakout.api.schemas import (
    AdvisoryFlagResponse,
    MergeReportResponse,
    ModelListResponse,
    ModelResponse,
    PlayerScoreResponse,
    ScoreFilterRequest,
    ScoreRequest,
    ScoreResponse,
    ScoreSummaryResponse,
)
from pybreakout.config import ScoringConfig, iter_configs
from pybreakout.config_loader import default_prediction_year, resolve_config
from pybreakout.datasets import historical_rows
from pybreakout.engine import score_cohort
from pybreakout.ingest import MergeReport, merge_leaderboards, parse_leaderboard_text
from pybreakout.ingest.savant import EXPECTED_REQUIRED_COLUMNS
from pybreakout.models import RankedPlayer
from pybreakout.views import FilterCriteria, FilterResult, filter_ranked


logger = logging.getLogger(__name__)

_ADVISORY_MULTIPLIERS = (
    "k_rate_penalty",
    "surplus_reliability",
    "career_context",
    "sophomore_slump",
    "years_of_service",
    "bat_speed_upside",
    "launch_angle_change",
    "pull_rate_boost",
)


def _model_to_response(config: ScoringConfig, *, default_version: str) -> ModelResponse:
    return ModelResponse(
        version=config.version,
        default=config.version == default_version,
        weights=dict(config.weights),
        neutral_score=config.neutral_score,
        quality_tiers={label: minimum for minimum, label in config.quality_tiers},
        confidence_tiers={label: minimum for minimum, label in config.confidence_tiers},
    )


def _player_to_response(ranked: RankedPlayer, rank: int) -> PlayerScoreResponse:
    record = ranked.player
    advisory = ranked.advisory
    outlook = ranked.outlook
    return PlayerScoreResponse(
        rank=rank,
        name=record.name,
        team=record.team,
        position=record.position,
        age=record.age,
        pa=record.pa,
        breakout_score=ranked.breakout_score,
        raw_score=ranked.adjustments.raw_score,
        tier=ranked.tier,
        confidence=ranked.confidence,
        age_multiplier=ranked.adjustments.age,
        sample_multiplier=ranked.adjustments.sample_size,
        elite_multiplier=ranked.adjustments.elite_profile,
        applied_rules=list(ranked.adjustments.applied_rules),
        normalized=dict(ranked.normalized),
        risks=[AdvisoryFlagResponse(**flag.model_dump()) for flag in advisory.risks],
        positives=[AdvisoryFlagResponse(**flag.model_dump()) for flag in advisory.positives],
        advisory_multipliers={name: getattr(advisory, name) for name in _ADVISORY_MULTIPLIERS},
        projected_woba=outlook.projected_woba,
        projected_wrc_plus=outlook.projected_wrc_plus,
        projected_home_runs=outlook.projected_home_runs,
        breakout_types=list(outlook.breakout_types),
        likelihood=outlook.likelihood,
        likelihood_pct=outlook.likelihood_pct,
        realized_breakout=outlook.realized_breakout,
        actual_result=record.actual_result,
    )


def _criteria_from_request(filters: ScoreFilterRequest | None) -> FilterCriteria:
    if filters is None:
        return FilterCriteria()
    return FilterCriteria(
        position=filters.position,
        team=filters.team,
        min_age=filters.min_age,
        max_age=filters.max_age,
        min_score=filters.min_score,
        tiers=tuple(filters.tiers or ()),
        limit=filters.limit,
    )


def _build_response(
    *,
    year: int,
    config: ScoringConfig,
    cohort_size: int,
    result: FilterResult,
    report: MergeReport | None = None,
) -> ScoreResponse:
    summary = result.summary
    return ScoreResponse(
        year=year,
        model=config.version,
        cohort_size=cohort_size,
        summary=ScoreSummaryResponse(
            available_players=summary.available_players,
            selected_players=summary.selected_players,
            score_mean=summary.score_mean,
            score_median=summary.score_median,
            score_std=summary.score_std,
            tier_counts=summary.tier_counts,
        ),
        players=[_player_to_response(entry.player, entry.rank) for entry in result.players],
        report=MergeReportResponse(**asdict(report)) if report is not None else None,
    )


def _resolve_model(model: str | None) -> ScoringConfig:
    try:
        return resolve_config(model)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown model version: {model}") from exc


def _score(cohort: Sequence[Any], *, year: int, config: ScoringConfig) -> list[RankedPlayer]:
    try:
        return score_cohort(cohort, year=year, config=config)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def create_app() -> FastAPI:
    app = FastAPI(title="pybreakout")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/models", response_model=ModelListResponse)
    async def list_models() -> ModelListResponse:
        default_version = resolve_config().version
        return ModelListResponse(
            default=default_version,
            models=[_model_to_response(config, default_version=default_version) for config in iter_configs()],
        )

    @app.get("/models/{version}", response_model=ModelResponse)
    async def get_model(version: str) -> ModelResponse:
        config = _resolve_model(version)
        return _model_to_response(config, default_version=resolve_config().version)

    @app.get("/scores/{year}", response_model=ScoreResponse)
    async def historical_scores(
        year: int,
        model: str | None = Query(None),
        position: str | None = Query(None),
        team: str | None = Query(None),
        min_age: int | None = Query(None, ge=0),
        max_age: int | None = Query(None, ge=0),
        limit: int | None = Query(None, ge=1, le=500),
    ) -> ScoreResponse:
        config = _resolve_model(model)
        try:
            rows = historical_rows(year)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"No curated cohort for {year}") from exc
        ranked = _score(rows, year=year, config=config)
        criteria = FilterCriteria(position=position, team=team, min_age=min_age, max_age=max_age, limit=limit)
        return _build_response(
            year=year,
            config=config,
            cohort_size=len(rows),
            result=filter_ranked(ranked, criteria),
        )

    @app.post("/scores", response_model=ScoreResponse)
    async def score_players(payload: ScoreRequest) -> ScoreResponse:
        config = _resolve_model(payload.model)
        year = payload.year or default_prediction_year()
        ranked = _score(payload.players, year=year, config=config)
        return _build_response(
            year=year,
            config=config,
            cohort_size=len(payload.players),
            result=filter_ranked(ranked, _criteria_from_request(payload.filters)),
        )

    @app.post("/scores/upload", response_model=ScoreResponse)
    async def score_upload(
        expected: UploadFile = File(...),
        year: int | None = Form(None),
        model: str | None = Form(None),
        limit: int | None = Form(None),
    ) -> ScoreResponse:
        config = _resolve_model(model)
        year = year or default_prediction_year()
        contents = await expected.read()
        if not contents:
            raise HTTPException(status_code=400, detail="expected statistics file is empty")
        try:
            rows = parse_leaderboard_text(
                contents.decode("utf-8-sig"),
                source=expected.filename or "upload",
                required=EXPECTED_REQUIRED_COLUMNS,
            )
            records, report = merge_leaderboards(rows, year=year)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        ranked = _score(records, year=year, config=config)
        logger.info("Scored upload %s: %d rows, %d ranked", expected.filename, report.total_rows, len(ranked))
        return _build_response(
            year=year,
            config=config,
            cohort_size=len(records),
            result=filter_ranked(ranked, FilterCriteria(limit=limit)),
            report=report,
        )

    return app

