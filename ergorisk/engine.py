# ergorisk/engine.py
"""
Public entry points of the ergonomics risk engine.

Every function is pure over its arguments: no shared state, no I/O other
than logging. Raw dicts are accepted wherever a model is expected and are
validated here; invalid input raises InvalidAssessmentError.
"""

from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ergorisk.exceptions import InvalidAssessmentError
from ergorisk.models.context import Context
from ergorisk.models.input_model import Assessment, RiskCalculationInput, UserProfileSnapshot
from ergorisk.models.progress_model import HealthMetric, MetricsSummary, ProgressReport
from ergorisk.models.recommendation_model import (
    Recommendation,
    RecommendationFilters,
    RecommendationSet,
)
from ergorisk.models.report_model import ReportModel
from ergorisk.models.risk_model import RiskAnalysis
from ergorisk.models.trend_model import (
    AssessmentComparison,
    Improvement,
    ScoredAssessment,
    ScorePoint,
    TrendResult,
)
from ergorisk.pipeline import priority_stage, recommendation_stage, report_stage, risk_engine, risk_stage
from ergorisk.recommendations import generator as generator_mod
from ergorisk.recommendations import ranking, synthesizer
from ergorisk.recommendations.generator import RecommendationGenerator
from ergorisk.risk.summary import summarize_risk
from ergorisk.trends.comparison import compare_assessments
from ergorisk.trends.progress import DEFAULT_WINDOW_DAYS, summarize_metrics, track_progress
from ergorisk.trends.trend_analyzer import analyze_trend, calculate_improvement
from ergorisk.utils.logger import debug

M = TypeVar("M", bound=BaseModel)


# ---------------------------------------------------------
# Boundary validation
# ---------------------------------------------------------
def _coerce(model_cls: Type[M], value: Any, what: str) -> M:
    if isinstance(value, model_cls):
        return value
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        raise InvalidAssessmentError(f"Invalid {what}: {e}") from e


def _coerce_all(model_cls: Type[M], values: Sequence[Any], what: str) -> List[M]:
    return [_coerce(model_cls, v, what) for v in values]


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def _analyze(ctx: Context) -> Context:
    ctx = risk_stage.run(ctx)
    ctx = priority_stage.run(ctx)
    ctx = risk_engine.run(ctx)
    return ctx


# ---------------------------------------------------------
# Scoring
# ---------------------------------------------------------
def score(
    assessment: Union[Assessment, Mapping[str, Any]],
    profile: Union[UserProfileSnapshot, Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> RiskAnalysis:
    ctx = Context(
        assessment=_coerce(Assessment, assessment, "assessment"),
        profile=_coerce(UserProfileSnapshot, profile, "user profile"),
        now=_now(now),
    )
    return _analyze(ctx).analysis


def score_input(
    calc_input: Union[RiskCalculationInput, Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> RiskAnalysis:
    """Score a RiskCalculationInput the caller assembled itself."""
    ctx = Context(
        input=_coerce(RiskCalculationInput, calc_input, "risk calculation input"),
        now=_now(now),
    )
    return _analyze(ctx).analysis


def summarize(analysis: Union[RiskAnalysis, Mapping[str, Any]]) -> str:
    return summarize_risk(_coerce(RiskAnalysis, analysis, "risk analysis"))


# ---------------------------------------------------------
# History
# ---------------------------------------------------------
def compare(
    previous: Union[ScoredAssessment, Mapping[str, Any]],
    current: Union[ScoredAssessment, Mapping[str, Any]],
) -> AssessmentComparison:
    return compare_assessments(
        _coerce(ScoredAssessment, previous, "previous assessment"),
        _coerce(ScoredAssessment, current, "current assessment"),
    )


def trend(history: Sequence[Union[ScorePoint, Mapping[str, Any]]]) -> TrendResult:
    return analyze_trend(_coerce_all(ScorePoint, history, "score point"))


def improvement(previous_score: float, current_score: float) -> Improvement:
    return calculate_improvement(previous_score, current_score)


def progress(
    history: Sequence[Union[ScorePoint, Mapping[str, Any]]],
    now: Optional[datetime] = None,
) -> ProgressReport:
    return track_progress(_coerce_all(ScorePoint, history, "score point"), _now(now))


def metrics_summary(
    metrics: Sequence[Union[HealthMetric, Mapping[str, Any]]],
    now: Optional[datetime] = None,
    days: int = DEFAULT_WINDOW_DAYS,
) -> MetricsSummary:
    if days <= 0:
        raise InvalidAssessmentError(f"Invalid window: days must be positive, got {days}")
    return summarize_metrics(_coerce_all(HealthMetric, metrics, "health metric"), _now(now), days)


# ---------------------------------------------------------
# Recommendations
# ---------------------------------------------------------
def synthesize_recommendations(
    assessment: Union[Assessment, Mapping[str, Any]],
    analysis: Union[RiskAnalysis, Mapping[str, Any]],
) -> List[Recommendation]:
    return synthesizer.synthesize_recommendations(
        _coerce(Assessment, assessment, "assessment"),
        _coerce(RiskAnalysis, analysis, "risk analysis"),
    )


def generate_recommendations(
    assessment: Union[Assessment, Mapping[str, Any]],
    analysis: Union[RiskAnalysis, Mapping[str, Any]],
    generator: Optional[RecommendationGenerator] = None,
    now: Optional[datetime] = None,
) -> RecommendationSet:
    return generator_mod.generate_recommendations(
        _coerce(Assessment, assessment, "assessment"),
        _coerce(RiskAnalysis, analysis, "risk analysis"),
        generator=generator,
        now=now,
    )


def filter_recommendations(
    recommendations: Sequence[Union[Recommendation, Mapping[str, Any]]],
    filters: Optional[Union[RecommendationFilters, Mapping[str, Any]]] = None,
) -> List[Recommendation]:
    recs = _coerce_all(Recommendation, recommendations, "recommendation")
    if filters is not None:
        filters = _coerce(RecommendationFilters, filters, "recommendation filters")
    return ranking.filter_recommendations(recs, filters)


def rank_recommendations(
    recommendations: Sequence[Union[Recommendation, Mapping[str, Any]]],
) -> List[Recommendation]:
    return ranking.rank_recommendations(_coerce_all(Recommendation, recommendations, "recommendation"))


# ---------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------
def build_report(
    assessment: Union[Assessment, Mapping[str, Any]],
    profile: Union[UserProfileSnapshot, Mapping[str, Any]],
    generator: Optional[RecommendationGenerator] = None,
    now: Optional[datetime] = None,
) -> ReportModel:
    """
    score → priorities → recommendations (generator or fallback) → report.
    """
    ctx = Context(
        assessment=_coerce(Assessment, assessment, "assessment"),
        profile=_coerce(UserProfileSnapshot, profile, "user profile"),
        now=_now(now),
    )
    ctx = _analyze(ctx)
    ctx = recommendation_stage.run(ctx, generator=generator)
    ctx = report_stage.run(ctx)

    debug(f"[REPORT] assessment={ctx.assessment.id} score={ctx.analysis.risk_score}")
    return ctx.report
