# ergorisk/trends/progress.py
"""
Health-metric summaries and risk-score progress tracking.

Metric readings are 0-10. Lower pain is better; for every other metric
higher is better. Risk scores follow the engine convention (lower = better).
"""

from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Sequence

from ergorisk.models.progress_model import (
    HealthMetric,
    LatestReading,
    MetricsSummary,
    MetricType,
    Milestone,
    ProgressReport,
)
from ergorisk.models.trend_model import ScorePoint, Trend
from ergorisk.utils.dates import as_utc
from ergorisk.utils.numeric import clamp, require_exhaustive, round_half_up

DEFAULT_WINDOW_DAYS = 30

# Negative weight: a higher reading lowers wellbeing
WELLBEING_WEIGHTS = require_exhaustive({
    MetricType.PAIN_LEVEL: -0.3,
    MetricType.COMFORT_SCORE: 0.25,
    MetricType.PRODUCTIVITY: 0.2,
    MetricType.ENERGY_LEVEL: 0.15,
    MetricType.SLEEP_QUALITY: 0.1,
}, MetricType, "WELLBEING_WEIGHTS")

NEUTRAL_WELLBEING = 5.0
METRIC_TREND_THRESHOLD = 0.5

MILESTONE_DROP = 10


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


# ---------------------------------------------------------
# Health metrics
# ---------------------------------------------------------
def wellbeing_score(averages: Mapping[MetricType, float]) -> float:
    """
    Signed weighted mean of the metric averages, 0-10, one decimal.
    No averages → neutral 5.
    """
    weighted = 0.0
    total_weight = 0.0
    for metric_type, value in averages.items():
        weight = WELLBEING_WEIGHTS[MetricType(metric_type)]
        weighted += value * weight
        total_weight += abs(weight)

    score = weighted / total_weight if total_weight > 0 else NEUTRAL_WELLBEING
    return clamp(_one_decimal(score), 0, 10)


def metric_trend(metric_type: MetricType, difference: float) -> Trend:
    """difference = later-half mean minus earlier-half mean."""
    if metric_type == MetricType.PAIN_LEVEL:
        difference = -difference
    if difference > METRIC_TREND_THRESHOLD:
        return Trend.IMPROVING
    if difference < -METRIC_TREND_THRESHOLD:
        return Trend.DECLINING
    return Trend.STABLE


def summarize_metrics(
    metrics: Sequence[HealthMetric],
    now: datetime,
    days: int = DEFAULT_WINDOW_DAYS,
) -> MetricsSummary:
    """
    Per-metric averages, trends and latest readings over the last `days`.

    The trend compares readings before and after the window midpoint; a
    metric with no readings in one of the halves is stable.
    """
    now = as_utc(now)
    cutoff = now - timedelta(days=days)
    midpoint = cutoff + (now - cutoff) / 2
    recent = [m for m in metrics if m.recorded_date >= cutoff]

    averages: Dict[MetricType, float] = {}
    trends: Dict[MetricType, Trend] = {}
    latest: Dict[MetricType, LatestReading] = {}

    for metric_type in MetricType:
        readings = [m for m in recent if m.metric_type == metric_type]
        if not readings:
            continue

        averages[metric_type] = _one_decimal(_mean([m.value for m in readings]))

        earlier = [m.value for m in readings if m.recorded_date < midpoint]
        later = [m.value for m in readings if m.recorded_date >= midpoint]
        if earlier and later:
            trends[metric_type] = metric_trend(metric_type, _mean(later) - _mean(earlier))
        else:
            trends[metric_type] = Trend.STABLE

        newest = max(readings, key=lambda m: m.recorded_date)
        latest[metric_type] = LatestReading(value=newest.value, recorded_date=newest.recorded_date)

    return MetricsSummary(
        timeframe_days=days,
        total_entries=len(recent),
        averages=averages,
        trends=trends,
        latest=latest,
        wellbeing_score=wellbeing_score(averages),
    )


# ---------------------------------------------------------
# Risk-score progress
# ---------------------------------------------------------
def track_progress(history: Sequence[ScorePoint], now: datetime) -> ProgressReport:
    """
    Baseline is the earliest score. improvement is the signed percent drop
    from baseline (positive = less risk). Every assessment at least
    MILESTONE_DROP points below baseline is a milestone, oldest first.
    """
    now = as_utc(now)
    if not history:
        return ProgressReport(current_date=now)

    ordered = sorted(history, key=lambda p: p.date)
    initial, current = ordered[0].score, ordered[-1].score

    improvement = (
        round_half_up((initial - current) / initial * 100) if initial > 0 else 0
    )

    milestones: List[Milestone] = [
        Milestone(
            date=p.date,
            achievement=f"Risk score improved to {p.score:g}",
            score=p.score,
        )
        for p in ordered
        if initial - p.score >= MILESTONE_DROP
    ]

    return ProgressReport(
        start_date=ordered[0].date,
        current_date=now,
        initial_score=initial,
        current_score=current,
        improvement=improvement,
        milestones=milestones,
    )
