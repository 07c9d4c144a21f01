# ergorisk/trends/trend_analyzer.py
"""
Risk trend over historical overall scores.

Lower score = healthier, so a falling score is "improving".
"""

from typing import Sequence

from ergorisk.models.trend_model import Improvement, ScorePoint, Trend, TrendResult
from ergorisk.utils.numeric import round_half_up

STABILITY_THRESHOLD = 5
SECONDS_PER_DAY = 60 * 60 * 24
DAYS_PER_MONTH = 30


def classify_change(change: float) -> Trend:
    if abs(change) < STABILITY_THRESHOLD:
        return Trend.STABLE
    if change < 0:
        return Trend.IMPROVING
    return Trend.DECLINING


def analyze_trend(history: Sequence[ScorePoint]) -> TrendResult:
    """
    Fewer than two points is not an error: stable, zero rates.
    """
    if len(history) < 2:
        return TrendResult(
            trend=Trend.STABLE,
            change_rate=0.0,
            risk_progression=list(history),
            improvement_rate=0.0,
        )

    # sorted() is stable, same-date points keep caller order
    ordered = sorted(history, key=lambda p: p.date)
    first, last = ordered[0], ordered[-1]

    total_change = last.score - first.score
    elapsed_days = (last.date - first.date).total_seconds() / SECONDS_PER_DAY

    if elapsed_days > 0:
        change_rate = abs(total_change) / elapsed_days
        monthly = (first.score - last.score) / elapsed_days * DAYS_PER_MONTH
        improvement_rate = round_half_up(monthly * 100) / 100
    else:
        change_rate = 0.0
        improvement_rate = 0.0

    return TrendResult(
        trend=classify_change(total_change),
        change_rate=change_rate,
        risk_progression=ordered,
        improvement_rate=improvement_rate,
    )


def calculate_improvement(previous_score: float, current_score: float) -> Improvement:
    """
    Percent change against the previous score. The percentage is reported
    unsigned; direction is carried by the trend. Previous score 0 → 0%.
    """
    if previous_score > 0:
        percentage = round_half_up((current_score - previous_score) / previous_score * 100)
    else:
        percentage = 0

    return Improvement(percentage=abs(percentage), trend=classify_change(percentage))
