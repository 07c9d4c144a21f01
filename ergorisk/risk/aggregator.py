# ergorisk/risk/aggregator.py
"""
Combine the four sub-model scores into one weighted overall score and
risk level, and emit the ranked list of discrete risk factors.
"""

from typing import List

from ergorisk.models.input_model import UserProfileSnapshot
from ergorisk.models.risk_model import (
    ComponentScores,
    FactorCategory,
    RiskFactor,
    RiskLevel,
)
from ergorisk.utils.numeric import clamp, round_half_up

WEIGHTS = {
    "posture": 0.30,
    "workspace": 0.25,
    "movement": 0.25,
    "symptoms": 0.20,
}

# Lower bound inclusive: 25 → moderate, 50 → high, 75 → critical
LEVEL_BANDS = (
    (25, RiskLevel.LOW),
    (50, RiskLevel.MODERATE),
    (75, RiskLevel.HIGH),
)

FACTOR_THRESHOLD = 25

STANDARD_HOURS = 8
LONG_HOURS = 10
POINTS_PER_EXTRA_HOUR = 15

DISCOMFORT_FACTOR_NAME = "Existing Discomfort/Pain"


def risk_level(score: float) -> RiskLevel:
    for upper, level in LEVEL_BANDS:
        if score < upper:
            return level
    return RiskLevel.CRITICAL


def overall_score(scores: ComponentScores) -> int:
    weighted = sum(getattr(scores, name) * weight for name, weight in WEIGHTS.items())
    return round_half_up(clamp(weighted))


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


def generate_risk_factors(scores: ComponentScores, profile: UserProfileSnapshot) -> List[RiskFactor]:
    """
    Emission order: posture, workspace, movement, time, discomfort.
    Returned descending by score; equal scores keep emission order.
    """
    factors: List[RiskFactor] = []

    if scores.posture > FACTOR_THRESHOLD:
        factors.append(RiskFactor(
            category=FactorCategory.POSTURE,
            name="Poor Posture Alignment",
            severity=risk_level(scores.posture),
            score=scores.posture,
            description="Current posture deviates significantly from ergonomic guidelines",
            impact="May lead to neck, back, and shoulder strain over time",
        ))

    if scores.workspace > FACTOR_THRESHOLD:
        factors.append(RiskFactor(
            category=FactorCategory.EQUIPMENT,
            name="Suboptimal Workspace Setup",
            severity=risk_level(scores.workspace),
            score=scores.workspace,
            description="Workspace configuration does not support proper ergonomics",
            impact="Increases risk of musculoskeletal disorders and eye strain",
        ))

    if scores.movement > FACTOR_THRESHOLD:
        factors.append(RiskFactor(
            category=FactorCategory.MOVEMENT,
            name="Insufficient Movement Patterns",
            severity=risk_level(scores.movement),
            score=scores.movement,
            description="Limited movement and breaks during work hours",
            impact="May cause muscle stiffness, reduced circulation, and fatigue",
        ))

    hours = profile.work_hours_per_day
    if hours > STANDARD_HOURS:
        factors.append(RiskFactor(
            category=FactorCategory.TIME,
            name="Extended Work Hours",
            severity=RiskLevel.HIGH if hours > LONG_HOURS else RiskLevel.MODERATE,
            score=clamp((hours - STANDARD_HOURS) * POINTS_PER_EXTRA_HOUR),
            description=f"Working {_format_hours(hours)} hours per day exceeds recommendations",
            impact="Prolonged exposure increases all ergonomic risks",
        ))

    if scores.symptoms > 0:
        factors.append(RiskFactor(
            category=FactorCategory.POSTURE,
            name=DISCOMFORT_FACTOR_NAME,
            severity=risk_level(scores.symptoms),
            score=scores.symptoms,
            description="Reported symptoms indicate current ergonomic issues",
            impact="Existing symptoms may worsen without intervention",
        ))

    # sorted() is stable, so ties keep emission order
    return sorted(factors, key=lambda f: f.score, reverse=True)
