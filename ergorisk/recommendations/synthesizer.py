# ergorisk/recommendations/synthesizer.py
"""
Deterministic recommendation synthesis.

Network-free path used whenever no external generator is configured or the
generator fails. Same (assessment, analysis) in → same list out, ids
included.
"""

from typing import List

from ergorisk.models.input_model import Assessment, LightingQuality
from ergorisk.models.recommendation_model import Recommendation
from ergorisk.models.risk_model import FactorCategory, RiskAnalysis, RiskLevel
from ergorisk.recommendations.templates import recommendation_template
from ergorisk.utils.logger import debug

MAX_RECOMMENDATIONS = 8

URGENT_LEVELS = (RiskLevel.HIGH, RiskLevel.CRITICAL)

# Categories without an entry (time, environment) emit nothing
FACTOR_TEMPLATES = {
    FactorCategory.POSTURE: "posture",
    FactorCategory.MOVEMENT: "movement",
    FactorCategory.EQUIPMENT: "equipment",
}

MIN_SCREEN_BREAKS_PER_HOUR = 2
DIM_LIGHTING = (LightingQuality.POOR, LightingQuality.FAIR)


def _template_keys(assessment: Assessment, analysis: RiskAnalysis) -> List[str]:
    keys: List[str] = []

    # -------------------------------------------------
    # One template per high / critical factor
    # -------------------------------------------------
    for factor in analysis.factors:
        if factor.severity not in URGENT_LEVELS:
            continue
        key = FACTOR_TEMPLATES.get(factor.category)
        if key:
            keys.append(key)

    # -------------------------------------------------
    # Common issues read straight from the assessment
    # -------------------------------------------------
    if assessment.movement_patterns.screen_break_frequency < MIN_SCREEN_BREAKS_PER_HOUR:
        keys.append("screen_breaks")

    if not assessment.workspace_setup.lumbar_support:
        keys.append("lumbar_support")

    if assessment.workspace_setup.lighting_quality in DIM_LIGHTING:
        keys.append("lighting")

    return keys


def synthesize_recommendations(assessment: Assessment, analysis: RiskAnalysis) -> List[Recommendation]:
    keys = _template_keys(assessment, analysis)
    recommendations = [
        recommendation_template(key, f"rec_{i}") for i, key in enumerate(keys)
    ]
    if len(recommendations) > MAX_RECOMMENDATIONS:
        debug(f"[SYNTH] truncating {len(recommendations)} recommendations to {MAX_RECOMMENDATIONS}")
    return recommendations[:MAX_RECOMMENDATIONS]
