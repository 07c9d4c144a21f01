# ergorisk/pipeline/report_stage.py

from datetime import datetime
from typing import Optional

from ergorisk.models.context import Context
from ergorisk.models.recommendation_model import (
    RecommendationCategory,
    RecommendationPriority,
    RecommendationSet,
)
from ergorisk.models.report_model import ReportModel
from ergorisk.models.risk_model import RiskAnalysis

TOP_FINDINGS = 3

# Checked in order: score > threshold → sentence
NEXT_STEPS = (
    (75, "Immediate intervention required to prevent injury."),
    (50, "Proactive measures recommended to reduce risk."),
    (25, "Minor adjustments will optimize ergonomic setup."),
)
NEXT_STEPS_DEFAULT = "Continue current practices with regular monitoring."


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------
def next_steps(score: float) -> str:
    for threshold, sentence in NEXT_STEPS:
        if score > threshold:
            return sentence
    return NEXT_STEPS_DEFAULT


def _format_date(value: Optional[datetime]) -> str:
    return value.date().isoformat() if value else "Not recorded"


def executive_summary(
    analysis: RiskAnalysis,
    recommendation_set: RecommendationSet,
    assessment_date: Optional[datetime] = None,
) -> str:
    recs = recommendation_set.recommendations
    top = ", ".join(f.name for f in analysis.factors[:TOP_FINDINGS])
    urgent = sum(
        1 for r in recs
        if r.priority in (RecommendationPriority.HIGH, RecommendationPriority.CRITICAL)
    )
    immediate = sum(1 for r in recs if r.category == RecommendationCategory.IMMEDIATE)

    findings = (
        f"Primary risk factors identified: {top}"
        if analysis.factors
        else "No significant risk factors identified."
    )
    origin = (
        "enhanced with AI-powered analysis"
        if recommendation_set.ai_generated
        else "generated using standard protocols"
    )

    return "\n".join([
        "ERGONOMIC ASSESSMENT EXECUTIVE SUMMARY",
        "",
        f"Assessment Date: {_format_date(assessment_date)}",
        f"Overall Risk Level: {analysis.overall_risk.value.upper()}",
        f"Risk Score: {analysis.risk_score}/100",
        "",
        "KEY FINDINGS:",
        findings,
        "",
        "RECOMMENDATIONS:",
        f"- Total recommendations: {len(recs)}",
        f"- High priority actions: {urgent}",
        f"- Immediate actions required: {immediate}",
        "",
        "NEXT STEPS:",
        next_steps(analysis.risk_score),
        "",
        f"This assessment was {origin}.",
    ])


# ---------------------------------------------------------
# Main Report Builder
# ---------------------------------------------------------
def run(ctx: Context) -> Context:
    if ctx.assessment is None or ctx.analysis is None or ctx.recommendation_set is None:
        raise ValueError("report_stage requires analysis and recommendations")

    ctx.report = ReportModel(
        assessment_id=ctx.assessment.id,
        executive_summary=executive_summary(
            ctx.analysis, ctx.recommendation_set, ctx.assessment.assessment_date
        ),
        risk_analysis=ctx.analysis,
        recommendations=ctx.recommendation_set,
        generated_date=ctx.now,
    )
    return ctx
