"""
Risk Engine: assembly stage

Plumbing only:
1) Lift the risk-stage and priority-stage outputs into one RiskAnalysis
2) Never infer or invent risk
"""

from ergorisk.models.context import Context
from ergorisk.models.risk_model import RiskAnalysis


def run(ctx: Context) -> Context:
    ctx.analysis = RiskAnalysis(
        assessment_id=ctx.assessment.id if ctx.assessment else None,
        overall_risk=ctx.risk_level,
        risk_score=ctx.risk_score,
        factors=list(ctx.factors),
        priority_areas=list(ctx.priority_areas),
        component_scores=ctx.scores,
        analysis_date=ctx.now,
    )
    return ctx
