# ergorisk/pipeline/recommendation_stage.py

from typing import Optional

from ergorisk.models.context import Context
from ergorisk.recommendations.generator import RecommendationGenerator, generate_recommendations


def run(ctx: Context, generator: Optional[RecommendationGenerator] = None) -> Context:
    """
    Consumes ctx.analysis ONLY for risk information; the raw assessment is
    read for the conditional templates (breaks, lumbar support, lighting).
    """
    if ctx.analysis is None or ctx.assessment is None:
        raise ValueError("recommendation_stage requires ctx.assessment and ctx.analysis")

    ctx.recommendation_set = generate_recommendations(
        ctx.assessment, ctx.analysis, generator=generator, now=ctx.now
    )
    return ctx
