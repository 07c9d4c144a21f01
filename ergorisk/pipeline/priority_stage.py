# ergorisk/pipeline/priority_stage.py

from ergorisk.models.context import Context
from ergorisk.risk.priority import identify_priority_areas


def run(ctx: Context) -> Context:
    ctx.priority_areas = identify_priority_areas(ctx.factors)
    return ctx
