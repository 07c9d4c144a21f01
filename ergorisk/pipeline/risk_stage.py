# ergorisk/pipeline/risk_stage.py
"""
RISK STAGE

Inputs:
    ctx.input, or ctx.assessment + ctx.profile

Outputs:
    ctx.scores       (posture / workspace / movement / symptoms, 0–100)
    ctx.risk_score   (weighted overall, 0–100 integer)
    ctx.risk_level   (low / moderate / high / critical)
    ctx.factors      (descending by score)
"""

from ergorisk.models.context import Context
from ergorisk.models.input_model import RiskCalculationInput
from ergorisk.models.risk_model import ComponentScores
from ergorisk.risk.aggregator import generate_risk_factors, overall_score, risk_level
from ergorisk.risk.movement_risk import calculate_movement_risk
from ergorisk.risk.posture_risk import calculate_posture_risk
from ergorisk.risk.symptom_risk import calculate_symptom_risk
from ergorisk.risk.workspace_risk import calculate_workspace_risk
from ergorisk.utils.logger import debug


def compute_component_scores(calc: RiskCalculationInput) -> ComponentScores:
    return ComponentScores(
        posture=calculate_posture_risk(calc.posture, calc.user_profile),
        workspace=calculate_workspace_risk(calc.workspace, calc.user_profile),
        movement=calculate_movement_risk(calc.movement),
        symptoms=calculate_symptom_risk(calc.symptoms),
    )


def run(ctx: Context) -> Context:
    if ctx.input is not None:
        calc = ctx.input
    elif ctx.assessment is not None and ctx.profile is not None:
        calc = RiskCalculationInput.from_assessment(ctx.assessment, ctx.profile)
    else:
        raise ValueError("risk_stage requires ctx.input or ctx.assessment + ctx.profile")

    scores = compute_component_scores(calc)

    ctx.input = calc
    ctx.scores = scores
    ctx.risk_score = overall_score(scores)
    ctx.risk_level = risk_level(ctx.risk_score)
    ctx.factors = generate_risk_factors(scores, calc.user_profile)

    debug(
        f"[RISK] posture={scores.posture:.1f} workspace={scores.workspace:.1f} "
        f"movement={scores.movement:.1f} symptoms={scores.symptoms:.1f} "
        f"→ overall={ctx.risk_score} ({ctx.risk_level.value}), factors={len(ctx.factors)}"
    )
    return ctx
