# ergorisk/risk/summary.py

from typing import List

from ergorisk.models.risk_model import RiskAnalysis, RiskLevel
from ergorisk.recommendations.templates import risk_level_guidance

TOP_CONCERNS = 3


def primary_concerns(analysis: RiskAnalysis) -> List[str]:
    return [
        f.name
        for f in analysis.factors
        if f.severity in (RiskLevel.HIGH, RiskLevel.CRITICAL)
    ][:TOP_CONCERNS]


def summarize_risk(analysis: RiskAnalysis) -> str:
    """
    Plain-text summary of one analysis:

      Risk Level: HIGH (Score: 62/100)
      <level description>
      Primary concerns: <up to three high/critical factor names>
      Recommended action timeframe: <urgency>
    """
    guidance = risk_level_guidance(analysis.overall_risk)

    parts = [
        f"Risk Level: {analysis.overall_risk.value.upper()} (Score: {analysis.risk_score}/100)",
        guidance.description,
    ]

    concerns = primary_concerns(analysis)
    if concerns:
        parts.append(f"Primary concerns: {', '.join(concerns)}")

    parts.append(f"Recommended action timeframe: {guidance.urgency}")
    return "\n\n".join(parts)
