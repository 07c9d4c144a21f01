# ergorisk/recommendations/prompt.py
"""
Structured summary handed to an external recommendation generator.

The engine never calls a generator itself over the network; adapters use
SYSTEM_PROMPT + build_generator_prompt() and return the reply text to
generator.generate_recommendations().
"""

from typing import List

from ergorisk.models.input_model import Assessment, SymptomSeverity, UserProfileSnapshot
from ergorisk.models.risk_model import RiskAnalysis

SYSTEM_PROMPT = """You are an expert ergonomist and occupational health specialist. Generate personalized ergonomic recommendations based on workplace assessments. Your recommendations should be:

1. Specific and actionable
2. Prioritized by urgency and impact
3. Cost-effective when possible
4. Evidence-based
5. Tailored to the individual's specific situation

Return ONLY a valid JSON object with the following structure:
{
  "recommendations": [
    {
      "category": "immediate|short-term|long-term",
      "priority": "low|medium|high|critical",
      "type": "posture|equipment|movement|environment|behavior",
      "title": "Brief descriptive title",
      "description": "Detailed explanation of the recommendation",
      "actionSteps": ["Step 1", "Step 2", "Step 3"],
      "expectedBenefit": "What improvement to expect",
      "timeframe": "How long to implement",
      "estimatedCost": "free|low|medium|high",
      "implementationDifficulty": "easy|medium|hard"
    }
  ]
}"""


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _num(value: float) -> str:
    return f"{value:g}"


def build_generator_prompt(
    assessment: Assessment,
    analysis: RiskAnalysis,
    profile: UserProfileSnapshot,
) -> str:
    ws = assessment.workspace_setup
    posture = assessment.posture_data
    movement = assessment.movement_patterns

    factor_lines = [
        f"- {f.name} ({f.severity.value}): {f.description}" for f in analysis.factors
    ]
    symptom_lines = [
        f"- {s.area.value}: {s.severity.value} severity, {s.frequency.value} frequency"
        for s in assessment.symptoms
        if s.severity != SymptomSeverity.NONE
    ]

    lines: List[str] = [
        "ERGONOMIC ASSESSMENT ANALYSIS",
        "",
        "USER PROFILE:",
        f"- Age: {_num(profile.age)}, Height: {_num(profile.height)}cm, Weight: {_num(profile.weight)}kg",
        f"- Work Hours: {_num(profile.work_hours_per_day)} hours/day",
        "",
        "CURRENT RISK ASSESSMENT:",
        f"- Overall Risk Level: {analysis.overall_risk.value}",
        f"- Risk Score: {analysis.risk_score}/100",
        "",
        "IDENTIFIED RISK FACTORS:",
        *(factor_lines or ["- None above threshold"]),
        "",
        "WORKSPACE SETUP:",
        f"- Desk Height: {_num(ws.desk_height)}cm",
        f"- Chair Height: {_num(ws.chair_height)}cm",
        f"- Monitor Distance: {_num(ws.monitor_distance)}cm",
        f"- Monitor Height: {_num(ws.monitor_height)}cm relative to eye level",
        f"- Keyboard: {ws.keyboard_position.value}",
        f"- Mouse: {ws.mouse_position.value}",
        f"- Lumbar Support: {_yes_no(ws.lumbar_support)}",
        f"- Armrest Support: {_yes_no(ws.armrest_support)}",
        f"- Foot Support: {_yes_no(ws.foot_support)}",
        f"- Lighting: {ws.lighting_quality.value}",
        f"- Noise Level: {ws.noise_level.value}",
        "",
        "CURRENT POSTURE:",
        f"- Neck Angle: {_num(posture.neck_angle)}° from neutral",
        f"- Shoulder Position: {posture.shoulder_position.value}",
        f"- Back Curvature: {posture.back_curvature.value}",
        f"- Elbow Angle: {_num(posture.elbow_angle)}°",
        f"- Wrist Position: {posture.wrist_position.value}",
        f"- Hip Angle: {_num(posture.hip_angle)}°",
        f"- Feet Position: {posture.feet_position.value}",
        "",
        "MOVEMENT PATTERNS:",
        f"- Screen Breaks: {_num(movement.screen_break_frequency)} per hour",
        f"- Stretching: {_num(movement.stretching_frequency)} times per day",
        f"- Walking: {_num(movement.walking_frequency)} times per hour",
        f"- Posture Changes: {_num(movement.posture_changes)} per hour",
        "",
        "REPORTED SYMPTOMS:",
        *(symptom_lines or ["No significant symptoms reported"]),
        "",
        "PRIORITY AREAS:",
        *(f"- {p}" for p in analysis.priority_areas),
        "",
        "Please generate 8-12 specific, actionable recommendations addressing the "
        "highest-risk areas first. Focus on:",
        "1. Immediate safety concerns (if any)",
        "2. High-impact, low-cost solutions",
        "3. Equipment adjustments and upgrades",
        "4. Behavioral and movement improvements",
        "5. Long-term preventive measures",
        "",
        f"Ensure recommendations are practical for someone who works "
        f"{_num(profile.work_hours_per_day)} hours per day.",
    ]
    return "\n".join(lines)
