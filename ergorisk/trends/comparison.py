# ergorisk/trends/comparison.py

from typing import Iterable, List

from ergorisk.models.input_model import HealthSymptom
from ergorisk.models.trend_model import AssessmentComparison, ScoredAssessment


def _areas(symptoms: Iterable[HealthSymptom]) -> List[str]:
    seen: List[str] = []
    for s in symptoms:
        if s.area.value not in seen:
            seen.append(s.area.value)
    return seen


def compare_assessments(previous: ScoredAssessment, current: ScoredAssessment) -> AssessmentComparison:
    """
    Highlight what changed between two scored assessments.

    Neck positioning compares |neck angle|; break frequency compares
    screen breaks per hour. Symptom changes are by body area.
    """
    prev, cur = previous.assessment, current.assessment
    improved: List[str] = []
    worsened: List[str] = []

    prev_neck = abs(prev.posture_data.neck_angle)
    cur_neck = abs(cur.posture_data.neck_angle)
    if cur_neck < prev_neck:
        improved.append("Neck positioning")
    elif cur_neck > prev_neck:
        worsened.append("Neck positioning")

    prev_breaks = prev.movement_patterns.screen_break_frequency
    cur_breaks = cur.movement_patterns.screen_break_frequency
    if cur_breaks > prev_breaks:
        improved.append("Break frequency")
    elif cur_breaks < prev_breaks:
        worsened.append("Break frequency")

    prev_areas = _areas(prev.symptoms)
    cur_areas = _areas(cur.symptoms)

    return AssessmentComparison(
        score_difference=current.overall_score - previous.overall_score,
        risk_level_change=f"{previous.risk_level.value} → {current.risk_level.value}",
        improved_areas=improved,
        worsened_areas=worsened,
        new_symptoms=[a for a in cur_areas if a not in prev_areas],
        resolved_symptoms=[a for a in prev_areas if a not in cur_areas],
    )
