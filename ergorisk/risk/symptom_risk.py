# ergorisk/risk/symptom_risk.py

from typing import Sequence

from ergorisk.models.input_model import (
    BodyArea,
    HealthSymptom,
    SymptomFrequency,
    SymptomSeverity,
)
from ergorisk.utils.numeric import clamp, require_exhaustive, round_half_up

BASE_PER_SYMPTOM = 5
CRITICAL_AREA_BONUS = 5
CRITICAL_AREAS = frozenset({BodyArea.NECK, BodyArea.BACK, BodyArea.WRIST})

SEVERITY_WEIGHT = require_exhaustive({
    SymptomSeverity.NONE: 0,
    SymptomSeverity.MILD: 1,
    SymptomSeverity.MODERATE: 2,
    SymptomSeverity.SEVERE: 3,
}, SymptomSeverity, "SEVERITY_WEIGHT")

FREQUENCY_WEIGHT = require_exhaustive({
    SymptomFrequency.NEVER: 0,
    SymptomFrequency.RARELY: 0.5,
    SymptomFrequency.SOMETIMES: 1,
    SymptomFrequency.OFTEN: 2,
    SymptomFrequency.ALWAYS: 3,
}, SymptomFrequency, "FREQUENCY_WEIGHT")

SEVERITY_SCALE = 0.5
FREQUENCY_SCALE = 0.3


def calculate_symptom_risk(symptoms: Sequence[HealthSymptom]) -> int:
    """
    Base points per symptom (more for neck / back / wrist), scaled by the
    mean severity and mean frequency across all reported symptoms.

    No symptoms → 0.
    """
    if not symptoms:
        return 0

    base = 0.0
    severity_total = 0.0
    frequency_total = 0.0

    for s in symptoms:
        base += BASE_PER_SYMPTOM
        severity_total += SEVERITY_WEIGHT[s.severity]
        frequency_total += FREQUENCY_WEIGHT[s.frequency]
        if s.area in CRITICAL_AREAS:
            base += CRITICAL_AREA_BONUS

    mean_severity = severity_total / len(symptoms)
    mean_frequency = frequency_total / len(symptoms)

    scaled = base * (1 + mean_severity * SEVERITY_SCALE) * (1 + mean_frequency * FREQUENCY_SCALE)
    return int(clamp(round_half_up(scaled)))
