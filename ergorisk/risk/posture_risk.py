# ergorisk/risk/posture_risk.py
"""
Posture risk model.

Adds a penalty for every body-position deviation from ergonomic neutral,
then scales the sum by age and daily work hours.

Output: risk score in [0, 100] (not rounded).
"""

from ergorisk.models.input_model import (
    BackCurvature,
    FeetPosition,
    PostureData,
    ShoulderPosition,
    UserProfileSnapshot,
    WristPosition,
)
from ergorisk.utils.numeric import band_penalty, clamp, require_exhaustive

# ---------------------------------------------------------
# Angle bands (|deviation| > threshold → penalty, first match)
# ---------------------------------------------------------
NECK_BANDS = ((45, 25), (30, 15), (15, 8))

ELBOW_NEUTRAL_DEG = 100
ELBOW_BANDS = ((30, 15), (15, 8))

HIP_NEUTRAL_DEG = 100
HIP_BANDS = ((20, 10), (10, 5))

# ---------------------------------------------------------
# Fixed position penalties
# ---------------------------------------------------------
SHOULDER_PENALTY = require_exhaustive({
    ShoulderPosition.RELAXED: 0,
    ShoulderPosition.ELEVATED: 15,
    ShoulderPosition.HUNCHED: 20,
    ShoulderPosition.FORWARD: 18,
}, ShoulderPosition, "SHOULDER_PENALTY")

BACK_PENALTY = require_exhaustive({
    BackCurvature.NATURAL: 0,
    BackCurvature.STRAIGHT: 10,
    BackCurvature.SLOUCHED: 25,
    BackCurvature.ARCHED: 15,
}, BackCurvature, "BACK_PENALTY")

WRIST_PENALTY = require_exhaustive({
    WristPosition.NEUTRAL: 0,
    WristPosition.EXTENDED: 12,
    WristPosition.FLEXED: 15,
    WristPosition.DEVIATED: 18,
}, WristPosition, "WRIST_PENALTY")

FEET_PENALTY = require_exhaustive({
    FeetPosition.FLAT_FLOOR: 0,
    FeetPosition.FOOTREST: 2,
    FeetPosition.DANGLING: 15,
    FeetPosition.CROSSED: 12,
}, FeetPosition, "FEET_PENALTY")


def age_multiplier(age: float) -> float:
    if age > 50:
        return 1.2
    if age > 35:
        return 1.1
    return 1.0


def hours_multiplier(work_hours_per_day: float) -> float:
    if work_hours_per_day > 8:
        return 1.3
    if work_hours_per_day > 6:
        return 1.1
    return 1.0


def calculate_posture_risk(posture: PostureData, profile: UserProfileSnapshot) -> float:
    raw = 0.0

    raw += band_penalty(abs(posture.neck_angle), NECK_BANDS)
    raw += SHOULDER_PENALTY[posture.shoulder_position]
    raw += BACK_PENALTY[posture.back_curvature]
    raw += band_penalty(abs(posture.elbow_angle - ELBOW_NEUTRAL_DEG), ELBOW_BANDS)
    raw += WRIST_PENALTY[posture.wrist_position]
    raw += band_penalty(abs(posture.hip_angle - HIP_NEUTRAL_DEG), HIP_BANDS)
    raw += FEET_PENALTY[posture.feet_position]

    scaled = raw * age_multiplier(profile.age) * hours_multiplier(profile.work_hours_per_day)
    return clamp(scaled)
