"""Builders for assessment fixtures used across the test suite"""
from datetime import datetime, timezone
from typing import Any, Dict, List

from ergorisk.models.input_model import (
    Assessment,
    HealthSymptom,
    MovementPatterns,
    PostureData,
    UserProfileSnapshot,
    WorkspaceSetup,
)
from ergorisk.models.risk_model import FactorCategory, RiskFactor, RiskLevel

FIXED_NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def profile_data(**overrides) -> Dict[str, Any]:
    data = {"age": 30, "height": 175, "weight": 70, "work_hours_per_day": 8}
    data.update(overrides)
    return data


def workspace_data(**overrides) -> Dict[str, Any]:
    """Neutral workspace for a 175 cm user (scores 0)."""
    data = {
        "desk_height": 79,
        "chair_height": 45,
        "monitor_distance": 60,
        "monitor_height": 0,
        "keyboard_position": "tray",
        "mouse_position": "tray",
        "foot_support": True,
        "lumbar_support": True,
        "armrest_support": True,
        "lighting_quality": "excellent",
        "noise_level": "quiet",
    }
    data.update(overrides)
    return data


def posture_data(**overrides) -> Dict[str, Any]:
    """Neutral posture (scores 0)."""
    data = {
        "neck_angle": 0,
        "shoulder_position": "relaxed",
        "back_curvature": "natural",
        "elbow_angle": 100,
        "wrist_position": "neutral",
        "hip_angle": 100,
        "knee_angle": 90,
        "feet_position": "flat-floor",
    }
    data.update(overrides)
    return data


def movement_data(repetitive: Dict[str, Any] = None, **overrides) -> Dict[str, Any]:
    """Healthy movement habits (scores 0)."""
    motions = {"typing": 200, "mouse_clicks": 50, "reaching_movements": 10}
    motions.update(repetitive or {})
    data = {
        "screen_break_frequency": 3,
        "stretching_frequency": 4,
        "walking_frequency": 1,
        "posture_changes": 2,
        "repetitive_motions": motions,
    }
    data.update(overrides)
    return data


def symptom(area: str, severity: str, frequency: str, description: str = "") -> Dict[str, Any]:
    return {"type": area, "severity": severity, "frequency": frequency, "description": description}


def make_profile(**overrides) -> UserProfileSnapshot:
    return UserProfileSnapshot(**profile_data(**overrides))


def make_workspace(**overrides) -> WorkspaceSetup:
    return WorkspaceSetup(**workspace_data(**overrides))


def make_posture(**overrides) -> PostureData:
    return PostureData(**posture_data(**overrides))


def make_movement(repetitive: Dict[str, Any] = None, **overrides) -> MovementPatterns:
    return MovementPatterns(**movement_data(repetitive, **overrides))


def make_symptom(area: str, severity: str, frequency: str) -> HealthSymptom:
    return HealthSymptom.model_validate(symptom(area, severity, frequency))


def make_assessment(
    workspace: Dict[str, Any] = None,
    posture: Dict[str, Any] = None,
    movement: Dict[str, Any] = None,
    symptoms: List[Dict[str, Any]] = None,
    **fields,
) -> Assessment:
    return Assessment(
        workspace_setup=workspace_data(**(workspace or {})),
        posture_data=posture_data(**(posture or {})),
        movement_patterns=movement or movement_data(),
        symptoms=symptoms or [],
        **fields,
    )


def scenario_assessment() -> Assessment:
    """
    Office worker with a poor setup: no lumbar / foot support, input devices
    on the desktop, forward head, hunched and slouched, rare breaks, severe
    constant back pain.
    """
    return make_assessment(
        workspace={
            "desk_height": 74,
            "chair_height": 45,
            "monitor_distance": 60,
            "lumbar_support": False,
            "foot_support": False,
            "keyboard_position": "desktop",
            "mouse_position": "desktop",
            "lighting_quality": "good",
        },
        posture={
            "neck_angle": 35,
            "shoulder_position": "hunched",
            "back_curvature": "slouched",
        },
        movement=movement_data(screen_break_frequency=0.5),
        symptoms=[symptom("back", "severe", "always", "Lower back ache by afternoon")],
        id="assess_001",
        assessment_date=datetime(2026, 2, 27, tzinfo=timezone.utc),
    )


def scenario_profile() -> UserProfileSnapshot:
    return make_profile(age=45, height=175, work_hours_per_day=9)


def make_factor(category: str, severity: str, score: float, name: str = "Factor") -> RiskFactor:
    return RiskFactor(
        category=FactorCategory(category),
        name=name,
        severity=RiskLevel(severity),
        score=score,
        description="test factor",
        impact="test impact",
    )
