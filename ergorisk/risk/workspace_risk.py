# ergorisk/risk/workspace_risk.py
"""
Workspace risk model.

Scores desk / monitor geometry, input-device placement, support features
and the surrounding environment against the user's height. No multipliers.
"""

from ergorisk import config
from ergorisk.models.input_model import (
    InputDevicePosition,
    LightingQuality,
    NoiseLevel,
    UserProfileSnapshot,
    WorkspaceSetup,
)
from ergorisk.utils.numeric import band_penalty, clamp, require_exhaustive

# ---------------------------------------------------------
# Geometry thresholds (cm)
# ---------------------------------------------------------
DESK_HEIGHT_BANDS = ((10, 15), (5, 8))

MONITOR_DISTANCE_OPTIMAL = (50, 70)
MONITOR_DISTANCE_LIMIT = (40, 80)
MONITOR_DISTANCE_OUT_OF_LIMIT = 12
MONITOR_DISTANCE_OUT_OF_OPTIMAL = 6

MONITOR_HEIGHT_BANDS = ((15, 10), (5, 5))
MONITOR_TOO_LOW_CM = -10
MONITOR_TOO_LOW_PENALTY = 8

# ---------------------------------------------------------
# Fixed penalties
# ---------------------------------------------------------
KEYBOARD_ON_DESKTOP = 8
MOUSE_ON_DESKTOP = 6

NO_FOOT_SUPPORT = 8
NO_LUMBAR_SUPPORT = 15
NO_ARMREST_SUPPORT = 10

LIGHTING_PENALTY = require_exhaustive({
    LightingQuality.EXCELLENT: 0,
    LightingQuality.GOOD: 3,
    LightingQuality.FAIR: 8,
    LightingQuality.POOR: 15,
}, LightingQuality, "LIGHTING_PENALTY")

NOISE_PENALTY = require_exhaustive({
    NoiseLevel.QUIET: 0,
    NoiseLevel.MODERATE: 3,
    NoiseLevel.LOUD: 8,
    NoiseLevel.VERY_LOUD: 12,
}, NoiseLevel, "NOISE_PENALTY")


def ideal_desk_height(height_cm: float) -> float:
    return height_cm * config.DESK_HEIGHT_RATIO


def _monitor_distance_penalty(distance: float) -> float:
    low, high = MONITOR_DISTANCE_LIMIT
    if distance < low or distance > high:
        return MONITOR_DISTANCE_OUT_OF_LIMIT
    low, high = MONITOR_DISTANCE_OPTIMAL
    if distance < low or distance > high:
        return MONITOR_DISTANCE_OUT_OF_OPTIMAL
    return 0


def _monitor_height_penalty(height: float) -> float:
    penalty = band_penalty(height, MONITOR_HEIGHT_BANDS)
    if penalty:
        return penalty
    if height < MONITOR_TOO_LOW_CM:
        return MONITOR_TOO_LOW_PENALTY
    return 0


def calculate_workspace_risk(workspace: WorkspaceSetup, profile: UserProfileSnapshot) -> float:
    score = 0.0

    deviation = abs(workspace.desk_height - ideal_desk_height(profile.height))
    score += band_penalty(deviation, DESK_HEIGHT_BANDS)

    score += _monitor_distance_penalty(workspace.monitor_distance)
    score += _monitor_height_penalty(workspace.monitor_height)

    if workspace.keyboard_position == InputDevicePosition.DESKTOP:
        score += KEYBOARD_ON_DESKTOP
    if workspace.mouse_position == InputDevicePosition.DESKTOP:
        score += MOUSE_ON_DESKTOP

    if not workspace.foot_support:
        score += NO_FOOT_SUPPORT
    if not workspace.lumbar_support:
        score += NO_LUMBAR_SUPPORT
    if not workspace.armrest_support:
        score += NO_ARMREST_SUPPORT

    score += LIGHTING_PENALTY[workspace.lighting_quality]
    score += NOISE_PENALTY[workspace.noise_level]

    return clamp(score)
