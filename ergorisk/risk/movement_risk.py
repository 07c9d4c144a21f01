# ergorisk/risk/movement_risk.py
"""
Movement risk model.

Break / stretch / walk / posture-change frequencies are penalised when
they fall below recommended minimums (exclusive bands, worst first).

Repetitive-motion bands are ADDITIVE: a typing rate above 400/min collects
both the >300 and the >400 penalty. This differs from every other band in
the engine and is kept as-is pending product review.
"""

from ergorisk.models.input_model import MovementPatterns
from ergorisk.utils.numeric import clamp

# ---------------------------------------------------------
# Shortfall bands: value < minimum → penalty, first match
# ---------------------------------------------------------
SCREEN_BREAK_BANDS = ((1, 20), (2, 10))     # per hour
STRETCHING_BANDS = ((2, 15), (3, 8))        # per day
WALKING_BANDS = ((0.5, 18), (1, 10))        # per hour
POSTURE_CHANGE_BANDS = ((1, 12), (2, 6))    # per hour

# ---------------------------------------------------------
# Repetitive-motion bands: value > threshold → penalty, all that apply
# ---------------------------------------------------------
TYPING_BANDS = ((300, 10), (400, 15))       # keystrokes / min
MOUSE_CLICK_BANDS = ((100, 8), (150, 12))   # clicks / min
REACHING_BANDS = ((20, 10), (30, 15))       # per hour


def _shortfall_penalty(value: float, bands) -> float:
    for minimum, penalty in bands:
        if value < minimum:
            return penalty
    return 0


def _cumulative_penalty(value: float, bands) -> float:
    return sum(penalty for threshold, penalty in bands if value > threshold)


def calculate_movement_risk(movement: MovementPatterns) -> float:
    score = 0.0

    score += _shortfall_penalty(movement.screen_break_frequency, SCREEN_BREAK_BANDS)
    score += _shortfall_penalty(movement.stretching_frequency, STRETCHING_BANDS)
    score += _shortfall_penalty(movement.walking_frequency, WALKING_BANDS)
    score += _shortfall_penalty(movement.posture_changes, POSTURE_CHANGE_BANDS)

    motions = movement.repetitive_motions
    score += _cumulative_penalty(motions.typing, TYPING_BANDS)
    score += _cumulative_penalty(motions.mouse_clicks, MOUSE_CLICK_BANDS)
    score += _cumulative_penalty(motions.reaching_movements, REACHING_BANDS)

    return clamp(score)
