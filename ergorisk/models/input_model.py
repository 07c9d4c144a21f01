from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ergorisk.models.base_model import EngineModel


# ----------------------------
# Closed vocabularies
# ----------------------------
class InputDevicePosition(str, Enum):
    DESKTOP = "desktop"
    TRAY = "tray"
    ADJUSTABLE = "adjustable"


class LightingQuality(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class NoiseLevel(str, Enum):
    QUIET = "quiet"
    MODERATE = "moderate"
    LOUD = "loud"
    VERY_LOUD = "very-loud"


class ShoulderPosition(str, Enum):
    RELAXED = "relaxed"
    ELEVATED = "elevated"
    HUNCHED = "hunched"
    FORWARD = "forward"


class BackCurvature(str, Enum):
    NATURAL = "natural"
    STRAIGHT = "straight"
    SLOUCHED = "slouched"
    ARCHED = "arched"


class WristPosition(str, Enum):
    NEUTRAL = "neutral"
    EXTENDED = "extended"
    FLEXED = "flexed"
    DEVIATED = "deviated"


class FeetPosition(str, Enum):
    FLAT_FLOOR = "flat-floor"
    FOOTREST = "footrest"
    DANGLING = "dangling"
    CROSSED = "crossed"


class BodyArea(str, Enum):
    NECK = "neck"
    SHOULDER = "shoulder"
    BACK = "back"
    WRIST = "wrist"
    EYE = "eye"
    HIP = "hip"
    KNEE = "knee"
    FOOT = "foot"


class SymptomSeverity(str, Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SymptomFrequency(str, Enum):
    NEVER = "never"
    RARELY = "rarely"
    SOMETIMES = "sometimes"
    OFTEN = "often"
    ALWAYS = "always"


# ----------------------------
# Assessment inputs
# ----------------------------
class UserProfileSnapshot(EngineModel):
    """Scoring context taken from the user's profile. Never mutated."""

    age: float = Field(..., gt=0)
    height: float = Field(..., gt=0, description="cm")
    weight: float = Field(..., gt=0, description="kg")
    work_hours_per_day: float = Field(..., ge=0, le=24)


class WorkspaceSetup(EngineModel):
    desk_height: float = Field(..., description="cm")
    chair_height: float = Field(..., description="cm")
    monitor_distance: float = Field(..., description="cm")
    monitor_height: float = Field(..., description="cm relative to eye level")
    keyboard_position: InputDevicePosition
    mouse_position: InputDevicePosition
    foot_support: bool
    lumbar_support: bool
    armrest_support: bool
    lighting_quality: LightingQuality
    noise_level: NoiseLevel


class PostureData(EngineModel):
    neck_angle: float = Field(..., description="signed degrees from neutral")
    shoulder_position: ShoulderPosition
    back_curvature: BackCurvature
    elbow_angle: float
    wrist_position: WristPosition
    hip_angle: float
    knee_angle: float
    feet_position: FeetPosition


class RepetitiveMotions(EngineModel):
    typing: float = Field(..., ge=0, description="keystrokes per minute")
    mouse_clicks: float = Field(..., ge=0, description="clicks per minute")
    reaching_movements: float = Field(..., ge=0, description="per hour")


class MovementPatterns(EngineModel):
    screen_break_frequency: float = Field(..., ge=0, description="per hour")
    stretching_frequency: float = Field(..., ge=0, description="per day")
    walking_frequency: float = Field(..., ge=0, description="per hour")
    posture_changes: float = Field(..., ge=0, description="per hour")
    repetitive_motions: RepetitiveMotions


class HealthSymptom(EngineModel):
    id: Optional[str] = None
    area: BodyArea = Field(..., alias="type")
    severity: SymptomSeverity
    frequency: SymptomFrequency
    description: str = ""


class Assessment(EngineModel):
    """
    One ergonomic assessment as captured by the caller.

    Storage metadata (owner, stored score) lives outside the engine; only the
    fields needed for scoring and recommendation synthesis are modelled.
    """

    id: Optional[str] = None
    assessment_date: Optional[datetime] = None
    workspace_setup: WorkspaceSetup
    posture_data: PostureData
    movement_patterns: MovementPatterns
    symptoms: List[HealthSymptom] = Field(default_factory=list)
    notes: Optional[str] = None


class RiskCalculationInput(EngineModel):
    """The slice of an assessment + profile the risk models read."""

    workspace: WorkspaceSetup
    posture: PostureData
    movement: MovementPatterns
    symptoms: List[HealthSymptom] = Field(default_factory=list)
    user_profile: UserProfileSnapshot

    @classmethod
    def from_assessment(
        cls, assessment: Assessment, profile: UserProfileSnapshot
    ) -> "RiskCalculationInput":
        return cls(
            workspace=assessment.workspace_setup,
            posture=assessment.posture_data,
            movement=assessment.movement_patterns,
            symptoms=assessment.symptoms,
            user_profile=profile,
        )
