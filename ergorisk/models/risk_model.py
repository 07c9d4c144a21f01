from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ergorisk.models.base_model import EngineModel


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class FactorCategory(str, Enum):
    POSTURE = "posture"
    MOVEMENT = "movement"
    ENVIRONMENT = "environment"
    EQUIPMENT = "equipment"
    TIME = "time"


class ComponentScores(EngineModel):
    """Per-model risk scores, each in [0, 100]."""

    posture: float = Field(..., ge=0, le=100)
    workspace: float = Field(..., ge=0, le=100)
    movement: float = Field(..., ge=0, le=100)
    symptoms: float = Field(..., ge=0, le=100)


class RiskFactor(EngineModel):
    category: FactorCategory
    name: str
    severity: RiskLevel
    score: float = Field(..., ge=0, le=100)
    description: str
    impact: str


class RiskAnalysis(EngineModel):
    """
    Result of one analysis run, keyed to a single assessment.

    - factors: descending by score, ties in emission order
    - priority_areas: at most five advisory sentences

    Frozen blocks attribute assignment only; the list fields are fresh
    copies owned by the caller and are never shared between results.
    """

    assessment_id: Optional[str] = None
    overall_risk: RiskLevel
    risk_score: int = Field(..., ge=0, le=100)
    factors: List[RiskFactor] = Field(default_factory=list)
    priority_areas: List[str] = Field(default_factory=list, max_length=5)
    component_scores: Optional[ComponentScores] = None
    analysis_date: datetime
