from datetime import datetime
from enum import Enum
from typing import List

from pydantic import Field, field_validator

from ergorisk.models.base_model import EngineModel
from ergorisk.models.input_model import Assessment
from ergorisk.models.risk_model import RiskLevel
from ergorisk.utils.dates import as_utc


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class ScorePoint(EngineModel):
    date: datetime
    score: float = Field(..., ge=0, le=100)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class TrendResult(EngineModel):
    """
    - change_rate: absolute score points per day between first and last point
    - improvement_rate: (first - last) per 30 days, positive = improving
    """

    trend: Trend
    change_rate: float = 0.0
    risk_progression: List[ScorePoint] = Field(default_factory=list)
    improvement_rate: float = 0.0


class Improvement(EngineModel):
    percentage: int = Field(..., ge=0)
    trend: Trend


class ScoredAssessment(EngineModel):
    """An assessment together with the score and level computed for it."""

    assessment: Assessment
    overall_score: float = Field(..., ge=0, le=100)
    risk_level: RiskLevel


class AssessmentComparison(EngineModel):
    score_difference: float
    risk_level_change: str
    improved_areas: List[str] = Field(default_factory=list)
    worsened_areas: List[str] = Field(default_factory=list)
    new_symptoms: List[str] = Field(default_factory=list)
    resolved_symptoms: List[str] = Field(default_factory=list)
