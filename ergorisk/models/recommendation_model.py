from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field

from ergorisk.models.base_model import EngineModel


class RecommendationCategory(str, Enum):
    IMMEDIATE = "immediate"
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


class RecommendationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RecommendationType(str, Enum):
    POSTURE = "posture"
    EQUIPMENT = "equipment"
    MOVEMENT = "movement"
    ENVIRONMENT = "environment"
    BEHAVIOR = "behavior"


class CostTier(str, Enum):
    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DifficultyTier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Recommendation(EngineModel):
    """
    One actionable recommendation.

    Unknown keys are rejected so that externally generated payloads must
    match this schema exactly to be accepted.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = ""
    category: RecommendationCategory
    priority: RecommendationPriority
    type: RecommendationType
    title: str = Field(..., min_length=1)
    description: str
    action_steps: List[str] = Field(default_factory=list)
    expected_benefit: str
    timeframe: str
    estimated_cost: CostTier
    implementation_difficulty: DifficultyTier


class RecommendationFilters(EngineModel):
    """All fields optional; set fields are AND-combined."""

    category: Optional[RecommendationCategory] = None
    priority: Optional[RecommendationPriority] = None
    type: Optional[RecommendationType] = None
    cost: Optional[CostTier] = None
    difficulty: Optional[DifficultyTier] = None


class RecommendationSet(EngineModel):
    assessment_id: Optional[str] = None
    recommendations: List[Recommendation] = Field(default_factory=list)
    generated_date: datetime
    ai_generated: bool = False
