from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ergorisk.models.input_model import Assessment, RiskCalculationInput, UserProfileSnapshot
from ergorisk.models.recommendation_model import RecommendationSet
from ergorisk.models.report_model import ReportModel
from ergorisk.models.risk_model import ComponentScores, RiskAnalysis, RiskFactor, RiskLevel


class Context(BaseModel):
    """
    Working state passed through the pipeline stages.

    Either assessment + profile or a caller-assembled input must be set.
    Unlike the entities it carries, the context is mutable: each stage
    fills in its own section and returns the context. One context per
    analysis call; never shared.
    """

    # -------------------------
    # Inputs
    # -------------------------
    assessment: Optional[Assessment] = None
    profile: Optional[UserProfileSnapshot] = None
    input: Optional[RiskCalculationInput] = None
    now: datetime

    # -------------------------
    # Risk stage
    # -------------------------
    scores: Optional[ComponentScores] = None
    risk_score: int = 0
    risk_level: RiskLevel = RiskLevel.LOW
    factors: List[RiskFactor] = Field(default_factory=list)

    # -------------------------
    # Interpretation layers
    # -------------------------
    priority_areas: List[str] = Field(default_factory=list)
    analysis: Optional[RiskAnalysis] = None
    recommendation_set: Optional[RecommendationSet] = None

    # -------------------------
    # Reporting
    # -------------------------
    report: Optional[ReportModel] = None
