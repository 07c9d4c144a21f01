from datetime import datetime
from typing import Optional

from ergorisk.models.base_model import EngineModel
from ergorisk.models.recommendation_model import RecommendationSet
from ergorisk.models.risk_model import RiskAnalysis


class ReportModel(EngineModel):
    schema_id: str = "ergorisk.report.v1"

    assessment_id: Optional[str] = None
    executive_summary: str
    risk_analysis: RiskAnalysis
    recommendations: RecommendationSet
    generated_date: datetime
