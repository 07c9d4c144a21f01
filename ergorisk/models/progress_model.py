from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from ergorisk.models.base_model import EngineModel
from ergorisk.models.trend_model import Trend
from ergorisk.utils.dates import as_utc


class MetricType(str, Enum):
    PAIN_LEVEL = "pain-level"
    COMFORT_SCORE = "comfort-score"
    PRODUCTIVITY = "productivity"
    ENERGY_LEVEL = "energy-level"
    SLEEP_QUALITY = "sleep-quality"


class HealthMetric(EngineModel):
    """One self-reported reading on a 0-10 scale."""

    metric_type: MetricType
    value: float = Field(..., ge=0, le=10)
    recorded_date: datetime
    notes: Optional[str] = None
    assessment_id: Optional[str] = None

    @field_validator("recorded_date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class LatestReading(EngineModel):
    value: float
    recorded_date: datetime


class MetricsSummary(EngineModel):
    """
    Readings inside the window only. Keys appear in MetricType order.
    """

    timeframe_days: int
    total_entries: int
    averages: Dict[MetricType, float] = Field(default_factory=dict)
    trends: Dict[MetricType, Trend] = Field(default_factory=dict)
    latest: Dict[MetricType, LatestReading] = Field(default_factory=dict)
    wellbeing_score: float = Field(..., ge=0, le=10)


class Milestone(EngineModel):
    date: datetime
    achievement: str
    score: float


class ProgressReport(EngineModel):
    start_date: Optional[datetime] = None
    current_date: datetime
    initial_score: float = 0
    current_score: float = 0
    improvement: int = 0
    milestones: List[Milestone] = Field(default_factory=list)
