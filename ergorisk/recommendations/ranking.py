# ergorisk/recommendations/ranking.py

from typing import Any, List, Mapping, Optional, Sequence, Union

from ergorisk.models.recommendation_model import (
    CostTier,
    Recommendation,
    RecommendationCategory,
    RecommendationFilters,
    RecommendationPriority,
)
from ergorisk.utils.numeric import require_exhaustive

# Higher rank sorts first
PRIORITY_RANK = require_exhaustive({
    RecommendationPriority.CRITICAL: 4,
    RecommendationPriority.HIGH: 3,
    RecommendationPriority.MEDIUM: 2,
    RecommendationPriority.LOW: 1,
}, RecommendationPriority, "PRIORITY_RANK")

CATEGORY_RANK = require_exhaustive({
    RecommendationCategory.IMMEDIATE: 3,
    RecommendationCategory.SHORT_TERM: 2,
    RecommendationCategory.LONG_TERM: 1,
}, RecommendationCategory, "CATEGORY_RANK")

COST_RANK = require_exhaustive({
    CostTier.FREE: 4,
    CostTier.LOW: 3,
    CostTier.MEDIUM: 2,
    CostTier.HIGH: 1,
}, CostTier, "COST_RANK")


def _as_filters(filters: Union[RecommendationFilters, Mapping[str, Any], None]) -> RecommendationFilters:
    if filters is None:
        return RecommendationFilters()
    if isinstance(filters, RecommendationFilters):
        return filters
    return RecommendationFilters.model_validate(dict(filters))


def _matches(rec: Recommendation, f: RecommendationFilters) -> bool:
    if f.category is not None and rec.category != f.category:
        return False
    if f.priority is not None and rec.priority != f.priority:
        return False
    if f.type is not None and rec.type != f.type:
        return False
    if f.cost is not None and rec.estimated_cost != f.cost:
        return False
    if f.difficulty is not None and rec.implementation_difficulty != f.difficulty:
        return False
    return True


def filter_recommendations(
    recommendations: Sequence[Recommendation],
    filters: Optional[Union[RecommendationFilters, Mapping[str, Any]]] = None,
) -> List[Recommendation]:
    f = _as_filters(filters)
    return [rec for rec in recommendations if _matches(rec, f)]


def _rank_key(rec: Recommendation):
    return (
        -PRIORITY_RANK[rec.priority],
        -CATEGORY_RANK[rec.category],
        -COST_RANK[rec.estimated_cost],
    )


def rank_recommendations(recommendations: Sequence[Recommendation]) -> List[Recommendation]:
    """
    Priority (critical first), then category (immediate first), then cost
    (free first). Stable: fully equal items keep their input order.
    """
    return sorted(recommendations, key=_rank_key)
