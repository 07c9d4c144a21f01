# ergorisk/risk/priority.py

from typing import List, Sequence

from ergorisk.models.risk_model import FactorCategory, RiskFactor, RiskLevel
from ergorisk.risk.aggregator import DISCOMFORT_FACTOR_NAME
from ergorisk.utils.numeric import require_exhaustive

MAX_PRIORITY_AREAS = 5
TOP_FACTORS = 3

URGENT_LEVELS = (RiskLevel.HIGH, RiskLevel.CRITICAL)

# Dict order is the output order
CATEGORY_ADVICE = require_exhaustive({
    FactorCategory.POSTURE: "Improve posture alignment and body positioning",
    FactorCategory.EQUIPMENT: "Upgrade workspace equipment and setup",
    FactorCategory.MOVEMENT: "Increase movement and break frequency",
    FactorCategory.ENVIRONMENT: "Optimize environmental conditions",
    FactorCategory.TIME: "Manage work duration and scheduling",
}, FactorCategory, "CATEGORY_ADVICE")

PAIN_ADVICE = "Address existing pain and discomfort immediately"


def is_critical_discomfort(factor: RiskFactor) -> bool:
    return (
        factor.category == FactorCategory.POSTURE
        and factor.name == DISCOMFORT_FACTOR_NAME
        and factor.severity == RiskLevel.CRITICAL
    )


def identify_priority_areas(factors: Sequence[RiskFactor]) -> List[str]:
    """
    Advisory sentences for the categories of the three highest-scoring
    high/critical factors, with an urgent pain sentence up front when the
    discomfort factor is critical. At most five entries.
    """
    urgent = [f for f in factors if f.severity in URGENT_LEVELS]
    top = sorted(urgent, key=lambda f: f.score, reverse=True)[:TOP_FACTORS]
    categories = {f.category for f in top}

    priorities = [advice for category, advice in CATEGORY_ADVICE.items() if category in categories]

    if any(is_critical_discomfort(f) for f in factors):
        priorities.insert(0, PAIN_ADVICE)

    return priorities[:MAX_PRIORITY_AREAS]
