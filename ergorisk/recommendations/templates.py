import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from ergorisk import config
from ergorisk.exceptions import ConfigurationError
from ergorisk.models.base_model import EngineModel
from ergorisk.models.recommendation_model import Recommendation
from ergorisk.models.risk_model import RiskLevel
from ergorisk.utils.logger import debug

TEMPLATES_PATH = Path(__file__).parent / "templates.yaml"

REQUIRED_TEMPLATES = (
    "posture",
    "movement",
    "equipment",
    "screen_breaks",
    "lumbar_support",
    "lighting",
)


class RiskLevelGuidance(EngineModel):
    description: str
    urgency: str
    action_items: List[str]
    follow_up_schedule: str


class TemplateCatalogue(EngineModel):
    recommendations: Dict[str, Recommendation]
    risk_levels: Dict[RiskLevel, RiskLevelGuidance]


def _catalogue_path() -> Path:
    return Path(config.TEMPLATES_PATH) if config.TEMPLATES_PATH else TEMPLATES_PATH


@lru_cache(maxsize=1)
def load_catalogue() -> TemplateCatalogue:
    path = _catalogue_path()
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read template catalogue {path}: {e}") from e

    try:
        catalogue = TemplateCatalogue.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid template catalogue {path}: {e}") from e

    missing = [k for k in REQUIRED_TEMPLATES if k not in catalogue.recommendations]
    missing += [level.value for level in RiskLevel if level not in catalogue.risk_levels]
    if missing:
        raise ConfigurationError(f"Template catalogue {path} missing: {', '.join(missing)}")

    debug(f"[TEMPLATES] loaded {len(catalogue.recommendations)} recommendations from {path}")
    return catalogue


def recommendation_template(key: str, rec_id: str) -> Recommendation:
    template = load_catalogue().recommendations[key]
    # deep: the cached catalogue must never share lists with callers
    return template.model_copy(update={"id": rec_id}, deep=True)


def risk_level_guidance(level: RiskLevel) -> RiskLevelGuidance:
    return load_catalogue().risk_levels[RiskLevel(level)]
