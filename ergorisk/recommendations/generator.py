# ergorisk/recommendations/generator.py
"""
External recommendation generator seam.

A generator is any object with generate(assessment, analysis) that returns
either raw text (the JSON document described in prompt.SYSTEM_PROMPT), that
document already parsed into a mapping, or a list of recommendation dicts /
models. Anything that raises, returns an empty list, or does not match the
Recommendation schema is a failure and the deterministic synthesizer takes
over.
"""

import json
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Union

from pydantic import ValidationError

from ergorisk.exceptions import GeneratorError, GeneratorResponseError
from ergorisk.models.input_model import Assessment
from ergorisk.models.recommendation_model import Recommendation, RecommendationSet
from ergorisk.models.risk_model import RiskAnalysis
from ergorisk.recommendations.synthesizer import synthesize_recommendations
from ergorisk.utils.logger import info, warn

GeneratorOutput = Union[str, Mapping[str, Any], Sequence[Any]]


class RecommendationGenerator(Protocol):
    def generate(self, assessment: Assessment, analysis: RiskAnalysis) -> GeneratorOutput:
        ...


def _validate_entries(entries: Any) -> List[Recommendation]:
    if not isinstance(entries, (list, tuple)):
        raise GeneratorResponseError("'recommendations' must be a list")
    if not entries:
        raise GeneratorResponseError("generator returned no recommendations")

    recommendations: List[Recommendation] = []
    for i, entry in enumerate(entries):
        try:
            rec = entry if isinstance(entry, Recommendation) else Recommendation.model_validate(entry)
        except ValidationError as e:
            raise GeneratorResponseError(f"recommendation {i} does not match schema: {e}") from e
        if not rec.id:
            rec = rec.model_copy(update={"id": f"rec_{i}"})
        recommendations.append(rec)
    return recommendations


def _from_payload(payload: Any) -> List[Recommendation]:
    if not isinstance(payload, Mapping) or "recommendations" not in payload:
        raise GeneratorResponseError("generator reply has no 'recommendations' key")
    return _validate_entries(payload["recommendations"])


def parse_generator_response(text: str) -> List[Recommendation]:
    """
    Parse a generator reply of the form {"recommendations": [...]}.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as e:
        raise GeneratorResponseError(f"generator reply is not valid JSON: {e}") from e

    return _from_payload(payload)


def _accept(output: GeneratorOutput) -> List[Recommendation]:
    if output is None:
        raise GeneratorResponseError("generator returned nothing")
    if isinstance(output, (str, bytes)):
        text = output.decode() if isinstance(output, bytes) else output
        return parse_generator_response(text)
    if isinstance(output, Mapping):
        return _from_payload(output)
    return _validate_entries(list(output))


def generate_recommendations(
    assessment: Assessment,
    analysis: RiskAnalysis,
    generator: Optional[RecommendationGenerator] = None,
    now: Optional[datetime] = None,
) -> RecommendationSet:
    """
    Try the external generator first; fall back to the deterministic
    synthesizer on any failure. Failures are logged, never raised.
    """
    generated_date = now or datetime.now(timezone.utc)

    if generator is not None:
        try:
            recommendations = _accept(generator.generate(assessment, analysis))
            info(f"[GENERATOR] accepted {len(recommendations)} recommendations")
            return RecommendationSet(
                assessment_id=assessment.id,
                recommendations=recommendations,
                generated_date=generated_date,
                ai_generated=True,
            )
        except GeneratorError as e:
            warn(f"[GENERATOR] rejected output, using fallback: {e}")
        except Exception as e:
            warn(f"[GENERATOR] call failed, using fallback: {type(e).__name__}: {e}")

    return RecommendationSet(
        assessment_id=assessment.id,
        recommendations=synthesize_recommendations(assessment, analysis),
        generated_date=generated_date,
        ai_generated=False,
    )
