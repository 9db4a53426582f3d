# app/AIsystem/response_normalizer.py
"""
Response Normalization Layer
Turns decoded completion payloads into validated output schemas.

Strict first: the payload must validate against the output schema.
Known spelling variations (snake_case keys, alternate list keys, lowercase
probability tiers) are folded in before validation. Anything else raises and
the caller falls back.
"""
import logging
from typing import Any, Dict, List

from app.AIsystem.schemas import (
    DiseaseDetail,
    HealthcareProviders,
    NewsItem,
    SymptomAnalysisResult,
)

logger = logging.getLogger(__name__)


DEFAULT_DISCLAIMER = (
    "This information is not a diagnosis. Always consult a qualified healthcare professional "
    "for medical advice, diagnosis, and treatment. Medical conditions can present with similar "
    "symptoms but require different treatments. Only a licensed healthcare provider can properly "
    "evaluate your specific situation."
)

DEFAULT_RECOMMENDATIONS = [
    "Schedule an appointment with your doctor to discuss these symptoms",
    "Keep a symptom journal to track changes",
    "Follow general health guidelines including proper hydration and rest",
]

PROBABILITY_TIERS = {"high": "High", "medium": "Medium", "low": "Low"}


def _require_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


# ============================================================================
# SYMPTOM ANALYSIS
# ============================================================================
def normalize_probability(value: Any) -> Any:
    """'high', ' HIGH ' → 'High'. Unknown tiers pass through and fail validation."""
    if isinstance(value, str):
        return PROBABILITY_TIERS.get(value.strip().lower(), value)
    return value


def extract_conditions(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Extract the condition list from its known keys."""
    conditions = next(
        (data[key] for key in ("possibleConditions", "possible_conditions", "conditions") if key in data),
        None,
    )
    if not isinstance(conditions, list):
        raise ValueError("possibleConditions missing or not a list")

    normalized = []
    for item in conditions:
        if not isinstance(item, dict):
            raise ValueError(f"Condition must be an object, got {type(item).__name__}")
        condition = dict(item)
        condition["probability"] = normalize_probability(condition.get("probability"))
        # Missing or null body system folds to ""
        condition["relatedBodySystem"] = (
            condition.get("relatedBodySystem")
            or condition.pop("related_body_system", None)
            or condition.pop("bodySystem", None)
            or ""
        )
        normalized.append(condition)
    return normalized


def normalize_symptom_analysis(raw: Any) -> SymptomAnalysisResult:
    """
    Validate a symptom analysis payload.

    Missing disclaimer or recommendations get the defaults; missing or malformed
    conditions raise.
    """
    data = _require_object(raw, "Symptom analysis")

    recommendations = data.get("recommendations")
    if not isinstance(recommendations, list) or not recommendations:
        recommendations = list(DEFAULT_RECOMMENDATIONS)

    return SymptomAnalysisResult.model_validate(
        {
            "possibleConditions": extract_conditions(data),
            "disclaimer": data.get("disclaimer") or DEFAULT_DISCLAIMER,
            "recommendations": recommendations,
        }
    )


# ============================================================================
# DISEASE DETAIL
# ============================================================================
def normalize_disease_detail(raw: Any) -> DiseaseDetail:
    data = dict(_require_object(raw, "Disease detail"))

    references = data.get("references")
    if isinstance(references, str):
        data["references"] = [references]
    elif references is None:
        data.pop("references", None)

    return DiseaseDetail.model_validate(data)


# ============================================================================
# NEWS
# ============================================================================
def extract_news_items(raw: Any) -> List[Any]:
    """A bare list, or a list under one of the wrapper keys."""
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        for key in ("news", "articles", "items"):
            if isinstance(raw.get(key), list):
                return raw[key]
    raise ValueError("News payload has no item list")


def normalize_news(raw: Any) -> List[NewsItem]:
    return [NewsItem.model_validate(item) for item in extract_news_items(raw)]


# ============================================================================
# HEALTHCARE PROVIDERS
# ============================================================================
def normalize_providers(raw: Any) -> HealthcareProviders:
    data = _require_object(raw, "Healthcare providers")
    if not any(isinstance(data.get(key), list) for key in ("hospitals", "doctors")):
        raise ValueError("Provider payload has neither hospitals nor doctors")
    return HealthcareProviders.model_validate(
        {
            "hospitals": data.get("hospitals") or [],
            "doctors": data.get("doctors") or [],
        }
    )
