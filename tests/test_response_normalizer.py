"""
Response normalizer tests
"""
import json

import pytest
from pydantic import ValidationError

from app.AIsystem.response_normalizer import (
    DEFAULT_DISCLAIMER,
    DEFAULT_RECOMMENDATIONS,
    normalize_disease_detail,
    normalize_news,
    normalize_providers,
    normalize_symptom_analysis,
)

pytestmark = pytest.mark.unit


CONDITION = {
    "name": "Migraine",
    "probability": "high",
    "description": "Recurrent headaches",
    "whenToSeekCare": "Sudden severe headache",
}


def test_symptom_analysis_fills_defaults_and_normalizes_tier():
    result = normalize_symptom_analysis({"possibleConditions": [CONDITION]})

    condition = result.possible_conditions[0]
    assert condition.probability == "High"
    assert condition.related_body_system == ""
    assert result.disclaimer == DEFAULT_DISCLAIMER
    assert result.recommendations == DEFAULT_RECOMMENDATIONS


@pytest.mark.parametrize(
    "extra, expected",
    [
        ({"relatedBodySystem": None}, ""),
        ({"relatedBodySystem": None, "bodySystem": "Nervous System"}, "Nervous System"),
        ({"bodySystem": None}, ""),
    ],
)
def test_symptom_analysis_null_body_system_keeps_condition(extra, expected):
    result = normalize_symptom_analysis({"possibleConditions": [dict(CONDITION, **extra)]})

    assert [c.name for c in result.possible_conditions] == ["Migraine"]
    assert result.possible_conditions[0].related_body_system == expected


def test_symptom_analysis_accepts_alternate_keys():
    raw = {
        "conditions": [
            {
                "name": "Asthma",
                "probability": " MEDIUM ",
                "description": "Airway inflammation",
                "when_to_seek_care": "Severe shortness of breath",
                "related_body_system": "Respiratory",
            }
        ],
        "disclaimer": "Custom disclaimer",
        "recommendations": ["Rest"],
    }
    result = normalize_symptom_analysis(raw)
    assert result.possible_conditions[0].probability == "Medium"
    assert result.possible_conditions[0].related_body_system == "Respiratory"
    assert result.disclaimer == "Custom disclaimer"
    assert result.recommendations == ["Rest"]


@pytest.mark.parametrize(
    "raw",
    [
        {"disclaimer": "no conditions"},
        {"possibleConditions": "Migraine"},
        {"possibleConditions": [dict(CONDITION, probability="certain")]},
        {"possibleConditions": [{"name": "Missing fields"}]},
        ["not", "an", "object"],
    ],
)
def test_symptom_analysis_rejects_malformed(raw):
    with pytest.raises(ValueError):
        normalize_symptom_analysis(raw)


def test_disease_detail_defaults_optional_sections():
    detail = normalize_disease_detail({"overview": "Overview", "references": "WHO fact sheet"})
    assert detail.overview == "Overview"
    assert detail.causes == ""
    assert detail.references == ["WHO fact sheet"]


def test_disease_detail_requires_overview():
    with pytest.raises(ValidationError):
        normalize_disease_detail({"causes": "Unknown"})


NEWS_ITEM = {
    "title": "Headline",
    "summary": "Summary",
    "content": "Content",
    "source": "NEJM",
    "publishedDate": "2025-05-01",
    "category": "Research",
}


@pytest.mark.parametrize("wrapper", [lambda items: items, lambda items: {"news": items}, lambda items: {"articles": items}])
def test_news_accepts_list_or_wrapper(wrapper):
    items = normalize_news(wrapper([NEWS_ITEM]))
    assert items[0].published_date == "2025-05-01"
    assert items[0].url is None


def test_news_rejects_invalid_item():
    with pytest.raises(ValueError):
        normalize_news({"news": [{"title": "only a title"}]})
    with pytest.raises(ValueError):
        normalize_news({"headline": "x"})


def test_providers():
    raw = json.loads(
        '{"hospitals": [{"name": "AIIMS", "contact": {"website": "https://www.aiims.edu"}}]}'
    )
    providers = normalize_providers(raw)
    assert providers.hospitals[0].contact.website == "https://www.aiims.edu"
    assert providers.doctors == []

    with pytest.raises(ValueError):
        normalize_providers({"clinics": []})


def test_providers_null_fields_take_defaults():
    raw = {
        "hospitals": [
            {"name": "AIIMS", "location": None, "specialties": None, "contact": None},
            {"name": "Apollo", "contact": {"phone": None, "website": "https://www.apollohospitals.com"}},
        ],
        "doctors": [{"name": "Dr. Rao", "specialty": None, "experience": None, "languages": None}],
    }
    providers = normalize_providers(raw)

    aiims, apollo = providers.hospitals
    assert aiims.location == ""
    assert aiims.specialties == []
    assert aiims.contact.website is None
    assert apollo.contact.website == "https://www.apollohospitals.com"
    assert providers.doctors[0].specialty == ""
    assert providers.doctors[0].languages == []


def test_providers_null_name_still_rejected():
    with pytest.raises(ValidationError):
        normalize_providers({"hospitals": [{"name": None}]})
