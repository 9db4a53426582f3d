"""
AI endpoint tests (symptom check, chat, disease detail, news, providers, config)
"""
import json

import pytest
from fastapi.testclient import TestClient

from app.AIsystem.llm_client import CHAT_ERROR_REPLY, MissingCredentialError
from app.main import create_app
from app.storage.memory_storage import InMemoryRepository
from config.aiconfig import ai_settings
from tests.conftest import failing_client, scripted_client

pytestmark = pytest.mark.integration


def test_symptom_check_rejects_empty_list(client):
    response = client.post("/api/symptom-check", json={"symptoms": []})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert body["errors"][0]["field"] == "symptoms"


@pytest.mark.parametrize("payload", [{}, {"symptoms": "headache"}, {"symptoms": ["headache"], "userInfo": {"age": -1}}])
def test_symptom_check_schema_errors(client, payload):
    assert client.post("/api/symptom-check", json=payload).status_code == 400


def test_symptom_check_survives_provider_failure(make_client):
    with make_client(ai_client=failing_client()) as test_client:
        response = test_client.post("/api/symptom-check", json={"symptoms": ["headache"]})

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body["possibleConditions"], list)
    assert body["disclaimer"]
    assert isinstance(body["recommendations"], list)


def test_symptom_check_success(make_client):
    reply = json.dumps(
        {
            "possibleConditions": [
                {
                    "name": "Migraine",
                    "probability": "low",
                    "description": "Recurrent headaches",
                    "whenToSeekCare": "Worst headache of your life",
                    "relatedBodySystem": "Nervous System",
                }
            ]
        }
    )
    with make_client(ai_client=scripted_client(reply)) as test_client:
        response = test_client.post(
            "/api/symptom-check",
            json={"symptoms": ["headache"], "userInfo": {"age": 40, "medicalHistory": ["asthma"]}},
        )

    condition = response.json()["possibleConditions"][0]
    assert condition["probability"] == "Low"
    assert condition["whenToSeekCare"] == "Worst headache of your life"


def test_chat_requires_messages(client):
    assert client.post("/api/chat", json={"messages": []}).status_code == 400
    assert client.post("/api/chat", json={"messages": [{"role": "robot", "content": "x"}]}).status_code == 400


def test_chat_saves_history_for_user(make_client):
    with make_client(ai_client=scripted_client("Stay hydrated.")) as test_client:
        response = test_client.post(
            "/api/chat",
            json={"messages": [{"role": "user", "content": "I feel dizzy"}], "userId": 5},
        )
        history = test_client.get("/api/chat-history/5").json()

    assert response.json() == {"response": "Stay hydrated."}
    assert len(history) == 1
    assert history[0]["messages"][-1] == {"role": "assistant", "content": "Stay hydrated."}


def test_chat_without_user_saves_nothing(make_client):
    repository = InMemoryRepository()
    with make_client(ai_client=scripted_client("Hello"), repository=repository) as test_client:
        test_client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})
        assert test_client.get("/api/chat-history/1").json() == []


def test_chat_provider_failure_returns_apology(make_client):
    with make_client(ai_client=failing_client()) as test_client:
        response = test_client.post("/api/chat", json={"messages": [{"role": "user", "content": "hi"}]})
    assert response.status_code == 200
    assert response.json()["response"] == CHAT_ERROR_REPLY


def test_disease_detailed(make_client):
    with make_client(ai_client=scripted_client("not json")) as test_client:
        response = test_client.get("/api/disease-detailed/Asthma")
        blank = test_client.get("/api/disease-detailed/%20")

    assert response.status_code == 200
    assert response.json()["overview"] == "Information temporarily unavailable"
    assert response.json()["researchUpdates"] == ""
    assert blank.status_code == 400


def test_ai_news_failure_is_empty_list(make_client):
    with make_client(ai_client=failing_client()) as test_client:
        response = test_client.get("/api/ai-news", params={"category": "Cardiology"})
    assert response.status_code == 200
    assert response.json() == []


def test_healthcare_providers(make_client):
    reply = json.dumps({"hospitals": [{"name": "Apollo Hospitals", "location": "Chennai"}], "doctors": []})
    with make_client(ai_client=scripted_client(reply)) as test_client:
        response = test_client.get("/api/healthcare-providers", params={"specialty": "cardiology"})

    assert response.status_code == 200
    assert response.json()["hospitals"][0]["name"] == "Apollo Hospitals"
    assert response.json()["doctors"] == []


def test_ai_config_round_trip(client):
    current = client.get("/api/ai/config").json()
    assert current["llm_provider"] == "openai"
    assert "openai_api_key" not in current

    updated = client.post("/api/ai/config", json={"chat_temperature": 0.9, "openai_model": "gpt-4o-mini"})
    assert updated.status_code == 200
    assert updated.json()["chat_temperature"] == 0.9
    assert updated.json()["current_llm_model"] == "gpt-4o-mini"
    assert ai_settings.CHAT_TEMPERATURE == 0.9

    assert client.post("/api/ai/config", json={"chat_temperature": 5}).status_code == 400


def test_startup_fails_without_credential():
    ai_settings.OPENAI_API_KEY = ""
    app = create_app(repository=InMemoryRepository())

    with pytest.raises(MissingCredentialError):
        with TestClient(app):
            pass
