"""
Disease database endpoint tests
"""
import pytest

pytestmark = pytest.mark.integration


def test_body_systems(client):
    response = client.get("/api/body-systems")
    assert response.status_code == 200
    systems = response.json()
    assert len(systems) == 5
    assert {"id", "name", "description", "imageUrl"} <= set(systems[0])


def test_body_system_by_id(client):
    assert client.get("/api/body-systems/2").json()["name"] == "Respiratory System"
    assert client.get("/api/body-systems/99").status_code == 404


def test_disease_by_id_errors(client):
    response = client.get("/api/diseases/abc")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid ID format"

    response = client.get("/api/diseases/999999")
    assert response.status_code == 404
    assert response.json() == {"message": "Disease not found"}


def test_disease_uses_camel_case(client):
    disease = client.get("/api/diseases/1").json()
    assert disease["name"] == "Coronary Artery Disease"
    assert disease["bodySystemId"] == 1
    assert "body_system_id" not in disease


def test_diseases_by_system(client):
    assert [d["name"] for d in client.get("/api/diseases/by-system/5").json()] == ["Type 2 Diabetes"]
    assert client.get("/api/diseases/by-system/42").json() == []
    assert client.get("/api/diseases/by-system/x").status_code == 400


def test_disease_search(client):
    upper = client.get("/api/diseases/search", params={"q": "DIABETES"})
    lower = client.get("/api/diseases/search", params={"q": "diabetes"})
    assert upper.status_code == 200
    assert upper.json() == lower.json()
    assert len(lower.json()) == 1


def test_disease_search_passes_query_as_sent(client):
    """Surrounding whitespace is part of the query"""
    leading = client.get("/api/diseases/search", params={"q": " diabetes"}).json()
    trailing = client.get("/api/diseases/search", params={"q": "diabetes "}).json()

    assert [d["name"] for d in leading] == ["Type 2 Diabetes"]
    assert trailing == []


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
def test_disease_search_requires_query(client, params):
    response = client.get("/api/diseases/search", params=params)
    assert response.status_code == 400
    assert response.json()["message"] == "Search query is required"


def test_symptoms(client):
    symptoms = client.get("/api/symptoms").json()
    assert len(symptoms) == 20
    assert any(s["bodySystemId"] is None for s in symptoms)


def test_storage_failure_maps_to_500(make_client, empty_repository, monkeypatch):
    async def broken():
        raise RuntimeError("disk on fire")

    with make_client(repository=empty_repository) as test_client:
        monkeypatch.setattr(empty_repository, "get_all_body_systems", broken)
        response = test_client.get("/api/body-systems")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch body systems", "error": "disk on fire"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert "message" in response.json()
