import json

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_gemini_client
from main import app
from services import assessment_engine, score_storage


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


ENHANCED = {
    "score": 64,
    "moat": "Medium",
    "saturation_year": 2035,
    "verdict": "The Courtroom Holdout",
    "timeline_context": "Discovery is automated; persuasion is not.",
    "pivot_strategy": "Specialize in trial advocacy.",
    "upskilling_roadmap": ["Trial advocacy", "Mediation", "Expert witness prep", "AI discovery", "Ethics"],
    "human_moat_triggers": ["Jury persuasion", "Client trust", "Courtroom improvisation", "Moral judgment"],
    "recommended_tools": [
        {"name": "Discovery AI", "description": "Let it read, you argue"},
        {"name": "Mock jury panels", "description": "Rehearse persuasion"},
        {"name": "Mediation training", "description": "Settle before trial", "url": "https://example.org"},
    ],
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["gemini_configured"] is False


def test_assess(client):
    response = client.post("/assess", json={"university": "State College", "major": "Nursing"})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 98
    assert data["moat"] == "High"
    assert data["saturation_year"] == 2050
    assert data["verdict"] == "The Human Premium"
    assert data["scoring_method"] == "offline"
    assert data["degraded"] is False
    # Offline path carries no extension fields
    assert data["upskilling_roadmap"] is None
    assert data["human_moat_triggers"] is None
    assert data["recommended_tools"] is None


def test_assess_elite_clamped(client):
    response = client.post("/assess", json={"university": "Harvard University", "major": "Nursing"})
    assert response.json()["score"] == 100


def test_assess_trims_input(client):
    response = client.post("/assess", json={"university": "  MIT  ", "major": "  computer science "})
    assert response.status_code == 200
    assert response.json()["score"] == 27


@pytest.mark.parametrize(
    "body",
    [
        {"university": "", "major": "Nursing"},
        {"university": "State College", "major": "   "},
        {"university": "State College"},
        {"major": "Nursing"},
        {"university": "State College", "major": "x" * 201},
    ],
)
def test_assess_rejects_invalid_input(client, body):
    response = client.post("/assess", json=body)
    assert response.status_code == 422


def test_assess_records_audit_entry(client):
    client.post("/assess", json={"university": "State College", "major": "Plumbing"})
    entries = score_storage.get_assessments()
    assert len(entries) == 1
    assert entries[0].score == 88
    assert entries[0].major == "Plumbing"
    assert entries[0].university == "State College"
    assert entries[0].source == "offline"


def test_enhance_falls_back_to_offline_when_not_configured(client):
    response = client.post("/assess/enhance", json={"university": "Yale", "major": "Law"})
    assert response.status_code == 200
    data = response.json()
    offline = assessment_engine.assess("Law", "Yale")
    assert {k: data[k] for k in offline.model_dump()} == offline.model_dump(mode="json")
    assert data["scoring_method"] == "offline"
    assert data["degraded"] is True
    assert data["upskilling_roadmap"] is None
    assert data["human_moat_triggers"] is None
    assert data["recommended_tools"] is None


def test_enhance_falls_back_on_gemini_error(client, fake_gemini):
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini(error=RuntimeError("boom"))
    response = client.post("/assess/enhance", json={"university": "State College", "major": "Dentistry"})
    data = response.json()
    assert response.status_code == 200
    assert data["score"] == 88
    assert data["verdict"] == "The Moravec Firewall"
    assert data["degraded"] is True
    assert data["recommended_tools"] is None


def test_enhance_falls_back_on_incomplete_payload(client, fake_gemini):
    partial = {k: v for k, v in ENHANCED.items() if k != "upskilling_roadmap"}
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini(text=json.dumps(partial))
    data = client.post("/assess/enhance", json={"university": "State College", "major": "Law"}).json()
    assert data["verdict"] == "The Middleman Massacre"
    assert data["human_moat_triggers"] is None


def test_enhance_success(client, fake_gemini):
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini(text=json.dumps(ENHANCED))
    response = client.post("/assess/enhance", json={"university": "State College", "major": "Law"})
    assert response.status_code == 200
    data = response.json()
    assert data["scoring_method"] == "gemini"
    assert data["degraded"] is False
    assert data["score"] == 64
    assert data["verdict"] == "The Courtroom Holdout"
    assert len(data["upskilling_roadmap"]) == 5
    assert len(data["human_moat_triggers"]) == 4
    assert data["recommended_tools"][2]["url"] == "https://example.org"

    entries = score_storage.get_assessments()
    assert [(e.score, e.source) for e in entries] == [(64, "gemini")]


def test_stats_empty(client):
    data = client.get("/stats").json()
    assert data["average_score"] is None
    assert data["total_assessments"] == 0
    assert data["message"] == "No data yet"


def test_stats_after_assessments(client):
    client.post("/assess", json={"university": "State College", "major": "Computer Science"})
    client.post("/assess", json={"university": "State College", "major": "Nursing"})
    data = client.get("/stats").json()
    assert data["total_assessments"] == 2
    assert data["average_score"] == round((15 + 98) / 2)
    assert data["most_vulnerable"] == "Technology"
    assert data["most_protected"] == "Healthcare"


def test_degrees_suggest(client):
    data = client.get("/degrees", params={"q": "engineering", "limit": 5}).json()
    assert len(data) == 5
    assert all("engineering" in d["name"].lower() for d in data)


def test_degree_lookup(client):
    response = client.get("/degrees/lookup", params={"name": "cs"})
    assert response.status_code == 200
    assert response.json() == {
        "name": "Computer Science",
        "category": "Technology",
        "market_value": "High",
    }


def test_degree_lookup_unknown(client):
    response = client.get("/degrees/lookup", params={"name": "Underwater Basket Weaving"})
    assert response.status_code == 404
