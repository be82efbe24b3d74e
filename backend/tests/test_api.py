from fastapi.testclient import TestClient

from api.dependencies import get_llm_client
from config import settings
from main import app

app.dependency_overrides[get_llm_client] = lambda: None
client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert isinstance(data["llm_configured"], bool)


def test_analyze_job():
    response = client.post(
        "/jobs/analyze",
        json={
            "title": "Backend Engineer",
            "description": "Python required. Docker is a plus.\n\nBuild internal tools for the data team.",
        },
    )
    assert response.status_code == 200
    data = response.json()
    terms = [r["term"] for r in data["requirements"]]
    assert terms[:2] == ["backend", "engineer"]
    assert "python" in data["required_skills"]
    assert data["responsibilities"] == ["Build internal tools for the data team"]
    assert data["experience_level"] == "Mid-Level"


def test_analyze_job_requires_description():
    response = client.post("/jobs/analyze", json={"title": "Backend Engineer"})
    assert response.status_code == 422


def test_match():
    response = client.post(
        "/match",
        json={
            "requirements": [
                {"term": "py", "weight": 2, "category": "required"},
                {"term": "docker", "weight": 1},
            ],
            "profile_skills": ["Python"],
            "profile_text": "Shipped containers with Docker",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["match_percent"] == 75
    assert data["partial"][0]["term"] == "py"
    assert data["partial"][0]["match_type"] == "partial"
    assert data["direct"][0]["evidence"] == "Found in profile"
    assert data["gap"] == []


def test_match_rejects_negative_weight():
    response = client.post(
        "/match",
        json={"requirements": [{"term": "python", "weight": -1}]},
    )
    assert response.status_code == 422


def test_match_rejects_long_profile():
    response = client.post(
        "/match",
        json={"requirements": [], "profile_text": "x" * (settings.max_text_length + 1)},
    )
    assert response.status_code == 400


def test_score_extracts_bullets():
    response = client.post(
        "/score",
        json={
            "plain_text": "Experience\n- Led 3 teams\n- Built 2 apps\nSkills\nPython",
            "requirements": [{"term": "python", "weight": 1}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["breakdown"]["reviewer"]["metrics_score"] == 16
    assert data["breakdown"]["reviewer"]["action_verb_score"] == 100
    assert data["breakdown"]["ats"]["keyword_coverage"] == 100
    assert data["sections_found"] == ["experience", "skills"]
    assert 0 < len(data["recommendations"]) <= 5
