"""API tests using FastAPI TestClient."""
import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ielts_writer.integrations.interfaces.scoring_oracle import OracleError
from ielts_writer.main import create_app
from ielts_writer.container import build_container

from fakes import FakeOracle


ESSAY = {
    "title": "Social Media Impact",
    "content": "Technology shapes how we meet.\n\nIt also isolates some people.",
    "prompt": "Discuss both views and give your own opinion.",
    "word_count": 10,
    "time_spent": 300,
}


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "scoring_configured": True}


# ------------------------------------------------------------------
# Essay CRUD
# ------------------------------------------------------------------
def test_create_essay(client):
    resp = client.post("/api/essays", json=ESSAY)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 1
    assert data["title"] == "Social Media Impact"
    assert data["time_spent"] == 300
    assert data["created_at"] == data["updated_at"]


def test_create_essay_defaults_counts(client):
    body = {k: ESSAY[k] for k in ("title", "content", "prompt")}
    data = client.post("/api/essays", json=body).json()
    assert data["word_count"] == 0
    assert data["time_spent"] == 0


@pytest.mark.parametrize(
    "body",
    [
        {"content": "x", "prompt": "y"},                       # missing title
        {**ESSAY, "word_count": "10"},                          # wrong type
        {**ESSAY, "title": 42},
        {**ESSAY, "time_spent": -5},
    ],
)
def test_create_essay_rejects_invalid_body(client, body):
    resp = client.post("/api/essays", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid request data"
    assert client.get("/api/essays").json() == []


def test_ids_increase_and_are_not_reused(client):
    first = client.post("/api/essays", json=ESSAY).json()["id"]
    second = client.post("/api/essays", json=ESSAY).json()["id"]
    client.delete(f"/api/essays/{second}")
    third = client.post("/api/essays", json=ESSAY).json()["id"]
    assert first < second < third


def test_list_and_get_essays(client):
    created = client.post("/api/essays", json=ESSAY).json()
    assert [e["id"] for e in client.get("/api/essays").json()] == [created["id"]]

    resp = client.get(f"/api/essays/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_missing_essay_is_404(client):
    resp = client.get("/api/essays/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Essay not found"


def test_non_integer_essay_id_is_400(client):
    assert client.get("/api/essays/abc").status_code == 400


def test_patch_merges_only_given_fields(client):
    created = client.post("/api/essays", json=ESSAY).json()
    resp = client.patch(f"/api/essays/{created['id']}", json={"content": "Rewritten.", "word_count": 1})
    assert resp.status_code == 200
    data = resp.json()
    assert data["content"] == "Rewritten."
    assert data["word_count"] == 1
    assert data["title"] == ESSAY["title"]
    assert data["prompt"] == ESSAY["prompt"]
    assert data["time_spent"] == ESSAY["time_spent"]
    assert data["created_at"] == created["created_at"]
    assert datetime.fromisoformat(data["updated_at"]) > datetime.fromisoformat(created["updated_at"])


def test_patch_missing_essay_is_404(client):
    assert client.patch("/api/essays/7", json={"title": "x"}).status_code == 404


@pytest.mark.parametrize("changes", [{"title": None}, {"word_count": "many"}, {"time_spent": 1.5}])
def test_patch_rejects_invalid_body(client, changes):
    created = client.post("/api/essays", json=ESSAY).json()
    resp = client.patch(f"/api/essays/{created['id']}", json=changes)
    assert resp.status_code == 400
    assert client.get(f"/api/essays/{created['id']}").json() == created


def test_delete_essay(client):
    created = client.post("/api/essays", json=ESSAY).json()
    resp = client.delete(f"/api/essays/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Essay deleted successfully"}
    assert client.get(f"/api/essays/{created['id']}").status_code == 404
    assert client.delete(f"/api/essays/{created['id']}").status_code == 404


# ------------------------------------------------------------------
# Prompts
# ------------------------------------------------------------------
def test_list_seeded_prompts(client):
    prompts = client.get("/api/prompts").json()
    assert len(prompts) == 5
    assert [p["id"] for p in prompts] == [1, 2, 3, 4, 5]
    assert prompts[0]["category"] == "Technology & Society"
    assert {p["difficulty"] for p in prompts} <= {"beginner", "intermediate", "advanced"}


def test_filter_prompts_by_category(client):
    prompts = client.get("/api/prompts", params={"category": "Environment"}).json()
    assert [p["title"] for p in prompts] == ["Climate Change Solutions"]
    assert client.get("/api/prompts", params={"category": "environment"}).json() == []


def test_get_prompt(client):
    resp = client.get("/api/prompts/3")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Online vs Traditional Learning"
    assert client.get("/api/prompts/99").status_code == 404


# ------------------------------------------------------------------
# Essay validation (scoring)
# ------------------------------------------------------------------
def test_validate_essay_returns_evaluation(client, fake_oracle, essay_text):
    resp = client.post("/api/validate-essay", json={"content": essay_text(260), "prompt": "Discuss both views."})
    assert resp.status_code == 200
    data = resp.json()
    assert data["overall_score"] == 6.5
    assert data["task_response"] == 7
    assert data["strengths"] == ["Clear thesis", "Good paragraphing"]
    assert data["word_count"] == 262
    assert len(fake_oracle.calls) == 1


def test_validate_short_essay_never_reaches_oracle(client, fake_oracle, essay_text):
    resp = client.post("/api/validate-essay", json={"content": essay_text(100), "prompt": "Discuss."})
    assert resp.status_code == 400
    assert "at least 250 words" in resp.json()["detail"]
    assert fake_oracle.calls == []


def test_validate_empty_essay(client, fake_oracle):
    resp = client.post("/api/validate-essay", json={"content": "   \n ", "prompt": "Discuss."})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please write your essay before submitting for validation"
    assert fake_oracle.calls == []


def test_validate_requires_body_fields(client):
    assert client.post("/api/validate-essay", json={"content": "text"}).status_code == 400


def test_validate_out_of_range_score_is_generic_502(essay_text, evaluation_payload):
    oracle = FakeOracle(reply=json.dumps(evaluation_payload(lexicalResource=9.5)))
    with TestClient(create_app(build_container(oracle=oracle))) as client:
        resp = client.post("/api/validate-essay", json={"content": essay_text(300), "prompt": "Discuss."})
    assert resp.status_code == 502
    assert resp.json() == {"detail": "Failed to validate essay with AI"}


def test_validate_oracle_failure_is_generic_502(essay_text):
    oracle = FakeOracle(error=OracleError("connection reset"))
    with TestClient(create_app(build_container(oracle=oracle))) as client:
        resp = client.post("/api/validate-essay", json={"content": essay_text(300), "prompt": "Discuss."})
    assert resp.status_code == 502
    assert "connection reset" not in resp.text


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------
def test_each_app_owns_its_own_store(fake_oracle):
    first = create_app(build_container(oracle=fake_oracle))
    second = create_app(build_container(oracle=fake_oracle))
    with TestClient(first) as a, TestClient(second) as b:
        a.post("/api/essays", json=ESSAY)
        assert len(a.get("/api/essays").json()) == 1
        assert b.get("/api/essays").json() == []


def test_shutdown_closes_oracle(container, fake_oracle):
    with TestClient(create_app(container)):
        assert fake_oracle.closed is False
    assert fake_oracle.closed is True
