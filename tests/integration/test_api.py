"""HTTP tests for the FastAPI surface with a scripted gateway."""

from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import FakeGateway, make_question_payload
from exam_rag.api.app import create_app
from exam_rag.config.constants import OLLAMA_MODELS
from exam_rag.config.settings import Settings
from exam_rag.exceptions import ProviderError
from exam_rag.pipeline.study_assistant import StudyAssistant

QUESTION = {
    "id": "topic5_scripting.12",
    "topic": "Topic 5: Shell Scripting (Bash)",
    "statement": "Which special variable holds the number of arguments?",
    "options": ["$#", "$@", "$?", "$$"],
    "correct_index": 1,
    "difficulty": "intermediate",
}


def _client(settings, gateway) -> TestClient:
    return TestClient(create_app(settings, StudyAssistant(gateway)))


def test_health(settings):
    client = _client(settings, FakeGateway())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "model": "gemini-test",
        "credential_configured": True,
        "ollama_models": list(OLLAMA_MODELS),
    }
    assert "X-Request-ID" in response.headers


def test_solve(settings, answer_payload):
    gateway = FakeGateway(text_responses=["$# counts arguments."], structured_responses=[answer_payload])
    response = _client(settings, gateway).post(
        "/solve",
        json={"question": QUESTION, "language": "en", "config": {"provider": "external", "external_model": "gpt-4o"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["question_id"] == QUESTION["id"]
    assert data["predicted_index"] == 1
    assert data["reasoning"].startswith("[Model: gpt-4o] ")
    assert data["retrieved_context"][0]["source"] == "iso_notes_en.pdf"


def test_solve_partial_config_uses_configured_defaults(answer_payload):
    settings = Settings(google_api_key="test-key", default_model="mistral", default_temperature=0.2)
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[answer_payload])
    response = _client(settings, gateway).post(
        "/solve", json={"question": QUESTION, "config": {"provider": "ollama"}}
    )
    assert response.status_code == 200
    assert response.json()["reasoning"].startswith("[Model: mistral] ")
    assert "Temperature: 0.2" in gateway.structured_calls[0][0]


def test_solve_without_config_keeps_default_label(settings, answer_payload):
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[answer_payload])
    response = _client(settings, gateway).post("/solve", json={"question": QUESTION})
    assert response.json()["reasoning"].startswith("[Model: Gemini (Default)] ")


def test_solve_rejects_three_options(settings):
    bad = dict(QUESTION, options=["a", "b", "c"])
    response = _client(settings, FakeGateway()).post("/solve", json={"question": bad})
    assert response.status_code == 422


def test_solve_provider_error_maps_to_502(settings):
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[ProviderError("down")])
    response = _client(settings, gateway).post("/solve", json={"question": QUESTION})
    assert response.status_code == 502
    assert response.json()["error"] == "ProviderError"


def test_missing_credential_maps_to_503():
    settings = Settings(google_api_key="")
    app = create_app(settings, StudyAssistant.from_settings(settings))
    response = TestClient(app).post("/solve", json={"question": QUESTION})
    assert response.status_code == 503
    assert response.json()["error"] == "MissingCredentialError"


def test_verify(settings, jury_payload):
    gateway = FakeGateway(structured_responses=[jury_payload])
    response = _client(settings, gateway).post("/verify", json={"question": QUESTION, "language": "es"})
    assert response.status_code == 200
    data = response.json()
    assert data["consensus_index"] == 1
    assert data["agreement_percentage"] == 66.67
    assert data["has_tie"] is False
    assert len(data["votes"]) == 3


def test_generate_batch(settings):
    gateway = FakeGateway(structured_responses=[make_question_payload(6)])
    response = _client(settings, gateway).post(
        "/generate/batch",
        json={"topic": "Global (mixed topics)", "count": 6, "language": "en", "difficulty": "basic"},
    )
    assert response.status_code == 200
    questions = response.json()["questions"]
    assert len(questions) == 6
    assert questions[0]["topic"] == "Random: Topic 1"
    assert all(q["difficulty"] == "basic" for q in questions)


def test_generate_variants(settings):
    gateway = FakeGateway(structured_responses=[make_question_payload(2)])
    response = _client(settings, gateway).post(
        "/generate/variants", json={"question": QUESTION, "count": 2, "language": "eu"}
    )
    assert response.status_code == 200
    variants = response.json()["questions"]
    assert {v["topic"] for v in variants} == {QUESTION["topic"]}
    assert {v["difficulty"] for v in variants} == {"intermediate"}


def test_regenerate_distractor(settings):
    gateway = FakeGateway(text_responses=["$!"])
    response = _client(settings, gateway).post(
        "/generate/distractor", json={"question": QUESTION, "option_index": 3, "language": "en"}
    )
    assert response.status_code == 200
    assert response.json() == {"option_index": 3, "text": "$!"}


def test_regenerate_distractor_rejects_bad_index(settings):
    response = _client(settings, FakeGateway()).post(
        "/generate/distractor", json={"question": QUESTION, "option_index": 0}
    )
    assert response.status_code == 422


def test_extract_topics(settings):
    topics = ["Topic 1: Linux", "Topic 2: Files", "Topic 3: Permissions", "Topic 4: Processes"]
    gateway = FakeGateway(structured_responses=[topics])
    response = _client(settings, gateway).get("/generate/topics")
    assert response.status_code == 200
    assert response.json() == {"topics": topics}


def test_request_id_is_echoed(settings):
    response = _client(settings, FakeGateway()).get("/health", headers={"X-Request-ID": "ui-42"})
    assert response.headers["X-Request-ID"] == "ui-42"
