"""Shared test fixtures."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest

from exam_rag.config.settings import Settings
from exam_rag.exceptions import EmptyResponseError, MalformedOutputError
from exam_rag.generation.schemas import ResponseSchema
from exam_rag.models.domain import AnswerRecord, Question, RetrievedDocument


class FakeGateway:
    """Scripted gateway double.

    Text responses are returned in order; structured responses are raw
    JSON-compatible data that still goes through the schema validator, so
    tests exercise the same boundary as the real gateway.
    """

    def __init__(
        self,
        text_responses: list[Any] | None = None,
        structured_responses: list[Any] | None = None,
    ) -> None:
        self.text_responses = list(text_responses or [])
        self.structured_responses = list(structured_responses or [])
        self.text_prompts: list[str] = []
        self.structured_calls: list[tuple[str, str]] = []

    async def generate_text(self, prompt: str) -> str:
        self.text_prompts.append(prompt)
        response = self.text_responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if not response:
            raise EmptyResponseError("no text")
        return response

    async def generate_structured(self, prompt: str, schema: ResponseSchema) -> Any:
        self.structured_calls.append((prompt, schema.name))
        response = self.structured_responses.pop(0)
        if isinstance(response, Exception):
            raise response
        try:
            return schema.validate(response)
        except ValueError as e:
            raise MalformedOutputError(str(e)) from e


class FakeModels:
    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(text=response)


class FakeClient:
    """Mimics the ``client.aio.models`` surface of google-genai."""

    def __init__(self, responses: list[Any]) -> None:
        self.models = FakeModels(responses)
        self.aio = SimpleNamespace(models=self.models)


def as_json(data: Any) -> str:
    return json.dumps(data)


@pytest.fixture
def settings():
    """Test settings with a dummy credential."""
    return Settings(google_api_key="test-key", gemini_model="gemini-test")


@pytest.fixture
def sample_question():
    return Question(
        id="topic3_permissions.05",
        topic="Topic 3: Permissions and User Management",
        statement=(
            "Which command adds execute permission for the owner of 'script.sh' "
            "without changing any other permission?"
        ),
        options=[
            "chmod u+x script.sh",
            "chmod 777 script.sh",
            "chown +x script.sh",
            "chmod a+x script.sh",
        ],
        correct_index=1,
        difficulty="basic",
    )


@pytest.fixture
def sample_answer(sample_question):
    return AnswerRecord(
        question_id=sample_question.id,
        predicted_index=1,
        reasoning="[Model: llama3] u+x only touches the owner.",
        confidence=0.9,
        retrieved_context=[
            RetrievedDocument(
                source="iso_notes_en.pdf",
                content="chmod u+x adds execute...",
                relevance_score=0.92,
            )
        ],
    )


@pytest.fixture
def answer_payload():
    return {"predicted_index": 1, "reasoning": "u+x targets the owner.", "confidence": 0.87}


@pytest.fixture
def jury_payload():
    return [
        {"agent_name": "Senior SysAdmin", "role": "sysadmin", "vote_index": 1, "short_reason": "u+x is standard."},
        {"agent_name": "Theory Professor", "role": "professor", "vote_index": 1, "short_reason": "Symbolic mode, owner only."},
        {"agent_name": "Security Auditor", "role": "security", "vote_index": 4, "short_reason": "a+x is too broad but works."},
    ]


def make_question_payload(n: int) -> list[dict]:
    return [
        {
            "statement": f"Generated question {i}?",
            "options": [f"option {i}.{j}" for j in range(1, 5)],
            "correct_index": (i % 4) + 1,
        }
        for i in range(n)
    ]
