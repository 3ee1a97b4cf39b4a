"""Tests for the two-phase RAG orchestrator."""

from __future__ import annotations

import pytest

from conftest import FakeGateway
from exam_rag.config.constants import FALLBACK_CONTEXT
from exam_rag.exceptions import (
    EmptyResponseError,
    MalformedOutputError,
    MissingCredentialError,
    ProviderError,
)
from exam_rag.models.domain import SolverConfig
from exam_rag.pipeline.rag_orchestrator import RAGOrchestrator, preview_context


async def test_solve_happy_path(sample_question, answer_payload):
    gateway = FakeGateway(text_responses=["chmod u+x adds execute for the owner."],
                          structured_responses=[answer_payload])
    record = await RAGOrchestrator(gateway).solve(sample_question, SolverConfig(selected_model="llama3"), "en")

    assert record.question_id == sample_question.id
    assert record.predicted_index in {1, 2, 3, 4}
    assert 0.0 <= record.confidence <= 1.0
    assert record.reasoning == "[Model: llama3] u+x targets the owner."
    assert len(record.retrieved_context) == 1
    doc = record.retrieved_context[0]
    assert doc.source == "iso_notes_en.pdf"
    assert doc.relevance_score == 0.92
    assert doc.content == "chmod u+x adds execute for the owner...."


async def test_answer_prompt_embeds_retrieved_context(sample_question, answer_payload):
    gateway = FakeGateway(text_responses=["SIMULATED CONTEXT"], structured_responses=[answer_payload])
    await RAGOrchestrator(gateway).solve(sample_question, None, "es")
    prompt, schema_name = gateway.structured_calls[0]
    assert "SIMULATED CONTEXT" in prompt
    assert schema_name == "answer"


async def test_default_model_tag(sample_question, answer_payload):
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[answer_payload])
    record = await RAGOrchestrator(gateway).solve(sample_question)
    assert record.reasoning.startswith("[Model: Gemini (Default)] ")
    assert record.retrieved_context[0].source == "iso_notes_es.pdf"


async def test_context_truncated_to_preview(sample_question, answer_payload):
    long_context = "x" * 1000
    gateway = FakeGateway(text_responses=[long_context], structured_responses=[answer_payload])
    record = await RAGOrchestrator(gateway).solve(sample_question)
    assert record.retrieved_context[0].content == "x" * 300 + "..."


@pytest.mark.parametrize(
    "failure",
    [EmptyResponseError("empty"), ProviderError("down"), MalformedOutputError("bad")],
)
async def test_retrieval_failure_falls_back(sample_question, answer_payload, failure):
    gateway = FakeGateway(text_responses=[failure], structured_responses=[answer_payload])
    record = await RAGOrchestrator(gateway).solve(sample_question)
    assert record.predicted_index == 1
    assert record.retrieved_context[0].content == preview_context(FALLBACK_CONTEXT)
    prompt, _ = gateway.structured_calls[0]
    assert FALLBACK_CONTEXT in prompt


async def test_retrieve_reports_fallback_branch(sample_question):
    gateway = FakeGateway(text_responses=[""])
    outcome = await RAGOrchestrator(gateway).retrieve(sample_question, "en")
    assert outcome.is_fallback
    assert outcome.text == FALLBACK_CONTEXT
    assert outcome.reason


async def test_retrieve_reports_retrieved_branch(sample_question):
    gateway = FakeGateway(text_responses=["notes"])
    outcome = await RAGOrchestrator(gateway).retrieve(sample_question, "en")
    assert outcome.kind == "retrieved"
    assert outcome.text == "notes"
    assert outcome.reason is None


async def test_missing_credential_is_not_swallowed(sample_question):
    gateway = FakeGateway(text_responses=[MissingCredentialError("no key")])
    with pytest.raises(MissingCredentialError):
        await RAGOrchestrator(gateway).solve(sample_question)


async def test_answer_phase_failure_propagates(sample_question):
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[ProviderError("down")])
    with pytest.raises(ProviderError):
        await RAGOrchestrator(gateway).solve(sample_question)


async def test_answer_phase_malformed_propagates(sample_question):
    gateway = FakeGateway(
        text_responses=["ctx"],
        structured_responses=[{"predicted_index": 7, "reasoning": "r", "confidence": 0.5}],
    )
    with pytest.raises(MalformedOutputError):
        await RAGOrchestrator(gateway).solve(sample_question)


async def test_answer_record_is_immutable(sample_question, answer_payload):
    gateway = FakeGateway(text_responses=["ctx"], structured_responses=[answer_payload])
    record = await RAGOrchestrator(gateway).solve(sample_question)
    with pytest.raises(AttributeError):
        record.predicted_index = 3
