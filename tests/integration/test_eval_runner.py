"""Evaluation runner against the in-process ASGI app."""

from __future__ import annotations

import httpx

from conftest import FakeGateway
from exam_rag.api.app import create_app
from exam_rag.evaluation.metrics import compute_metrics
from exam_rag.evaluation.runner import DATASET_PATH, load_dataset, run_evaluation
from exam_rag.pipeline.study_assistant import StudyAssistant


def test_dataset_loads():
    dataset = load_dataset()
    assert len(dataset) == 3
    assert all(len(case["question"]["options"]) == 4 for case in dataset)


async def test_run_evaluation(settings):
    dataset = load_dataset(DATASET_PATH)
    gateway = FakeGateway(
        text_responses=["chmod u+x and $# arguments and tail"] * len(dataset),
        structured_responses=[
            {"predicted_index": 1, "reasoning": "r", "confidence": 0.8}
        ] * len(dataset),
    )
    app = create_app(settings, StudyAssistant(gateway))

    results = await run_evaluation(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=app),
        concurrency=1,
    )

    assert len(results) == 3
    assert all(r.error is None for r in results)
    metrics = compute_metrics(results)
    # the third case expects option 3
    assert metrics["accuracy"] == 2 / 3
    assert metrics["keyword_precision"] == 1.0
