"""Evaluation runner: loads dataset, solves each question via the live API."""

from __future__ import annotations

import asyncio
import json
import time
from pathlib import Path

import httpx

from exam_rag.evaluation.metrics import EvalCaseResult, match_keywords

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 60.0
DEFAULT_CONCURRENCY = 3

DATASET_PATH = (
    Path(__file__).parent.parent.parent.parent / "tests" / "fixtures" / "eval_dataset.json"
)


def load_dataset(path: Path | None = None) -> list[dict]:
    """Load evaluation dataset from JSON file."""
    p = path or DATASET_PATH
    with open(p, encoding="utf-8") as f:
        return json.load(f)


async def run_single_case(
    client: httpx.AsyncClient,
    case: dict,
    semaphore: asyncio.Semaphore,
) -> EvalCaseResult:
    """Solve a single evaluation question against the API."""
    async with semaphore:
        question = case["question"]
        language = case.get("language", "es")
        keywords = case.get("expected_context_keywords", [])
        start = time.monotonic()

        try:
            response = await client.post(
                "/solve",
                json={"question": question, "language": language},
            )
            response.raise_for_status()
            data = response.json()

            context = " ".join(d["content"] for d in data.get("retrieved_context", []))
            found, missing = match_keywords(context, keywords)

            return EvalCaseResult(
                case_id=question["id"],
                topic=question["topic"],
                language=language,
                expected_index=question["correct_index"],
                predicted_index=data["predicted_index"],
                confidence=data.get("confidence", 0.0),
                expected_context_keywords=keywords,
                keywords_found=found,
                keywords_missing=missing,
                latency_ms=(time.monotonic() - start) * 1000,
            )
        except (httpx.HTTPError, KeyError, ValueError) as e:
            return EvalCaseResult(
                case_id=question["id"],
                topic=question["topic"],
                language=language,
                expected_index=question["correct_index"],
                predicted_index=None,
                confidence=0.0,
                expected_context_keywords=keywords,
                keywords_found=[],
                keywords_missing=keywords,
                latency_ms=(time.monotonic() - start) * 1000,
                error=str(e),
            )


async def run_evaluation(
    base_url: str = DEFAULT_BASE_URL,
    dataset_path: Path | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    concurrency: int = DEFAULT_CONCURRENCY,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[EvalCaseResult]:
    """Run the evaluation suite against a running server.

    Loads the dataset, solves each question through ``/solve`` and returns
    one EvalCaseResult per case.
    """
    dataset = load_dataset(dataset_path)
    semaphore = asyncio.Semaphore(concurrency)

    async with httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        transport=transport,
    ) as client:
        # Verify server is up
        try:
            health = await client.get("/health")
            health.raise_for_status()
        except httpx.HTTPError as e:
            raise ConnectionError(
                f"Cannot reach server at {base_url}/health. Is the server running? Error: {e}"
            ) from e

        tasks = [run_single_case(client, case, semaphore) for case in dataset]
        results = await asyncio.gather(*tasks)

    return list(results)
