"""Evaluation metric computation for solved questions."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby


@dataclass
class EvalCaseResult:
    """Result of solving a single evaluation question."""

    case_id: str
    topic: str
    language: str
    expected_index: int
    predicted_index: int | None
    confidence: float
    expected_context_keywords: list[str]
    keywords_found: list[str]
    keywords_missing: list[str]
    latency_ms: float
    error: str | None = None

    @property
    def correct(self) -> bool:
        return self.error is None and self.predicted_index == self.expected_index


def match_keywords(text: str, keywords: list[str]) -> tuple[list[str], list[str]]:
    """Case-insensitive substring match, returning (found, missing)."""
    lowered = text.lower()
    found = [kw for kw in keywords if kw.lower() in lowered]
    missing = [kw for kw in keywords if kw.lower() not in lowered]
    return found, missing


def keyword_precision(results: list[EvalCaseResult]) -> float:
    """Fraction of expected context keywords that the retrieved context contained."""
    expected = sum(len(r.expected_context_keywords) for r in results if r.error is None)
    if expected == 0:
        return 0.0
    found = sum(len(r.keywords_found) for r in results if r.error is None)
    return found / expected


def compute_metrics(results: list[EvalCaseResult]) -> dict:
    """Compute accuracy, confidence calibration and retrieval keyword coverage."""
    total = len(results)
    if total == 0:
        return _empty_metrics()

    valid = [r for r in results if r.error is None]
    errors = [r for r in results if r.error is not None]

    correct = [r for r in valid if r.correct]
    wrong = [r for r in valid if not r.correct]

    return {
        "total_cases": total,
        "valid_cases": len(valid),
        "accuracy": len(correct) / len(valid) if valid else 0.0,
        "avg_confidence": sum(r.confidence for r in valid) / len(valid) if valid else 0.0,
        "avg_confidence_correct": (
            sum(r.confidence for r in correct) / len(correct) if correct else 0.0
        ),
        "avg_confidence_wrong": sum(r.confidence for r in wrong) / len(wrong) if wrong else 0.0,
        "keyword_precision": keyword_precision(results),
        "avg_latency_ms": sum(r.latency_ms for r in valid) / len(valid) if valid else 0.0,
        "error_count": len(errors),
    }


def compute_topic_metrics(results: list[EvalCaseResult]) -> dict[str, dict]:
    """Per-topic breakdown of accuracy and confidence."""
    valid = [r for r in results if r.error is None]
    if not valid:
        return {}

    topics: dict[str, dict] = {}
    sorted_results = sorted(valid, key=lambda r: r.topic)

    for topic, group in groupby(sorted_results, key=lambda r: r.topic):
        topic_results = list(group)
        n = len(topic_results)
        topics[topic] = {
            "count": n,
            "accuracy": sum(r.correct for r in topic_results) / n,
            "avg_confidence": sum(r.confidence for r in topic_results) / n,
            "avg_latency_ms": sum(r.latency_ms for r in topic_results) / n,
        }

    return topics


def _empty_metrics() -> dict:
    return {
        "total_cases": 0,
        "valid_cases": 0,
        "accuracy": 0.0,
        "avg_confidence": 0.0,
        "avg_confidence_correct": 0.0,
        "avg_confidence_wrong": 0.0,
        "keyword_precision": 0.0,
        "avg_latency_ms": 0.0,
        "error_count": 0,
    }
