"""Metric recording helpers for operations."""

from __future__ import annotations

from exam_rag.observability.logger import get_logger

logger = get_logger("metrics")


def log_gateway_call(
    mode: str,
    model: str,
    prompt_len: int,
    response_len: int,
    duration_ms: float,
) -> None:
    logger.info(
        "gateway_call",
        mode=mode,
        model=model,
        prompt_len=prompt_len,
        response_len=response_len,
        duration_ms=round(duration_ms, 2),
    )


def log_answer_metrics(
    trace_id: str,
    question_id: str,
    predicted_index: int,
    confidence: float,
    retrieval: str,
) -> None:
    logger.info(
        "answer_metrics",
        trace_id=trace_id,
        question_id=question_id,
        predicted_index=predicted_index,
        confidence=round(confidence, 4),
        retrieval=retrieval,
    )


def log_verification_metrics(
    question_id: str,
    votes: int,
    consensus_index: int | None,
    agreement: float,
    has_tie: bool,
) -> None:
    logger.info(
        "verification_metrics",
        question_id=question_id,
        votes=votes,
        consensus_index=consensus_index,
        agreement=agreement,
        has_tie=has_tie,
    )


def log_latency(trace_id: str, stage: str, duration_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        stage=stage,
        duration_ms=round(duration_ms, 2),
    )
