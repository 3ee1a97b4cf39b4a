"""Identifier formats for generated and saved records."""

from __future__ import annotations

import time


def epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def auto_question_id(language: str, timestamp_ms: int, index: int) -> str:
    return f"auto_{language}_{timestamp_ms}_{index}"


def variant_question_id(timestamp_ms: int, index: int) -> str:
    return f"variant_{timestamp_ms}_{index}"


def saved_test_id(language: str, timestamp_ms: int) -> str:
    return f"saved_{language}_{timestamp_ms}"


def custom_question_id(timestamp_ms: int) -> str:
    return f"custom.{timestamp_ms}"
