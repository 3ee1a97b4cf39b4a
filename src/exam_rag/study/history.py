"""Saved-test records, topic filters and export payloads.

Nothing here touches the filesystem: payloads and storage keys are handed to
whatever persistence layer the caller uses.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, replace
from datetime import datetime, timezone

from exam_rag.config.constants import ALL_TOPICS
from exam_rag.config.settings import Settings
from exam_rag.models.domain import AnswerRecord, Question, SavedTest, VerificationResult
from exam_rag.models.ids import custom_question_id, epoch_ms, saved_test_id


def new_question_id() -> str:
    return custom_question_id(epoch_ms())


def save_test(
    question: Question,
    result: AnswerRecord,
    language: str,
    verification: VerificationResult | None = None,
) -> SavedTest:
    timestamp = epoch_ms()
    return SavedTest(
        id=saved_test_id(language, timestamp),
        question=replace(question, options=list(question.options)),
        result=result,
        language=language,
        saved_at=datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc),
        verification=verification,
    )


def attach_verification(saved: SavedTest, verification: VerificationResult) -> SavedTest:
    return replace(saved, verification=verification)


def delete_saved_test(tests: list[SavedTest], test_id: str) -> list[SavedTest]:
    return [t for t in tests if t.id != test_id]


def storage_key(settings: Settings, language: str) -> str:
    return settings.storage_path(language)


def export_payload(tests: list[SavedTest]) -> str:
    """JSON text for the history file of one language."""
    return json.dumps([asdict(t) for t in tests], indent=2, ensure_ascii=False, default=str)


def topic_key(topic: str) -> str:
    """The "Topic N" segment of a topic label, e.g. "Topic 3: Permissions" -> "Topic 3"."""
    return topic.split(":")[0].strip()


def topic_matches(topic: str, selected: str) -> bool:
    if selected == ALL_TOPICS:
        return True
    key = topic_key(selected)
    # Whole-word match so "Topic 1" does not match "Topic 12"
    return re.search(rf"(?<!\w){re.escape(key)}(?!\w)", topic) is not None


def filter_by_topic(questions: list[Question], selected: str) -> list[Question]:
    """Keep questions whose topic carries the selected "Topic N" segment.

    Matches both full course labels and rotating ones like "Random: Topic 1".
    """
    return [q for q in questions if topic_matches(q.topic, selected)]


def group_by_topic(tests: list[SavedTest]) -> dict[str, list[SavedTest]]:
    groups: dict[str, list[SavedTest]] = {}
    for t in tests:
        groups.setdefault(t.question.topic, []).append(t)
    return groups
