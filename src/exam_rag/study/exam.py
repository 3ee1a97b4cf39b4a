"""Exam-mode scoring over saved tests."""

from __future__ import annotations

from datetime import datetime, timezone

from exam_rag.models.domain import ExamSession, SavedTest
from exam_rag.models.ids import epoch_ms


def expected_option(test: SavedTest) -> int:
    """The question's own answer key, else the model's validated prediction."""
    return test.question.correct_index or test.result.predicted_index


def score_exam(
    tests: list[SavedTest],
    user_answers: dict[str, int],
    session_id: str | None = None,
) -> ExamSession:
    """Score 1-based answers keyed by saved-test id."""
    score = sum(1 for t in tests if user_answers.get(t.id) == expected_option(t))
    percentage = round(score / len(tests) * 100) if tests else 0
    now = datetime.now(timezone.utc)
    return ExamSession(
        id=session_id or f"exam_{epoch_ms()}",
        created_at=now,
        questions=list(tests),
        user_answers=dict(user_answers),
        score=score,
        percentage=percentage,
        completed_at=now,
    )
