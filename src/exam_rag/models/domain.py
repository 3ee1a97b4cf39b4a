"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Language = Literal["es", "eu", "en"]
Difficulty = Literal["basic", "intermediate", "advanced"]

OPTION_COUNT = 4
DIFFICULTY_LEVELS: tuple[str, ...] = ("basic", "intermediate", "advanced")


def _check_option_index(value: int, name: str) -> None:
    if not 1 <= value <= OPTION_COUNT:
        raise ValueError(f"{name} must be between 1 and {OPTION_COUNT}, got {value}")


@dataclass
class Question:
    id: str
    topic: str
    statement: str
    options: list[str]
    correct_index: int | None = None  # 1-based
    difficulty: Difficulty | None = None

    def __post_init__(self) -> None:
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"a question needs exactly {OPTION_COUNT} options, got {len(self.options)}"
            )
        if self.correct_index is not None:
            _check_option_index(self.correct_index, "correct_index")
        if self.difficulty is not None and self.difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(f"unknown difficulty: {self.difficulty}")

    @property
    def correct_option(self) -> str | None:
        if self.correct_index is None:
            return None
        return self.options[self.correct_index - 1]


@dataclass(frozen=True)
class RetrievedDocument:
    source: str
    content: str
    relevance_score: float


@dataclass(frozen=True)
class AnswerRecord:
    question_id: str
    predicted_index: int  # 1-based
    reasoning: str
    confidence: float
    retrieved_context: list[RetrievedDocument]


@dataclass(frozen=True)
class AgentVote:
    agent_name: str
    role: str
    vote_index: int
    short_reason: str


@dataclass(frozen=True)
class VerificationResult:
    votes: list[AgentVote]
    consensus_index: int | None
    agreement_percentage: float
    has_tie: bool = False


@dataclass(frozen=True)
class SavedTest:
    id: str
    question: Question
    result: AnswerRecord
    language: str
    saved_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    verification: VerificationResult | None = None


@dataclass
class AutoTestConfig:
    topic: str
    count: int
    language: Language
    difficulty: Difficulty

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")


@dataclass
class SolverConfig:
    """Nominal model configuration. Only changes prompt text."""

    provider: Literal["ollama", "external"] = "ollama"
    ollama_url: str = "http://localhost:11434"
    selected_model: str = "llama3"
    external_model: str | None = "gpt-4o"
    temperature: float = 0.7
    top_k: int = 40


@dataclass(frozen=True)
class RetrievalOutcome:
    kind: Literal["retrieved", "fallback"]
    text: str
    reason: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.kind == "fallback"


@dataclass
class ExamSession:
    id: str
    created_at: datetime
    questions: list[SavedTest]
    user_answers: dict[str, int]
    score: int
    percentage: int
    completed_at: datetime | None = None
