"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from dataclasses import replace
from typing import Literal

from pydantic import BaseModel, Field

from exam_rag.models.domain import (
    AnswerRecord,
    AutoTestConfig,
    Question,
    SolverConfig,
    VerificationResult,
)

LanguageCode = Literal["es", "eu", "en"]
DifficultyLevel = Literal["basic", "intermediate", "advanced"]


class QuestionModel(BaseModel):
    id: str
    topic: str
    statement: str
    options: list[str] = Field(min_length=4, max_length=4)
    correct_index: int | None = Field(default=None, ge=1, le=4)
    difficulty: DifficultyLevel | None = None

    def to_domain(self) -> Question:
        return Question(**self.model_dump())

    @classmethod
    def from_domain(cls, question: Question) -> QuestionModel:
        return cls(
            id=question.id,
            topic=question.topic,
            statement=question.statement,
            options=list(question.options),
            correct_index=question.correct_index,
            difficulty=question.difficulty,
        )


class SolverConfigModel(BaseModel):
    """Omitted fields are filled from the configured solver defaults."""

    provider: Literal["ollama", "external"] | None = None
    ollama_url: str | None = None
    selected_model: str | None = None
    external_model: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_k: int | None = Field(default=None, ge=1)

    def to_domain(self, defaults: SolverConfig) -> SolverConfig:
        return replace(defaults, **self.model_dump(exclude_none=True))


class SolveRequest(BaseModel):
    question: QuestionModel
    config: SolverConfigModel | None = None
    language: LanguageCode = "es"


class RetrievedDocumentModel(BaseModel):
    source: str
    content: str
    relevance_score: float


class AnswerResponse(BaseModel):
    question_id: str
    predicted_index: int
    reasoning: str
    confidence: float
    retrieved_context: list[RetrievedDocumentModel]

    @classmethod
    def from_domain(cls, record: AnswerRecord) -> AnswerResponse:
        return cls(
            question_id=record.question_id,
            predicted_index=record.predicted_index,
            reasoning=record.reasoning,
            confidence=record.confidence,
            retrieved_context=[
                RetrievedDocumentModel(
                    source=d.source, content=d.content, relevance_score=d.relevance_score
                )
                for d in record.retrieved_context
            ],
        )


class VerifyRequest(BaseModel):
    question: QuestionModel
    language: LanguageCode = "es"


class AgentVoteModel(BaseModel):
    agent_name: str
    role: str
    vote_index: int
    short_reason: str


class VerificationResponse(BaseModel):
    votes: list[AgentVoteModel]
    consensus_index: int | None
    agreement_percentage: float
    has_tie: bool

    @classmethod
    def from_domain(cls, result: VerificationResult) -> VerificationResponse:
        return cls(
            votes=[
                AgentVoteModel(
                    agent_name=v.agent_name,
                    role=v.role,
                    vote_index=v.vote_index,
                    short_reason=v.short_reason,
                )
                for v in result.votes
            ],
            consensus_index=result.consensus_index,
            agreement_percentage=result.agreement_percentage,
            has_tie=result.has_tie,
        )


class BatchRequest(BaseModel):
    topic: str
    count: int = Field(ge=1, le=50)
    language: LanguageCode = "es"
    difficulty: DifficultyLevel = "intermediate"

    def to_domain(self) -> AutoTestConfig:
        return AutoTestConfig(**self.model_dump())


class VariantsRequest(BaseModel):
    question: QuestionModel
    count: int = Field(default=3, ge=1, le=20)
    language: LanguageCode = "es"


class QuestionsResponse(BaseModel):
    questions: list[QuestionModel]

    @classmethod
    def from_domain(cls, questions: list[Question]) -> QuestionsResponse:
        return cls(questions=[QuestionModel.from_domain(q) for q in questions])


class DistractorRequest(BaseModel):
    question: QuestionModel
    option_index: int = Field(ge=1, le=4)
    language: LanguageCode = "es"


class DistractorResponse(BaseModel):
    option_index: int
    text: str


class TopicsResponse(BaseModel):
    topics: list[str]


class HealthResponse(BaseModel):
    status: str
    model: str
    credential_configured: bool
    ollama_models: list[str]


class ErrorResponse(BaseModel):
    error: str
    detail: str
