"""Structured-output schema registry.

Each entry pairs the descriptor sent to Gemini (``response_schema``) with the
pydantic validator applied to whatever comes back. Model output is untrusted:
validation runs in strict mode so that ``"2"`` never silently becomes ``2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from exam_rag.models.domain import OPTION_COUNT


class AnswerPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    predicted_index: int = Field(ge=1, le=OPTION_COUNT)
    reasoning: str
    confidence: float = Field(ge=0.0, le=1.0)


class VotePayload(BaseModel):
    model_config = ConfigDict(strict=True)

    agent_name: str
    role: str
    vote_index: int = Field(ge=1, le=OPTION_COUNT)
    short_reason: str


class GeneratedQuestionPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    statement: str
    options: list[str] = Field(min_length=OPTION_COUNT, max_length=OPTION_COUNT)
    correct_index: int = Field(ge=1, le=OPTION_COUNT)


@dataclass(frozen=True)
class ResponseSchema:
    name: str
    descriptor: types.Schema
    validator: TypeAdapter

    def validate(self, data: Any) -> Any:
        return self.validator.validate_python(data, strict=True)


def _index_field(description: str) -> types.Schema:
    return types.Schema(
        type=types.Type.INTEGER,
        description=description,
        minimum=1,
        maximum=OPTION_COUNT,
    )


ANSWER_SCHEMA = ResponseSchema(
    name="answer",
    descriptor=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "predicted_index": _index_field("Index of the correct option (1-4)"),
            "reasoning": types.Schema(
                type=types.Type.STRING,
                description="Short explanation citing the context",
            ),
            "confidence": types.Schema(
                type=types.Type.NUMBER,
                description="Confidence level from 0.0 to 1.0",
                minimum=0.0,
                maximum=1.0,
            ),
        },
        required=["predicted_index", "reasoning", "confidence"],
    ),
    validator=TypeAdapter(AnswerPayload),
)

JURY_VOTES_SCHEMA = ResponseSchema(
    name="jury_votes",
    descriptor=types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "agent_name": types.Schema(type=types.Type.STRING),
                "role": types.Schema(type=types.Type.STRING),
                "vote_index": _index_field("Option the expert votes for (1-4)"),
                "short_reason": types.Schema(type=types.Type.STRING),
            },
            required=["agent_name", "role", "vote_index", "short_reason"],
        ),
    ),
    validator=TypeAdapter(list[VotePayload]),
)

QUESTION_BATCH_SCHEMA = ResponseSchema(
    name="question_batch",
    descriptor=types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "statement": types.Schema(type=types.Type.STRING),
                "options": types.Schema(
                    type=types.Type.ARRAY,
                    items=types.Schema(type=types.Type.STRING),
                    min_items=OPTION_COUNT,
                    max_items=OPTION_COUNT,
                ),
                "correct_index": _index_field("Index of the correct option (1-4)"),
            },
            required=["statement", "options", "correct_index"],
        ),
    ),
    validator=TypeAdapter(list[GeneratedQuestionPayload]),
)

TOPIC_LIST_SCHEMA = ResponseSchema(
    name="topic_list",
    descriptor=types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(type=types.Type.STRING),
    ),
    validator=TypeAdapter(list[str]),
)

SCHEMA_REGISTRY: dict[str, ResponseSchema] = {
    schema.name: schema
    for schema in (
        ANSWER_SCHEMA,
        JURY_VOTES_SCHEMA,
        QUESTION_BATCH_SCHEMA,
        TOPIC_LIST_SCHEMA,
    )
}
