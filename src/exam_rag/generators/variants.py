"""Question-variant generation."""

from __future__ import annotations

from exam_rag.generation.prompt_templates import build_variants_prompt
from exam_rag.generation.schemas import QUESTION_BATCH_SCHEMA, GeneratedQuestionPayload
from exam_rag.models.domain import Question
from exam_rag.models.ids import epoch_ms, variant_question_id
from exam_rag.observability.logger import get_logger
from exam_rag.protocols.llm import ModelGatewayProtocol

logger = get_logger("variant_generator")


class VariantGenerator:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def generate(self, question: Question, count: int, language: str) -> list[Question]:
        """Rephrasings of ``question`` that keep its topic and difficulty."""
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        prompt = build_variants_prompt(question, count, language)
        payload: list[GeneratedQuestionPayload] = await self._gateway.generate_structured(
            prompt, QUESTION_BATCH_SCHEMA
        )

        if len(payload) != count:
            logger.warning(
                "variants_size_mismatch",
                source_id=question.id,
                requested=count,
                received=len(payload),
            )
        payload = payload[:count]

        timestamp = epoch_ms()
        variants = [
            Question(
                id=variant_question_id(timestamp, i),
                topic=question.topic,
                statement=item.statement,
                options=list(item.options),
                correct_index=item.correct_index,
                difficulty=question.difficulty,
            )
            for i, item in enumerate(payload)
        ]

        logger.info(
            "variants_generated",
            source_id=question.id,
            count=len(variants),
        )
        return variants
