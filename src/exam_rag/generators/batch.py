"""Auto-batch question generation."""

from __future__ import annotations

from exam_rag.config.constants import COURSE_TOPICS, GLOBAL_TOPIC, ROTATING_TOPIC_PREFIX
from exam_rag.generation.prompt_templates import build_batch_prompt
from exam_rag.generation.schemas import QUESTION_BATCH_SCHEMA, GeneratedQuestionPayload
from exam_rag.models.domain import AutoTestConfig, Question
from exam_rag.models.ids import auto_question_id, epoch_ms
from exam_rag.observability.logger import get_logger
from exam_rag.protocols.llm import ModelGatewayProtocol

logger = get_logger("batch_generator")


def is_global_topic(topic: str) -> bool:
    return topic == GLOBAL_TOPIC or "global" in topic.lower()


def rotating_topic(index: int, topics: list[str] = COURSE_TOPICS) -> str:
    """Round-robin topic label for the ``index``-th question of a mixed batch.

    Wraps around with ``index % len(topics)``; only the "Topic N" segment of
    the course topic is kept, e.g. ``"Random: Topic 2"``.
    """
    topic = topics[index % len(topics)]
    return f"{ROTATING_TOPIC_PREFIX}: {topic.split(':')[0]}"


class BatchGenerator:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def generate(self, config: AutoTestConfig) -> list[Question]:
        prompt = build_batch_prompt(config)
        payload: list[GeneratedQuestionPayload] = await self._gateway.generate_structured(
            prompt, QUESTION_BATCH_SCHEMA
        )

        if len(payload) != config.count:
            logger.warning(
                "batch_size_mismatch",
                requested=config.count,
                received=len(payload),
            )
        payload = payload[: config.count]

        timestamp = epoch_ms()
        mixed = is_global_topic(config.topic)
        questions = [
            Question(
                id=auto_question_id(config.language, timestamp, i),
                topic=rotating_topic(i) if mixed else config.topic,
                statement=item.statement,
                options=list(item.options),
                correct_index=item.correct_index,
                difficulty=config.difficulty,
            )
            for i, item in enumerate(payload)
        ]

        logger.info(
            "batch_generated",
            topic=config.topic,
            language=config.language,
            difficulty=config.difficulty,
            count=len(questions),
        )
        return questions
