"""Topic extraction over the built-in knowledge base."""

from __future__ import annotations

from exam_rag.generation.prompt_templates import build_topics_prompt
from exam_rag.generation.schemas import TOPIC_LIST_SCHEMA
from exam_rag.observability.logger import get_logger
from exam_rag.protocols.llm import ModelGatewayProtocol

logger = get_logger("topic_extractor")


class TopicExtractor:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def extract(self) -> list[str]:
        # Not idempotent: every call is a fresh model call
        topics: list[str] = await self._gateway.generate_structured(
            build_topics_prompt(), TOPIC_LIST_SCHEMA
        )
        logger.info("topics_extracted", count=len(topics))
        return topics
