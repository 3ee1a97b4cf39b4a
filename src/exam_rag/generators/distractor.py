"""Distractor regeneration for a single wrong option."""

from __future__ import annotations

from exam_rag.generation.prompt_templates import build_distractor_prompt
from exam_rag.models.domain import OPTION_COUNT, Question
from exam_rag.observability.logger import get_logger
from exam_rag.protocols.llm import ModelGatewayProtocol

logger = get_logger("distractor_generator")


def _normalize(text: str) -> str:
    return " ".join(text.split()).casefold()


def collides(candidate: str, question: Question, option_index: int) -> bool:
    """True when ``candidate`` repeats the correct answer or a sibling option."""
    taken = {
        _normalize(opt)
        for i, opt in enumerate(question.options, 1)
        if i != option_index or i == question.correct_index
    }
    return _normalize(candidate) in taken


class DistractorGenerator:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def regenerate(self, question: Question, option_index: int, language: str) -> str:
        """Return replacement text for option ``option_index`` (1-based).

        Exclusion from the other options is requested in the prompt and
        checked once afterwards; a colliding first answer triggers a single
        retry and the second answer is returned as-is.
        """
        if not 1 <= option_index <= OPTION_COUNT:
            raise ValueError(f"option_index must be between 1 and {OPTION_COUNT}")
        if question.correct_index is not None and option_index == question.correct_index:
            raise ValueError("option_index must point at a wrong option")

        prompt = build_distractor_prompt(question, option_index, language)
        candidate = (await self._gateway.generate_text(prompt)).strip()

        if collides(candidate, question, option_index):
            logger.info(
                "distractor_collision_retry",
                question_id=question.id,
                option_index=option_index,
            )
            prompt = build_distractor_prompt(
                question, option_index, language, rejected=candidate
            )
            candidate = (await self._gateway.generate_text(prompt)).strip()
            if collides(candidate, question, option_index):
                logger.warning(
                    "distractor_still_collides",
                    question_id=question.id,
                    option_index=option_index,
                )

        return candidate
