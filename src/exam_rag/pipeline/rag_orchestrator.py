"""Two-phase retrieve-then-answer orchestrator."""

from __future__ import annotations

from exam_rag.config.constants import (
    CONTEXT_PREVIEW_CHARS,
    FALLBACK_CONTEXT,
    RETRIEVED_RELEVANCE_SCORE,
    RETRIEVED_SOURCE_TEMPLATE,
)
from exam_rag.exceptions import GatewayError
from exam_rag.generation.prompt_templates import (
    build_answer_prompt,
    build_retrieval_prompt,
    describe_model,
)
from exam_rag.generation.schemas import ANSWER_SCHEMA, AnswerPayload
from exam_rag.models.domain import (
    AnswerRecord,
    Question,
    RetrievalOutcome,
    RetrievedDocument,
    SolverConfig,
)
from exam_rag.observability.logger import get_logger
from exam_rag.observability.metrics import log_answer_metrics
from exam_rag.observability.tracing import TraceContext
from exam_rag.protocols.llm import ModelGatewayProtocol

logger = get_logger("rag_orchestrator")


def preview_context(text: str, limit: int = CONTEXT_PREVIEW_CHARS) -> str:
    return text[:limit] + "..."


class RAGOrchestrator:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def retrieve(self, question: Question, language: str) -> RetrievalOutcome:
        """Simulate retrieval. Gateway failures degrade to the static context."""
        prompt = build_retrieval_prompt(question, language)
        try:
            text = await self._gateway.generate_text(prompt)
        except GatewayError as e:
            logger.warning(
                "retrieval_fallback",
                question_id=question.id,
                error_type=type(e).__name__,
                error=str(e),
            )
            return RetrievalOutcome(kind="fallback", text=FALLBACK_CONTEXT, reason=str(e))
        return RetrievalOutcome(kind="retrieved", text=text)

    async def solve(
        self,
        question: Question,
        config: SolverConfig | None = None,
        language: str = "es",
    ) -> AnswerRecord:
        trace = TraceContext("solve")

        # STEP 1: Simulated retrieval
        with trace.span("retrieval") as span:
            outcome = await self.retrieve(question, language)
            span.metadata["kind"] = outcome.kind

        # STEP 2: Answer generation (errors propagate)
        with trace.span("generation"):
            prompt = build_answer_prompt(question, outcome.text, config, language)
            payload: AnswerPayload = await self._gateway.generate_structured(
                prompt, ANSWER_SCHEMA
            )

        model_name, _ = describe_model(config)
        record = AnswerRecord(
            question_id=question.id,
            predicted_index=payload.predicted_index,
            reasoning=f"[Model: {model_name}] {payload.reasoning}",
            confidence=payload.confidence,
            retrieved_context=[
                RetrievedDocument(
                    source=RETRIEVED_SOURCE_TEMPLATE.format(language=language),
                    content=preview_context(outcome.text),
                    relevance_score=RETRIEVED_RELEVANCE_SCORE,
                )
            ],
        )

        trace.log_spans()
        log_answer_metrics(
            trace.trace_id,
            question.id,
            record.predicted_index,
            record.confidence,
            outcome.kind,
        )
        return record
