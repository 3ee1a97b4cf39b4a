"""Expert-jury verification: one multi-persona call, then a consensus tally."""

from __future__ import annotations

from exam_rag.generation.prompt_templates import build_jury_prompt
from exam_rag.generation.schemas import JURY_VOTES_SCHEMA, VotePayload
from exam_rag.models.domain import AgentVote, Question, VerificationResult
from exam_rag.observability.logger import get_logger
from exam_rag.observability.metrics import log_verification_metrics
from exam_rag.protocols.llm import ModelGatewayProtocol
from exam_rag.verification.consensus import compute_consensus

logger = get_logger("jury")

EXPECTED_JURORS = 3


class JuryVerifier:
    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._gateway = gateway

    async def verify(self, question: Question, language: str) -> VerificationResult:
        prompt = build_jury_prompt(question, language)
        payload: list[VotePayload] = await self._gateway.generate_structured(
            prompt, JURY_VOTES_SCHEMA
        )

        votes = [
            AgentVote(
                agent_name=v.agent_name,
                role=v.role,
                vote_index=v.vote_index,
                short_reason=v.short_reason,
            )
            for v in payload
        ]
        if len(votes) != EXPECTED_JURORS:
            logger.warning(
                "unexpected_jury_size",
                question_id=question.id,
                votes=len(votes),
                expected=EXPECTED_JURORS,
            )

        consensus = compute_consensus([v.vote_index for v in votes])
        log_verification_metrics(
            question.id,
            len(votes),
            consensus.index,
            consensus.agreement_percentage,
            consensus.has_tie,
        )
        return VerificationResult(
            votes=votes,
            consensus_index=consensus.index,
            agreement_percentage=consensus.agreement_percentage,
            has_tie=consensus.has_tie,
        )
