"""Operation surface consumed by the UI collaborator."""

from __future__ import annotations

from exam_rag.config.settings import Settings
from exam_rag.generation.gemini_gateway import ModelGateway
from exam_rag.generators.batch import BatchGenerator
from exam_rag.generators.distractor import DistractorGenerator
from exam_rag.generators.topics import TopicExtractor
from exam_rag.generators.variants import VariantGenerator
from exam_rag.models.domain import (
    AnswerRecord,
    AutoTestConfig,
    Question,
    SolverConfig,
    VerificationResult,
)
from exam_rag.pipeline.rag_orchestrator import RAGOrchestrator
from exam_rag.protocols.llm import ModelGatewayProtocol
from exam_rag.verification.jury import JuryVerifier


class StudyAssistant:
    """Stateless facade: every call depends only on its arguments."""

    def __init__(self, gateway: ModelGatewayProtocol) -> None:
        self._orchestrator = RAGOrchestrator(gateway)
        self._jury = JuryVerifier(gateway)
        self._batch = BatchGenerator(gateway)
        self._distractor = DistractorGenerator(gateway)
        self._variants = VariantGenerator(gateway)
        self._topics = TopicExtractor(gateway)

    @classmethod
    def from_settings(cls, settings: Settings) -> StudyAssistant:
        return cls(ModelGateway.from_settings(settings))

    async def solve(
        self,
        question: Question,
        config: SolverConfig | None = None,
        language: str = "es",
    ) -> AnswerRecord:
        return await self._orchestrator.solve(question, config, language)

    async def generate_batch(self, config: AutoTestConfig) -> list[Question]:
        return await self._batch.generate(config)

    async def regenerate_option(self, question: Question, option_index: int, language: str) -> str:
        return await self._distractor.regenerate(question, option_index, language)

    async def generate_variants(
        self, question: Question, count: int, language: str
    ) -> list[Question]:
        return await self._variants.generate(question, count, language)

    async def verify(self, question: Question, language: str) -> VerificationResult:
        return await self._jury.verify(question, language)

    async def extract_topics(self) -> list[str]:
        return await self._topics.extract()
