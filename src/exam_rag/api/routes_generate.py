"""Content generation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from exam_rag.api.dependencies import get_assistant
from exam_rag.models.schemas import (
    BatchRequest,
    DistractorRequest,
    DistractorResponse,
    QuestionsResponse,
    TopicsResponse,
    VariantsRequest,
)
from exam_rag.pipeline.study_assistant import StudyAssistant

router = APIRouter()


@router.post("/batch", response_model=QuestionsResponse)
async def generate_batch(
    request: BatchRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> QuestionsResponse:
    questions = await assistant.generate_batch(request.to_domain())
    return QuestionsResponse.from_domain(questions)


@router.post("/variants", response_model=QuestionsResponse)
async def generate_variants(
    request: VariantsRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> QuestionsResponse:
    variants = await assistant.generate_variants(
        request.question.to_domain(), request.count, request.language
    )
    return QuestionsResponse.from_domain(variants)


@router.post("/distractor", response_model=DistractorResponse)
async def regenerate_distractor(
    request: DistractorRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> DistractorResponse:
    text = await assistant.regenerate_option(
        request.question.to_domain(), request.option_index, request.language
    )
    return DistractorResponse(option_index=request.option_index, text=text)


@router.get("/topics", response_model=TopicsResponse)
async def extract_topics(
    assistant: StudyAssistant = Depends(get_assistant),
) -> TopicsResponse:
    return TopicsResponse(topics=await assistant.extract_topics())
