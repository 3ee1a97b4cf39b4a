"""Solve and verify endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from exam_rag.api.dependencies import get_assistant, get_settings
from exam_rag.config.settings import Settings
from exam_rag.models.schemas import (
    AnswerResponse,
    SolveRequest,
    VerificationResponse,
    VerifyRequest,
)
from exam_rag.pipeline.study_assistant import StudyAssistant

router = APIRouter()


@router.post("/solve", response_model=AnswerResponse)
async def solve(
    request: SolveRequest,
    assistant: StudyAssistant = Depends(get_assistant),
    settings: Settings = Depends(get_settings),
) -> AnswerResponse:
    # No config at all keeps the default "Gemini" label in the prompt
    config = request.config.to_domain(settings.solver_defaults()) if request.config else None
    record = await assistant.solve(request.question.to_domain(), config, request.language)
    return AnswerResponse.from_domain(record)


@router.post("/verify", response_model=VerificationResponse)
async def verify(
    request: VerifyRequest,
    assistant: StudyAssistant = Depends(get_assistant),
) -> VerificationResponse:
    result = await assistant.verify(request.question.to_domain(), request.language)
    return VerificationResponse.from_domain(result)
