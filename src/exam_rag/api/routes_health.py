"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from exam_rag.api.dependencies import get_settings
from exam_rag.config.constants import OLLAMA_MODELS
from exam_rag.config.settings import Settings
from exam_rag.models.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        model=settings.gemini_model,
        credential_configured=bool(settings.google_api_key),
        ollama_models=list(OLLAMA_MODELS),
    )
