"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from exam_rag.api.middleware import RequestTimingMiddleware
from exam_rag.api.routes_generate import router as generate_router
from exam_rag.api.routes_health import router as health_router
from exam_rag.api.routes_solve import router as solve_router
from exam_rag.config.settings import Settings
from exam_rag.exceptions import ConfigurationError, ExamRAGError, GatewayError
from exam_rag.observability.logger import get_logger, setup_logging
from exam_rag.pipeline.study_assistant import StudyAssistant

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_json)

    if app.state.assistant is None:
        app.state.assistant = StudyAssistant.from_settings(settings)

    logger.info(
        "startup_complete",
        model=settings.gemini_model,
        credential_configured=bool(settings.google_api_key),
    )

    yield

    logger.info("shutdown_complete")


def _status_for(exc: ExamRAGError) -> int:
    if isinstance(exc, ConfigurationError):
        return 503
    if isinstance(exc, GatewayError):
        return 502
    return 500


async def handle_exam_rag_error(request: Request, exc: ExamRAGError) -> JSONResponse:
    status = _status_for(exc)
    logger.error(
        "operation_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status=status,
    )
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "ValueError", "detail": str(exc)},
    )


def create_app(
    settings: Settings | None = None,
    assistant: StudyAssistant | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Exam RAG Tutor",
        version="1.0.0",
        description="Simulated RAG answering and expert-jury verification for exam questions",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.state.assistant = assistant

    app.add_middleware(RequestTimingMiddleware)
    app.add_exception_handler(ExamRAGError, handle_exam_rag_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.include_router(health_router, tags=["health"])
    app.include_router(solve_router, tags=["solve"])
    app.include_router(generate_router, prefix="/generate", tags=["generate"])
    return app
