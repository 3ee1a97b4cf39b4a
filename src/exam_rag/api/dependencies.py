"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from exam_rag.config.settings import Settings
from exam_rag.pipeline.study_assistant import StudyAssistant


def get_assistant(request: Request) -> StudyAssistant:
    assistant = request.app.state.assistant
    if assistant is None:
        # Lifespan did not run (e.g. TestClient used without a context manager)
        assistant = StudyAssistant.from_settings(request.app.state.settings)
        request.app.state.assistant = assistant
    return assistant


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
