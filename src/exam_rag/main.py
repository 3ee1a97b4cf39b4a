"""Entrypoint: ``python -m exam_rag.main`` serves the study assistant API."""

import uvicorn

from exam_rag.api.app import create_app
from exam_rag.config.settings import Settings
from exam_rag.observability.logger import get_logger, setup_logging


def main() -> None:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_json)
    if not settings.google_api_key:
        get_logger("main").warning(
            "credential_missing",
            hint="set EXAM_RAG_GOOGLE_API_KEY; model operations will fail until then",
        )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
