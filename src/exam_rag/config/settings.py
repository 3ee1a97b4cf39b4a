"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

from exam_rag.models.domain import SolverConfig


class Settings(BaseSettings):
    # API Keys
    google_api_key: str = ""

    # LLM / Gemini
    gemini_model: str = "gemini-2.5-flash"

    # Solver defaults for fields a request leaves out (label only: they shape
    # prompt text, never the actual call)
    default_provider: Literal["ollama", "external"] = "ollama"
    default_ollama_url: str = "http://localhost:11434"
    default_model: str = "llama3"
    default_external_model: str = "gpt-4o"
    default_temperature: float = 0.7
    default_top_k: int = 40

    # Export keys handed to the persistence collaborator
    storage_path_template: str = "./data/{language}/tests.json"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "env_prefix": "EXAM_RAG_"}

    def storage_path(self, language: str) -> str:
        return self.storage_path_template.format(language=language)

    def solver_defaults(self) -> SolverConfig:
        return SolverConfig(
            provider=self.default_provider,
            ollama_url=self.default_ollama_url,
            selected_model=self.default_model,
            external_model=self.default_external_model,
            temperature=self.default_temperature,
            top_k=self.default_top_k,
        )
