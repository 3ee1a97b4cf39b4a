"""Tests for settings-driven solver defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from exam_rag.config.settings import Settings
from exam_rag.models.domain import SolverConfig
from exam_rag.models.schemas import SolverConfigModel


def test_solver_defaults_mirror_settings():
    settings = Settings(default_provider="external", default_external_model="claude-x", default_top_k=10)
    defaults = settings.solver_defaults()
    assert defaults.provider == "external"
    assert defaults.external_model == "claude-x"
    assert defaults.top_k == 10
    assert defaults.selected_model == "llama3"


def test_solver_defaults_read_from_env(monkeypatch):
    monkeypatch.setenv("EXAM_RAG_DEFAULT_MODEL", "phi3")
    assert Settings().solver_defaults().selected_model == "phi3"


def test_omitted_fields_filled_from_defaults():
    defaults = SolverConfig(selected_model="mistral", temperature=0.3)
    config = SolverConfigModel(provider="ollama", top_k=5).to_domain(defaults)
    assert config.selected_model == "mistral"
    assert config.temperature == 0.3
    assert config.top_k == 5


def test_explicit_fields_override_defaults():
    defaults = SolverConfig(selected_model="mistral")
    config = SolverConfigModel(selected_model="gemma:7b", temperature=1.1).to_domain(defaults)
    assert config.selected_model == "gemma:7b"
    assert config.temperature == 1.1
    assert defaults.selected_model == "mistral"


def test_temperature_out_of_range_rejected():
    with pytest.raises(ValidationError):
        SolverConfigModel(temperature=3.5)
