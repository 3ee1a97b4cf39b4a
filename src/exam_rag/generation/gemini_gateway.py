"""Model gateway: the single choke point to Gemini, using the google-genai SDK."""

from __future__ import annotations

import json
import time
from typing import Any

from google import genai
from google.genai import types
from pydantic import ValidationError

from exam_rag.config.settings import Settings
from exam_rag.exceptions import (
    EmptyResponseError,
    MalformedOutputError,
    MissingCredentialError,
    ProviderError,
)
from exam_rag.generation.schemas import ResponseSchema
from exam_rag.observability.logger import get_logger
from exam_rag.observability.metrics import log_gateway_call

logger = get_logger("gemini")


class ModelGateway:
    """One network call per invocation, no retry."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        client: genai.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ModelGateway:
        return cls(api_key=settings.google_api_key, model=settings.gemini_model)

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self) -> genai.Client:
        if not self._api_key:
            raise MissingCredentialError(
                "No Google API key configured (set EXAM_RAG_GOOGLE_API_KEY)"
            )
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _call(self, prompt: str, config: types.GenerateContentConfig | None, mode: str) -> str:
        client = self._get_client()
        start = time.monotonic()
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            logger.warning("gateway_call_failed", mode=mode, error=str(e))
            raise ProviderError(f"Gemini {mode} generation failed: {e}") from e

        text = response.text or ""
        log_gateway_call(
            mode=mode,
            model=self._model,
            prompt_len=len(prompt),
            response_len=len(text),
            duration_ms=(time.monotonic() - start) * 1000,
        )
        if not text.strip():
            raise EmptyResponseError(f"Gemini returned no text ({mode} mode)")
        return text

    async def generate_text(self, prompt: str) -> str:
        return await self._call(prompt, None, mode="text")

    async def generate_structured(self, prompt: str, schema: ResponseSchema) -> Any:
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema.descriptor,
        )
        text = await self._call(prompt, config, mode=schema.name)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedOutputError(
                f"Response for '{schema.name}' is not valid JSON: {e}"
            ) from e

        try:
            return schema.validate(data)
        except ValidationError as e:
            raise MalformedOutputError(
                f"Response for '{schema.name}' does not match schema: "
                f"{e.error_count()} error(s)"
            ) from e
