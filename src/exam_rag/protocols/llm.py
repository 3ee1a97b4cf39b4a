"""Protocol for the model gateway."""

from __future__ import annotations

from typing import Any, Protocol

from exam_rag.generation.schemas import ResponseSchema


class ModelGatewayProtocol(Protocol):
    async def generate_text(self, prompt: str) -> str: ...

    async def generate_structured(self, prompt: str, schema: ResponseSchema) -> Any: ...
