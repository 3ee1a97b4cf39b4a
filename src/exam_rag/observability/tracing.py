"""Per-operation tracing: one trace per assistant call, one span per phase."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from uuid import uuid4

from exam_rag.observability.metrics import log_latency


@dataclass
class Span:
    name: str
    start_ms: float
    end_ms: float = 0.0
    status: str = "ok"
    metadata: dict = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms


class TraceContext:
    """Collects phase timings for a single operation.

    A span that exits through an exception is still recorded, marked
    ``status="error"`` with the exception type in its metadata; the
    exception itself is re-raised untouched.
    """

    def __init__(self, operation: str, trace_id: str | None = None) -> None:
        self.operation = operation
        self.trace_id = trace_id or uuid4().hex
        self.spans: list[Span] = []
        self._origin = time.monotonic()

    def _now_ms(self) -> float:
        return (time.monotonic() - self._origin) * 1000

    @contextmanager
    def span(self, name: str, **metadata):
        s = Span(name=name, start_ms=self._now_ms(), metadata=metadata)
        try:
            yield s
        except Exception as e:
            s.status = "error"
            s.metadata["error_type"] = type(e).__name__
            raise
        finally:
            s.end_ms = self._now_ms()
            self.spans.append(s)

    @property
    def elapsed_ms(self) -> float:
        return self._now_ms()

    def log_spans(self) -> None:
        for s in self.spans:
            log_latency(self.trace_id, f"{self.operation}.{s.name}", s.duration_ms)

    def summary(self) -> dict:
        return {
            "trace_id": self.trace_id,
            "operation": self.operation,
            "latency_ms": round(self.elapsed_ms, 2),
            "spans": [
                {
                    "name": s.name,
                    "status": s.status,
                    "duration_ms": round(s.duration_ms, 2),
                    **s.metadata,
                }
                for s in self.spans
            ],
        }
