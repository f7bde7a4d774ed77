"""Fixed-shape result objects returned by the component stubs."""

from __future__ import annotations

import time
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


class StubEnvelope(BaseModel):
    """The uniform ``{status, timestamp, data}`` reply of every padding stub."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    timestamp: int = Field(default_factory=now_ms)
    data: Any = None


class DeploymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    wave: int
    status: str
    results: list[Any] = []


class ValidationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool = True
    checks: list[Any] = []


class IntelligenceAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    goals: list[Any] = []
    patterns: list[Any] = []
    confidence: float = Field(ge=0.0, le=1.0)


class SynthesisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    synthesized: bool = True


class StrategicAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    confidence: float = Field(ge=0.0, le=1.0)
    patterns: list[Any] = []
    recommendations: list[Any] = []


class ProcessingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["processed"] = "processed"
    results: list[Any] = []
