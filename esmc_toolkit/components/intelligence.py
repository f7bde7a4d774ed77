"""Intelligence stubs — empty findings with a random confidence score.

Confidence comes from an unseeded ``random.Random`` unless one is injected.
"""

from __future__ import annotations

import random
from typing import Any

from esmc_toolkit.models.results import (
    IntelligenceAnalysis,
    ProcessingResult,
    StrategicAssessment,
    SynthesisResult,
)


class IntelligenceProcessor:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def analyze(self, context: Any = None) -> IntelligenceAnalysis:
        return IntelligenceAnalysis(
            goals=[], patterns=[], confidence=self._rng.random()
        )

    def synthesize(self, *inputs: Any) -> SynthesisResult:
        return SynthesisResult(synthesized=True)

    def process(self, data: Any = None) -> ProcessingResult:
        return ProcessingResult(status="processed", results=[])


class StrategicIntelligence:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def assess(self, context: Any = None) -> StrategicAssessment:
        return StrategicAssessment(
            confidence=self._rng.random(), patterns=[], recommendations=[]
        )
