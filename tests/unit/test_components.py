"""Tests for Colonel and the intelligence stubs."""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from esmc_toolkit.components import (
    Colonel,
    IntelligenceProcessor,
    StrategicIntelligence,
)
from esmc_toolkit.models.tiers import ColonelRank


class TestColonel:
    def test_defaults(self):
        colonel = Colonel()
        assert colonel.rank is ColonelRank.ALPHA
        assert colonel.wave == 1
        assert colonel.status == "ready"
        assert colonel.deployments == 0
        assert Colonel.version == "1.0.0"

    def test_deploy_increments_counter(self):
        colonel = Colonel(ColonelRank.GAMMA, wave=3)
        first = colonel.deploy("task-a")
        colonel.deploy({"anything": True})
        assert colonel.deployments == 2
        assert first.wave == 3
        assert first.status == "ready"
        assert first.results == []

    def test_validate_always_passes(self):
        report = Colonel().validate("target")
        assert report.valid is True
        assert report.checks == []

    def test_results_are_frozen(self):
        result = Colonel().deploy()
        with pytest.raises(ValidationError):
            result.wave = 9  # type: ignore[misc]

    def test_repr(self):
        assert repr(Colonel(ColonelRank.ETA, wave=2)) == "Colonel(rank='ETA', wave=2)"


class TestIntelligenceProcessor:
    def test_analyze_shape(self):
        analysis = IntelligenceProcessor().analyze({"ctx": 1})
        assert analysis.goals == []
        assert analysis.patterns == []
        assert 0.0 <= analysis.confidence < 1.0

    def test_seeded_rng_is_deterministic(self):
        a = IntelligenceProcessor(random.Random(7)).analyze()
        b = IntelligenceProcessor(random.Random(7)).analyze()
        assert a.confidence == b.confidence

    def test_synthesize_accepts_any_inputs(self):
        processor = IntelligenceProcessor()
        assert processor.synthesize().synthesized is True
        assert processor.synthesize(1, "two", [3]).synthesized is True

    def test_process(self):
        result = IntelligenceProcessor().process([1, 2])
        assert result.status == "processed"
        assert result.results == []


class TestStrategicIntelligence:
    def test_assess_shape(self):
        assessment = StrategicIntelligence(random.Random(1)).assess()
        assert 0.0 <= assessment.confidence < 1.0
        assert assessment.patterns == []
        assert assessment.recommendations == []
