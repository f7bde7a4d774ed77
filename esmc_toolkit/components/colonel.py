"""Colonel — a deployment stub with fixed-shape replies and a call counter."""

from __future__ import annotations

import logging
from typing import Any

from esmc_toolkit.models.results import DeploymentResult, ValidationReport
from esmc_toolkit.models.tiers import ColonelRank

logger = logging.getLogger(__name__)


class Colonel:
    """Returns constant-shaped results; nothing is actually deployed.

    Parameters
    ----------
    rank:
        Which colonel this is.  Tier features gate ranks, not this class.
    wave:
        Wave number echoed in every deployment result.
    """

    version = "1.0.0"

    def __init__(self, rank: ColonelRank = ColonelRank.ALPHA, wave: int = 1) -> None:
        self.rank = rank
        self.wave = wave
        self.status = "ready"
        self.deployments = 0

    def deploy(self, task: Any = None) -> DeploymentResult:
        self.deployments += 1
        logger.debug(
            "Colonel %s deployment #%d (wave %d)",
            self.rank.value, self.deployments, self.wave,
        )
        return DeploymentResult(wave=self.wave, status=self.status, results=[])

    def validate(self, target: Any = None) -> ValidationReport:
        return ValidationReport(valid=True, checks=[])

    def __repr__(self) -> str:
        return f"Colonel(rank={self.rank.value!r}, wave={self.wave})"
