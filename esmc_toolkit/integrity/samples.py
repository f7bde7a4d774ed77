"""Spot-check integrity: hash a server-chosen sample of component files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from esmc_toolkit.core.hasher import sha256_file
from esmc_toolkit.models.integrity import IntegritySample, SampleVerificationResult

logger = logging.getLogger(__name__)

COMPONENTS_RELPATH = Path(".claude") / "ESMC-Chaos" / "components"


def find_components_dir(roots: Iterable[Path]) -> Path | None:
    """First ``<root>/.claude/ESMC-Chaos/components`` that exists."""
    for root in roots:
        candidate = Path(root) / COMPONENTS_RELPATH
        if candidate.is_dir():
            return candidate
    return None


def verify_samples(
    samples: Iterable[IntegritySample], components_dir: Path | None
) -> SampleVerificationResult:
    """Compare each sampled file's SHA-256 with the expected hash.

    A missing components directory skips the check (and succeeds); a
    missing or mismatching file is recorded as failed.
    """
    samples = list(samples)
    if components_dir is None or not components_dir.is_dir():
        logger.warning("Components directory not found - sample verification skipped")
        return SampleVerificationResult(success=True, skipped=True, total=len(samples))

    failed: list[str] = []
    verified = 0
    for sample in samples:
        path = components_dir / sample.file
        if not path.is_file():
            logger.error("Sample file not found: %s", sample.file)
            failed.append(sample.file)
            continue
        local_hash = sha256_file(path)
        if local_hash != sample.hash:
            logger.error(
                "Hash mismatch: %s (expected %s..., local %s...)",
                sample.file, sample.hash[:16], local_hash[:16],
            )
            failed.append(sample.file)
        else:
            verified += 1

    logger.info("Verified %d/%d sampled files", verified, len(samples))
    return SampleVerificationResult(
        success=not failed,
        failed=failed,
        verified=verified,
        total=len(samples),
    )
