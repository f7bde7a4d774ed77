"""Tests for sampled component integrity checks."""

from __future__ import annotations

from esmc_toolkit.core.hasher import sha256_file
from esmc_toolkit.integrity import find_components_dir, verify_samples
from esmc_toolkit.integrity.samples import COMPONENTS_RELPATH
from esmc_toolkit.models.integrity import IntegritySample


class TestFindComponentsDir:
    def test_first_existing_root_wins(self, tmp_path, package_root):
        assert find_components_dir([tmp_path / "nowhere", package_root]) == (
            package_root / COMPONENTS_RELPATH
        )

    def test_none_when_absent(self, tmp_path):
        assert find_components_dir([tmp_path]) is None


class TestVerifySamples:
    def test_all_match(self, package_root):
        components = package_root / COMPONENTS_RELPATH
        samples = [
            IntegritySample(file=name, hash=sha256_file(components / name))
            for name in ("colonel.js", "intel.js")
        ]
        result = verify_samples(samples, components)
        assert result.success
        assert result.verified == 2
        assert result.total == 2
        assert result.failed == []

    def test_mismatch_and_missing_fail(self, package_root):
        components = package_root / COMPONENTS_RELPATH
        samples = [
            IntegritySample(file="colonel.js", hash="0" * 64),
            IntegritySample(file="ghost.js", hash="0" * 64),
            IntegritySample(file="intel.js", hash=sha256_file(components / "intel.js")),
        ]
        result = verify_samples(samples, components)
        assert not result.success
        assert result.failed == ["colonel.js", "ghost.js"]
        assert result.verified == 1

    def test_missing_dir_is_skipped(self):
        result = verify_samples([IntegritySample(file="a.js", hash="00")], None)
        assert result.success
        assert result.skipped
        assert result.total == 1
