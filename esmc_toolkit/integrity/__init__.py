"""Package integrity: signed manifests and sampled spot checks."""

from esmc_toolkit.integrity.package import (
    IntegrityError,
    PackageVerifier,
    build_manifest,
    write_signed_manifest,
)
from esmc_toolkit.integrity.samples import find_components_dir, verify_samples

__all__ = [
    "IntegrityError",
    "PackageVerifier",
    "build_manifest",
    "write_signed_manifest",
    "find_components_dir",
    "verify_samples",
]
