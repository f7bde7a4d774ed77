"""esmc-toolkit data models — all Pydantic v2, all frozen (immutable)."""

from esmc_toolkit.models.integrity import (
    IntegrityManifest,
    IntegritySample,
    PackageSignature,
    PackageVerificationReport,
    SampleVerificationResult,
)
from esmc_toolkit.models.license import (
    BlessingToken,
    Credentials,
    LicenseData,
    LicenseValidation,
    ServerChecksum,
    TierStatus,
)
from esmc_toolkit.models.results import (
    DeploymentResult,
    IntelligenceAnalysis,
    ProcessingResult,
    StrategicAssessment,
    StubEnvelope,
    SynthesisResult,
    ValidationReport,
)
from esmc_toolkit.models.tiers import (
    TIER_FEATURES,
    TIER_HIERARCHY,
    ColonelRank,
    Tier,
    TierFeatures,
)

__all__ = [
    # results
    "StubEnvelope",
    "DeploymentResult",
    "ValidationReport",
    "IntelligenceAnalysis",
    "SynthesisResult",
    "StrategicAssessment",
    "ProcessingResult",
    # tiers
    "Tier",
    "TIER_HIERARCHY",
    "ColonelRank",
    "TierFeatures",
    "TIER_FEATURES",
    # license
    "Credentials",
    "TierStatus",
    "BlessingToken",
    "ServerChecksum",
    "LicenseData",
    "LicenseValidation",
    # integrity
    "IntegrityManifest",
    "PackageSignature",
    "PackageVerificationReport",
    "IntegritySample",
    "SampleVerificationResult",
]
