"""ESMC toolkit: tier gating, licensing and package integrity.

  - Stub components (utility helpers, data processor, colonels, intelligence)
  - Hardware fingerprinting and encrypted credential storage via PyNaCl
  - Tier resolution against the ESMC backend with local fallback
  - Local license file management and credential-to-license sync
  - HMAC-signed integrity manifests and component sample checks
"""

__version__ = "3.65.0"
__author__ = "ESMC"
__description__ = "Tier gating, licensing and package integrity for ESMC"

from esmc_toolkit.auth.tier_manager import TierManager
from esmc_toolkit.auth.license_manager import LicenseManager
from esmc_toolkit.cli.app import app as cli

__all__ = ["TierManager", "LicenseManager", "cli", "__version__"]
