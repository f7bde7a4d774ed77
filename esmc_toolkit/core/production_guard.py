"""Production configuration guard — enforces hard constraints in production.

The guard runs once at startup and fails hard (raises
``ProductionConfigError``) if any constraint is violated.  Other code should
not scatter ``if is_production`` checks.
"""

from __future__ import annotations

import logging

from esmc_toolkit.config import ToolkitConfig

logger = logging.getLogger(__name__)


class ProductionConfigError(RuntimeError):
    """Raised when production configuration constraints are violated.

    The process should exit; this must not be caught and ignored.
    """


def enforce_production_constraints(config: ToolkitConfig) -> None:
    """Validate all production-critical configuration constraints.

    Constraints enforced
    --------------------
    1. Debug mode must be disabled.
    2. Dev mode (signature checks relaxed) must be disabled.
    3. A package signature key must be configured.

    Raises
    ------
    ProductionConfigError
        Listing every violation at once.
    """
    if not config.is_production:
        return

    violations: list[str] = []

    if config.debug:
        violations.append(
            "debug=True is not allowed in production. Set ESMC_DEBUG=false."
        )

    if config.dev_mode:
        violations.append(
            "dev_mode=True is not allowed in production. Set ESMC_DEV_MODE=false."
        )

    if not config.package_signature_key:
        violations.append(
            "Package signature key is required in production but not configured. "
            "Set ESMC_PACKAGE_SIGNATURE_KEY."
        )

    if violations:
        msg = (
            "Production configuration guard failed.\n"
            + "\n".join(f"  - {v}" for v in violations)
        )
        logger.critical(msg)
        raise ProductionConfigError(msg)

    logger.info("Production configuration guard passed.")
