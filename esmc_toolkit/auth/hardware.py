"""Hardware fingerprinting for machine-bound credentials and licenses.

The fingerprint is a SHA-256 over several host characteristics.  An
``ESMC_HARDWARE_ID`` override is never honoured; a mismatching value is
logged as a spoofing attempt and ignored.
"""

from __future__ import annotations

import logging
import os
import platform
import socket
import uuid

from pydantic import BaseModel, ConfigDict

from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.core.hasher import sha256_text

logger = logging.getLogger(__name__)


def _total_memory() -> int:
    """Physical memory in bytes, or 0 where sysconf is unavailable."""
    try:
        return os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError):
        return 0


def _mac_address() -> str:
    """Primary MAC address as ``aa:bb:cc:dd:ee:ff``, or ``"no-mac"``."""
    node = uuid.getnode()
    # getnode() falls back to a random 48-bit number with the multicast bit set
    if (node >> 40) & 0x01:
        return "no-mac"
    return ":".join(f"{(node >> shift) & 0xFF:02x}" for shift in range(40, -1, -8))


def _cpu_model() -> str:
    return platform.processor() or platform.machine() or "unknown"


def base_machine_id() -> str:
    """SHA-256 of platform, hostname, CPU, memory and MAC."""
    mac = _mac_address()
    hardware_string = "|".join([
        platform.system().lower(),
        socket.gethostname(),
        _cpu_model(),
        str(_total_memory()),
        "" if mac == "no-mac" else mac,
    ])
    return sha256_text(hardware_string)


def hardware_id(config: ToolkitConfig | None = None) -> str:
    """Multi-factor fingerprint of this machine (64 hex chars).

    Falls back to SHA-256(hostname + arch) if fingerprinting fails.
    """
    try:
        fingerprint_data = "|".join([
            base_machine_id(),
            socket.gethostname(),
            _cpu_model()[:50],
            str(_total_memory()),
            platform.machine(),
            _mac_address(),
        ])
        fingerprint = sha256_text(fingerprint_data)
    except OSError as exc:
        logger.error("Error getting hardware ID: %s", exc)
        return sha256_text(platform.node() + platform.machine())

    if config is not None and config.hardware_id and config.hardware_id != fingerprint:
        logger.warning(
            "Attempted hardware ID spoofing detected! ESMC_HARDWARE_ID is "
            "ignored; using the derived hardware fingerprint."
        )

    return fingerprint


def device_name() -> str:
    return socket.gethostname() or "Unknown Device"


class OSInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    platform: str
    release: str
    arch: str

    def __str__(self) -> str:
        return f"{self.platform} {self.release} ({self.arch})"


def os_info() -> OSInfo:
    return OSInfo(
        platform=platform.system(),
        release=platform.release(),
        arch=platform.machine(),
    )
