"""Tests for hardware fingerprinting."""

from __future__ import annotations

import logging
import platform

from esmc_toolkit.auth import hardware
from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.core.hasher import sha256_text


class TestHardwareId:
    def test_is_64_hex_chars_and_stable(self):
        first = hardware.hardware_id()
        assert len(first) == 64
        int(first, 16)
        assert hardware.hardware_id() == first

    def test_differs_from_base_machine_id(self):
        assert hardware.hardware_id() != hardware.base_machine_id()

    def test_override_is_ignored_and_logged(self, caplog):
        config = ToolkitConfig(hardware_id="f" * 64)
        with caplog.at_level(logging.WARNING, logger="esmc_toolkit.auth.hardware"):
            result = hardware.hardware_id(config)
        assert result == hardware.hardware_id()
        assert result != "f" * 64
        assert "spoofing" in caplog.text

    def test_fallback_when_fingerprinting_fails(self, monkeypatch):
        def _boom() -> str:
            raise OSError("no hostname")

        monkeypatch.setattr(hardware, "base_machine_id", _boom)
        assert hardware.hardware_id() == sha256_text(platform.node() + platform.machine())


class TestMacAddress:
    def test_random_node_reported_as_no_mac(self, monkeypatch):
        monkeypatch.setattr(hardware.uuid, "getnode", lambda: 0x010000000000)
        assert hardware._mac_address() == "no-mac"

    def test_formats_real_node(self, monkeypatch):
        monkeypatch.setattr(hardware.uuid, "getnode", lambda: 0x001122334455)
        assert hardware._mac_address() == "00:11:22:33:44:55"


class TestOsInfo:
    def test_str(self):
        info = hardware.OSInfo(platform="Linux", release="6.1", arch="x86_64")
        assert str(info) == "Linux 6.1 (x86_64)"

    def test_matches_platform(self):
        info = hardware.os_info()
        assert info.platform == platform.system()
        assert info.arch == platform.machine()

    def test_device_name(self):
        assert hardware.device_name()
