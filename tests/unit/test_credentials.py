"""Tests for the encrypted credential store."""

from __future__ import annotations

import json
from datetime import timedelta

from esmc_toolkit.auth.credentials import CredentialStore, is_expired, machine_key
from esmc_toolkit.models.tiers import Tier


class TestCredentialStore:
    def test_save_then_load(self, credential_store, make_credentials):
        creds = make_credentials(tier=Tier.MAX)
        credential_store.save(creds)
        assert credential_store.load() == creds

    def test_file_holds_only_ciphertext(self, credential_store, make_credentials):
        credential_store.save(make_credentials(email="secret@example.com"))
        raw = credential_store.path.read_text(encoding="utf-8")
        assert "secret@example.com" not in raw
        assert list(json.loads(raw)) == ["encrypted"]

    def test_load_missing_file_returns_none(self, credential_store):
        assert credential_store.load() is None

    def test_clear(self, credential_store, make_credentials):
        credential_store.save(make_credentials())
        credential_store.clear()
        assert not credential_store.path.exists()
        credential_store.clear()  # missing file is fine

    def test_default_key_is_machine_bound(self, tmp_path, make_credentials):
        store = CredentialStore(tmp_path / "c.json")
        store.save(make_credentials())
        assert CredentialStore(tmp_path / "c.json", key=machine_key()).load() is not None


class TestIsExpired:
    def test_none_and_no_expiry_never_expire(self, make_credentials):
        assert is_expired(None) is False
        assert is_expired(make_credentials(expires_in=None)) is False

    def test_past_and_future(self, make_credentials):
        assert is_expired(make_credentials(expires_in=timedelta(seconds=-1))) is True
        assert is_expired(make_credentials(expires_in=timedelta(days=1))) is False
