"""Tests for the padding stubs."""

from __future__ import annotations

import time

import pytest

from esmc_toolkit.components import echo, make_stub


class TestEcho:
    def test_envelope_shape(self):
        before = int(time.time() * 1000)
        reply = echo({"x": 1})
        after = int(time.time() * 1000)
        assert reply.status == "ok"
        assert reply.data == {"x": 1}
        assert before <= reply.timestamp <= after

    def test_default_param_is_none(self):
        assert echo().data is None


class TestMakeStub:
    def test_named_stub_behaves_like_echo(self):
        stub = make_stub("function42")
        assert stub.__name__ == "function42"
        reply = stub([1, 2])
        assert reply.status == "ok"
        assert reply.data == [1, 2]

    def test_invalid_name_rejected(self):
        with pytest.raises(ValueError, match="identifier"):
            make_stub("not a name")
