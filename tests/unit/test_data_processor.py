"""Tests for DataProcessor."""

from __future__ import annotations

import pytest

from esmc_toolkit.components import DataProcessor


@pytest.fixture
def processor() -> DataProcessor:
    return DataProcessor()


class TestProcess:
    def test_list_is_copied(self, processor):
        data = [1, 2, 3]
        result = processor.process(data)
        assert result == data
        assert result is not data

    def test_non_list_returned_unchanged(self, processor):
        data = {"k": "v"}
        assert processor.process(data) is data
        assert processor.process("text") == "text"


class TestValidate:
    def test_none_is_invalid(self, processor):
        assert processor.validate(None) is False

    @pytest.mark.parametrize("value", [0, "", [], False])
    def test_falsy_values_are_still_present(self, processor, value):
        assert processor.validate(value) is True


class TestSerialize:
    def test_compact_output(self, processor):
        assert processor.serialize({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'

    def test_unserializable_raises(self, processor):
        with pytest.raises(TypeError):
            processor.serialize(object())
