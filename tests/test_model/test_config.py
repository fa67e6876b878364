"""Tests for ObjtasksConfig."""

import dataclasses

import pytest

from objtasks.config import ObjtasksConfig


class TestObjtasksConfig:
    def test_defaults(self):
        config = ObjtasksConfig()
        assert config.json_indent is None
        assert config.json_sort_keys is False
        assert config.log_level == "WARNING"

    def test_frozen(self):
        config = ObjtasksConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.json_indent = 4  # type: ignore[misc]

    def test_replace(self):
        config = dataclasses.replace(ObjtasksConfig(), json_sort_keys=True)
        assert config.json_sort_keys is True
