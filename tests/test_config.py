"""
Tests for configuration and pull tracing.
"""

import logging

import pytest

from lazyiter import IterConfig, from_range, get_trace, set_trace


class TestIterConfig:
    """Tests for the global configuration."""

    def test_singleton(self):
        """Test that there is one global config."""
        assert IterConfig.global_config() is IterConfig.global_config()

    def test_default_off(self):
        """Test that tracing is off without the environment variable."""
        assert get_trace() is False

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_env_enables(self, monkeypatch, value):
        """Test truthy environment values."""
        monkeypatch.setenv("LAZYITER_TRACE", value)
        IterConfig.global_config().reset()
        assert get_trace() is True

    @pytest.mark.parametrize("value", ["", "0", "false", "off", "maybe"])
    def test_env_disables(self, monkeypatch, value):
        """Test other environment values."""
        monkeypatch.setenv("LAZYITER_TRACE", value)
        IterConfig.global_config().reset()
        assert get_trace() is False

    def test_set_trace_overrides_env(self, monkeypatch):
        """Test that an explicit setting wins over the environment."""
        monkeypatch.setenv("LAZYITER_TRACE", "1")
        set_trace(False)
        assert get_trace() is False

    def test_trace_must_be_bool(self):
        """Test that non-bool settings are rejected."""
        with pytest.raises(TypeError):
            IterConfig.global_config().trace = 1


class TestTracing:
    """Tests for per-pull DEBUG logging."""

    def test_trace_logs_pulls(self, caplog):
        """Test that each pull is logged when tracing."""
        caplog.set_level(logging.DEBUG, logger="lazyiter")
        set_trace(True)
        from_range(1, 2).to_list()
        messages = [r.getMessage() for r in caplog.records]
        assert "pull RangeProducer(1, 3) -> 1" in messages
        assert "pull RangeProducer(1, 3) -> 2" in messages
        assert "pull RangeProducer(1, 3) -> EXHAUSTED" in messages

    def test_trace_logs_every_layer(self, caplog):
        """Test that stacked iterators each log their pulls."""
        caplog.set_level(logging.DEBUG, logger="lazyiter.core")
        set_trace(True)
        from_range(1, 1).map(lambda x: x + 1).to_list()
        messages = [r.getMessage() for r in caplog.records]
        assert "pull MapIterator(RangeProducer(1, 2)) -> 2" in messages
        assert "pull RangeProducer(1, 2) -> 1" in messages

    def test_no_trace_by_default(self, caplog):
        """Test that pulls are silent unless tracing is on."""
        caplog.set_level(logging.DEBUG, logger="lazyiter")
        from_range(1, 3).to_list()
        assert not any(r.getMessage().startswith("pull") for r in caplog.records)
