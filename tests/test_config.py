# SPDX-License-Identifier: MIT
"""Tests for display configuration."""

from stamped_semver import FormatConfig, get_config, set_config


class TestFormatConfig:
    """Tests for FormatConfig."""

    def test_defaults(self):
        """Test default values."""
        config = FormatConfig()
        assert config.timestamp_format == "%c"
        assert config.use_utc is False

    def test_from_env(self, monkeypatch):
        """Test reading configuration from environment variables."""
        monkeypatch.setenv("STAMPED_SEMVER_TIMESTAMP_FORMAT", "%Y")
        monkeypatch.setenv("STAMPED_SEMVER_TIMESTAMP_UTC", "TRUE")
        config = FormatConfig.from_env()
        assert config.timestamp_format == "%Y"
        assert config.use_utc is True

    def test_from_env_unset(self, monkeypatch):
        """Test that missing variables keep defaults."""
        monkeypatch.delenv("STAMPED_SEMVER_TIMESTAMP_FORMAT", raising=False)
        monkeypatch.delenv("STAMPED_SEMVER_TIMESTAMP_UTC", raising=False)
        assert FormatConfig.from_env() == FormatConfig()


class TestGlobalConfig:
    """Tests for get_config and set_config."""

    def test_cached(self):
        """Test that the same instance is returned."""
        assert get_config() is get_config()

    def test_set_config(self):
        """Test replacing the configuration."""
        config = FormatConfig(timestamp_format="%H")
        set_config(config)
        assert get_config() is config

    def test_reset_reads_environment(self, monkeypatch):
        """Test that resetting re-reads the environment."""
        monkeypatch.setenv("STAMPED_SEMVER_TIMESTAMP_FORMAT", "%j")
        set_config(None)
        assert get_config().timestamp_format == "%j"
