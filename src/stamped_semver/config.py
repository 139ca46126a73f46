# SPDX-License-Identifier: MIT
"""Display configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FormatConfig:
    """Timestamp rendering configuration."""

    timestamp_format: str = "%c"  # locale's date and time
    use_utc: bool = False

    @classmethod
    def from_env(cls) -> "FormatConfig":
        """Create configuration from environment variables."""
        import os

        config = cls()

        if timestamp_format := os.getenv("STAMPED_SEMVER_TIMESTAMP_FORMAT"):
            config.timestamp_format = timestamp_format
        config.use_utc = os.getenv("STAMPED_SEMVER_TIMESTAMP_UTC", "").lower() == "true"

        return config


_config: Optional[FormatConfig] = None


def get_config() -> FormatConfig:
    """Return the process-wide configuration, reading the environment on first use."""
    global _config
    if _config is None:
        _config = FormatConfig.from_env()
    return _config


def set_config(config: Optional[FormatConfig]) -> None:
    """Replace the process-wide configuration. None re-reads the environment on next use."""
    global _config
    _config = config
