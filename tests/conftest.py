# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for stamped_semver tests."""

from __future__ import annotations

from typing import Generator

import pytest

from stamped_semver import FormatConfig, set_config


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    """Give every test a fresh configuration read from the environment."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def utc_config() -> FormatConfig:
    """Install a configuration that renders timestamps in UTC with a fixed format."""
    config = FormatConfig(timestamp_format="%Y-%m-%d %H:%M:%S", use_utc=True)
    set_config(config)
    return config
