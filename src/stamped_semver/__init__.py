# SPDX-License-Identifier: MIT
"""Timestamped semantic versions for update checks.

A version is ``MAJOR.MINOR.PATCH`` with an optional build timestamp in
milliseconds, written ``TIMESTAMP_MAJOR.MINOR.PATCH``. Builds of the same
release are ordered by their timestamp.

Example:
    >>> from stamped_semver import parse_semver, compare_versions
    >>>
    >>> version = parse_semver("v1690000000000_1.2.3")
    >>> version.timestamp
    1690000000000
    >>> str(version)
    '1690000000000_1.2.3'
    >>>
    >>> compare_versions("1.0.0", "1.0.1")
    -1
"""

import logging

__version__ = "0.1.0"

from .semver import (
    SemVer,
    parse_semver,
    parse_semver_or_none,
    is_valid_semver,
    InvalidFormatError,
    SEMVER_PATTERN,
    SEMVER_JSON_PATTERN,
    MAX_COMPONENT,
    MAX_TIMESTAMP,
)
from .compare import (
    compare_versions,
    version_key,
    is_newer,
    latest_version,
)
from .format import (
    to_canonical_string,
    to_version_string,
    format_timestamp,
    format_epoch_millis,
)
from .config import FormatConfig, get_config, set_config
from .serialization import SemVerStr, dump_semver, load_semver

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Parsing
    "SemVer",
    "parse_semver",
    "parse_semver_or_none",
    "is_valid_semver",
    "InvalidFormatError",
    "SEMVER_PATTERN",
    "SEMVER_JSON_PATTERN",
    "MAX_COMPONENT",
    "MAX_TIMESTAMP",
    # Comparison
    "compare_versions",
    "version_key",
    "is_newer",
    "latest_version",
    # Formatting
    "to_canonical_string",
    "to_version_string",
    "format_timestamp",
    "format_epoch_millis",
    # Configuration
    "FormatConfig",
    "get_config",
    "set_config",
    # Serialization
    "SemVerStr",
    "dump_semver",
    "load_semver",
]
