# SPDX-License-Identifier: MIT
"""Version comparison.

Fields are compared in the order major, minor, patch, timestamp. Builds that
share a version triple are ordered by timestamp, and an untimestamped build
sorts before any timestamped build of the same triple.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .semver import InvalidFormatError, SemVer, parse_semver


def _coerce(version: Union[str, SemVer]) -> SemVer:
    """Return a SemVer, parsing strings and rejecting other types."""
    if isinstance(version, SemVer):
        return version
    if not isinstance(version, str):
        raise InvalidFormatError(
            str(version), f"Version must be a string or SemVer, got {type(version).__name__}"
        )
    return parse_semver(version)


def compare_versions(version1: Union[str, SemVer], version2: Union[str, SemVer]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or SemVer)
        version2: Second version (string or SemVer)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "1.0.1")
        -1
        >>> compare_versions("5_1.0.0", "1.0.0")
        1
        >>> compare_versions("v1.0.0", "1.0.0")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch", "timestamp"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return 0


def version_key(version: Union[str, SemVer]) -> tuple[int, int, int, int]:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.0.1", "5_1.0.0", "1.0.0"], key=version_key)
        ['1.0.0', '5_1.0.0', '1.0.1']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, v.timestamp)


def is_newer(candidate: Union[str, SemVer], installed: Union[str, SemVer]) -> bool:
    """Return True if ``candidate`` should replace ``installed``."""
    return compare_versions(candidate, installed) > 0


def latest_version(versions: Iterable[Union[str, SemVer]]) -> Optional[SemVer]:
    """Return the greatest version, or None if there are none.

    Raises:
        InvalidFormatError: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        return None
    return max(parsed, key=version_key)
