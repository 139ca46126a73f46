# SPDX-License-Identifier: MIT
"""Timestamped semantic version parsing.

Accepts ``MAJOR.MINOR.PATCH`` with an optional leading ``v`` and an optional
millisecond timestamp prefix:
- ``1.2.3``, ``v1.2.3``
- ``1690000000000_1.2.3`` (timestamp, then the version triple)

The ``.`` and ``_`` delimiters are interchangeable when splitting.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .format import format_timestamp, to_canonical_string, to_version_string

logger = logging.getLogger(__name__)

MAX_COMPONENT = 2**31 - 1
MAX_TIMESTAMP = 2**63 - 1

_SHAPE = r"v?[0-9]+[._][0-9]+[._][0-9]+(?:[._][0-9]+)?"

# Shape accepted by parse_semver. Does not check numeric ranges.
SEMVER_PATTERN = re.compile(rf"^{_SHAPE}\Z")
# ECMA-262 form of the same shape for JSON schemas
SEMVER_JSON_PATTERN = f"^{_SHAPE}$"

_DELIMITERS = re.compile(r"[._]")
_DIGITS = re.compile(r"[0-9]+")


class InvalidFormatError(ValueError):
    """Raised when a string is not a valid timestamped semantic version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semver string {version}"
        super().__init__(self.message)


def _check_range(name: str, value: int, maximum: int) -> None:
    """Raise if a field is not an int within 0..maximum."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    """An immutable version with an optional build timestamp.

    Ordering and equality cover all four fields in declaration order, so
    two builds of the same release are told apart by their timestamp.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        timestamp: Build time in milliseconds since the Unix epoch, 0 if absent
    """

    major: int
    minor: int
    patch: int
    timestamp: int = 0

    def __post_init__(self) -> None:
        _check_range("major", self.major, MAX_COMPONENT)
        _check_range("minor", self.minor, MAX_COMPONENT)
        _check_range("patch", self.patch, MAX_COMPONENT)
        _check_range("timestamp", self.timestamp, MAX_TIMESTAMP)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return to_canonical_string(self)

    @classmethod
    def parse(cls, version_string: str) -> "SemVer":
        """Parse a version string, raising InvalidFormatError if invalid."""
        return parse_semver(version_string)

    @classmethod
    def parse_or_none(cls, version_string: str) -> Optional["SemVer"]:
        """Parse a version string, returning None if invalid."""
        return parse_semver_or_none(version_string)

    @property
    def has_timestamp(self) -> bool:
        """Return True if a build timestamp is present."""
        return self.timestamp != 0

    @property
    def core(self) -> tuple[int, int, int]:
        """Return the (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    def to_canonical_string(self) -> str:
        """Return the round-trippable string, with the timestamp if present."""
        return to_canonical_string(self)

    def to_version_string(self) -> str:
        """Return MAJOR.MINOR.PATCH without the timestamp."""
        return to_version_string(self)

    def format_timestamp(
        self, fmt: Optional[str] = None, tz: Optional[tzinfo] = None
    ) -> str:
        """Render the build timestamp as a date-time string."""
        return format_timestamp(self, fmt, tz)


def _parse_token(token: str, maximum: int) -> Optional[int]:
    """Parse a plain base-10 token, returning None if invalid or out of range."""
    if not _DIGITS.fullmatch(token):
        return None
    value = int(token)
    if value > maximum:
        return None
    return value


def parse_semver(version_string: str) -> SemVer:
    """Parse a version string into a SemVer.

    Args:
        version_string: ``[v]MAJOR.MINOR.PATCH`` or
            ``[v]TIMESTAMP_MAJOR.MINOR.PATCH``

    Returns:
        The parsed SemVer

    Raises:
        InvalidFormatError: If the string is not a valid version

    Examples:
        >>> parse_semver("v1.0.0")
        SemVer(major=1, minor=0, patch=0, timestamp=0)

        >>> parse_semver("1690000000000_1.2.3")
        SemVer(major=1, minor=2, patch=3, timestamp=1690000000000)
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    parts = _DELIMITERS.split(version_string.removeprefix("v"))
    if len(parts) not in (3, 4):
        raise InvalidFormatError(version_string)

    timestamp: Optional[int] = 0
    if len(parts) == 4:
        timestamp = _parse_token(parts.pop(0), MAX_TIMESTAMP)
    components = [_parse_token(part, MAX_COMPONENT) for part in parts]

    if timestamp is None or None in components:
        raise InvalidFormatError(version_string)

    major, minor, patch = components
    return SemVer(major=major, minor=minor, patch=patch, timestamp=timestamp)


def parse_semver_or_none(version_string: str) -> Optional[SemVer]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> parse_semver_or_none("1.2") is None
        True
    """
    try:
        return parse_semver(version_string)
    except InvalidFormatError as exc:
        logger.debug("Rejected version string %r: %s", version_string, exc.message)
        return None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("a.b.c")
        False
    """
    return parse_semver_or_none(version_string) is not None
