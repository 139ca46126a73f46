# SPDX-License-Identifier: MIT
"""String renderings of a SemVer.

The canonical form never carries the ``v`` prefix and is the form the parser
and the serialization adapter expect.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING, Optional

from .config import get_config

if TYPE_CHECKING:
    from .semver import SemVer


def to_canonical_string(version: SemVer) -> str:
    """Return ``TIMESTAMP_MAJOR.MINOR.PATCH``, or ``MAJOR.MINOR.PATCH`` without a timestamp.

    Examples:
        >>> to_canonical_string(SemVer(1, 2, 3))
        '1.2.3'
        >>> to_canonical_string(SemVer(1, 2, 3, 1690000000000))
        '1690000000000_1.2.3'
    """
    if version.timestamp != 0:
        return f"{version.timestamp}_{version.major}.{version.minor}.{version.patch}"
    return to_version_string(version)


def to_version_string(version: SemVer) -> str:
    """Return ``MAJOR.MINOR.PATCH``, dropping any timestamp."""
    return f"{version.major}.{version.minor}.{version.patch}"


def format_epoch_millis(
    millis: int, fmt: Optional[str] = None, tz: Optional[tzinfo] = None
) -> str:
    """Render milliseconds since the Unix epoch as a date-time string.

    Args:
        millis: Milliseconds since the Unix epoch
        fmt: strftime format, defaults to the configured format (``%c``)
        tz: Timezone to render in, defaults to UTC or local time per config

    Returns:
        The formatted date-time. Output depends on the process locale and
        timezone unless both ``fmt`` and ``tz`` pin it down.

    Raises:
        ValueError: If the timestamp is outside the platform's date range
    """
    config = get_config()
    if fmt is None:
        fmt = config.timestamp_format
    if tz is None and config.use_utc:
        tz = timezone.utc

    seconds, remainder = divmod(millis, 1000)
    try:
        moment = datetime.fromtimestamp(seconds, tz=tz)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {millis}") from exc

    return moment.replace(microsecond=remainder * 1000).strftime(fmt)


def format_timestamp(
    version: SemVer, fmt: Optional[str] = None, tz: Optional[tzinfo] = None
) -> str:
    """Render the build timestamp of a version for display."""
    return format_epoch_millis(version.timestamp, fmt, tz)
