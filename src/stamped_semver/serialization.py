# SPDX-License-Identifier: MIT
"""Pydantic adapter that stores a SemVer as its canonical string.

Use ``SemVerStr`` as a field type on any model:

    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: SemVerStr
    >>> Release.model_validate_json('{"version": "v1.2.3"}').model_dump_json()
    '{"version":"1.2.3"}'

A malformed string fails validation of the whole model.
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, WithJsonSchema

from .format import to_canonical_string
from .semver import SEMVER_JSON_PATTERN, SemVer, parse_semver


def _validate_semver(value: Any) -> SemVer:
    """Accept a SemVer instance or parse a version string."""
    if isinstance(value, SemVer):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Version must be a string, got {type(value).__name__}")
    # InvalidFormatError is a ValueError, so pydantic reports it as a validation error
    return parse_semver(value)


SemVerStr = Annotated[
    SemVer,
    PlainValidator(_validate_semver),
    PlainSerializer(to_canonical_string, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "pattern": SEMVER_JSON_PATTERN,
            "examples": ["1.2.3", "1690000000000_1.2.3"],
        }
    ),
]

SEMVER_ADAPTER: TypeAdapter[SemVer] = TypeAdapter(SemVerStr)


def dump_semver(version: SemVer) -> str:
    """Serialize a version to its canonical string."""
    return SEMVER_ADAPTER.dump_python(version)


def load_semver(value: Any) -> SemVer:
    """Deserialize a version string.

    Raises:
        pydantic.ValidationError: If the value is not a valid version string
    """
    return SEMVER_ADAPTER.validate_python(value)
