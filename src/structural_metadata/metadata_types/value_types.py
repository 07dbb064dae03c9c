"""Value types a metadata property may declare."""

from __future__ import annotations

from enum import Enum
from typing import Any


class MetadataTypeError(Exception):
    """Raised when a value type token is unknown or used out of place."""


class MetadataType(str, Enum):
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    ENUM = "ENUM"
    ARRAY = "ARRAY"


_INTEGER_RANGES: dict[MetadataType, tuple[int, int]] = {
    MetadataType.INT8: (-(2**7), 2**7 - 1),
    MetadataType.UINT8: (0, 2**8 - 1),
    MetadataType.INT16: (-(2**15), 2**15 - 1),
    MetadataType.UINT16: (0, 2**16 - 1),
    MetadataType.INT32: (-(2**31), 2**31 - 1),
    MetadataType.UINT32: (0, 2**32 - 1),
    MetadataType.INT64: (-(2**63), 2**63 - 1),
    MetadataType.UINT64: (0, 2**64 - 1),
}

_FLOAT_TYPES = frozenset({MetadataType.FLOAT32, MetadataType.FLOAT64})


def parse_metadata_type(value: Any, field_name: str) -> MetadataType:
    """Return the value type named by an exact upper-case token."""
    if not isinstance(value, str):
        raise MetadataTypeError(f"{field_name} must be a string.")
    try:
        return MetadataType(value)
    except ValueError as exc:
        raise MetadataTypeError(f"{field_name} '{value}' is not a known metadata type.") from exc


def is_integer_type(metadata_type: MetadataType) -> bool:
    return metadata_type in _INTEGER_RANGES


def is_numeric_type(metadata_type: MetadataType) -> bool:
    return metadata_type in _INTEGER_RANGES or metadata_type in _FLOAT_TYPES


def integer_range(metadata_type: MetadataType) -> tuple[int, int]:
    """Return the inclusive bounds representable by an integer type."""
    try:
        return _INTEGER_RANGES[metadata_type]
    except KeyError as exc:
        raise MetadataTypeError(f"{metadata_type.value} is not an integer type.") from exc
