"""Metadata value-type exports."""

from .value_types import (
    MetadataType,
    MetadataTypeError,
    integer_range,
    is_integer_type,
    is_numeric_type,
    parse_metadata_type,
)

__all__ = [
    "MetadataType",
    "MetadataTypeError",
    "integer_range",
    "is_integer_type",
    "is_numeric_type",
    "parse_metadata_type",
]
