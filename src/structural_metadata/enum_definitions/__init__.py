"""Enum definition exports."""

from .enum_builder import EnumDefinitionError, build_enum, build_enum_table
from .enum_models import MetadataEnum, MetadataEnumValue

__all__ = [
    "MetadataEnum",
    "MetadataEnumValue",
    "EnumDefinitionError",
    "build_enum",
    "build_enum_table",
]
