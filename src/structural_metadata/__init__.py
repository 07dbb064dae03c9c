"""Read-only metadata schema model: enums, classes and their cross references."""

import logging

from .class_definitions import (
    ClassDefinitionError,
    MetadataClass,
    MetadataClassProperty,
    UnresolvedEnumError,
)
from .enum_definitions import EnumDefinitionError, MetadataEnum, MetadataEnumValue
from .metadata_types import MetadataType, MetadataTypeError
from .schema_assembly import InvalidArgumentError, MetadataSchema, build_schema
from .schema_loading import SchemaLoadError, load_metadata_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MetadataSchema",
    "MetadataClass",
    "MetadataClassProperty",
    "MetadataEnum",
    "MetadataEnumValue",
    "MetadataType",
    "build_schema",
    "load_metadata_schema",
    "InvalidArgumentError",
    "EnumDefinitionError",
    "ClassDefinitionError",
    "UnresolvedEnumError",
    "MetadataTypeError",
    "SchemaLoadError",
]
