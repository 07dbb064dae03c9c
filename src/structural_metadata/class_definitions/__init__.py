"""Class definition exports."""

from .class_builder import (
    ClassDefinitionError,
    UnresolvedEnumError,
    build_class,
    build_class_property,
    build_class_table,
)
from .class_models import MetadataClass, MetadataClassProperty

__all__ = [
    "MetadataClass",
    "MetadataClassProperty",
    "ClassDefinitionError",
    "UnresolvedEnumError",
    "build_class",
    "build_class_property",
    "build_class_table",
]
