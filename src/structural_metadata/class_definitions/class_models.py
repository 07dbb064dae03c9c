"""Class definition entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from structural_metadata.enum_definitions import MetadataEnum
from structural_metadata.metadata_types import MetadataType


@dataclass(frozen=True, eq=False)
class MetadataClassProperty:  # pylint: disable=too-many-instance-attributes
    """A single property of a class.

    ``enum_type`` refers to the enum owned by the schema's enum table and is
    never a copy. ``value_type`` is the effective scalar type: the enum's
    integer type for enum properties, the component type for arrays, the
    declared type otherwise.
    """

    id: str
    type: MetadataType
    value_type: MetadataType
    component_type: MetadataType | None = None
    component_count: int | None = None
    enum_type: MetadataEnum | None = None
    normalized: bool = False
    optional: bool = False
    semantic: str | None = None
    min: Any = None
    max: Any = None
    default: Any = None
    name: str | None = None
    description: str | None = None
    extras: Any = None

    @property
    def is_array(self) -> bool:
        return self.type is MetadataType.ARRAY


@dataclass(frozen=True, eq=False)
class MetadataClass:
    """Structured record type, identified within a schema by ``id``."""

    id: str
    properties: Mapping[str, MetadataClassProperty]
    name: str | None = None
    description: str | None = None
    extras: Any = None

    @property
    def properties_by_semantic(self) -> Mapping[str, MetadataClassProperty]:
        return MappingProxyType(
            {
                class_property.semantic: class_property
                for class_property in self.properties.values()
                if class_property.semantic is not None
            }
        )
