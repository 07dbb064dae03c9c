"""Schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from structural_metadata.class_definitions import MetadataClass
from structural_metadata.enum_definitions import MetadataEnum


class InvalidArgumentError(Exception):
    """Raised when the raw schema input or schema tables are not well formed."""


@dataclass(frozen=True, eq=False)
class MetadataSchema:
    """Read-only composition of classes, enums and descriptive fields.

    Every enum-typed property of a class in ``classes`` refers to the enum
    instance held in ``enums`` of this same schema. Use ``build_schema`` to
    construct one from a raw schema object.
    """

    classes: Mapping[str, MetadataClass]
    enums: Mapping[str, MetadataEnum]
    name: str | None = None
    description: str | None = None
    extras: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.classes, Mapping):
            raise InvalidArgumentError("schema classes must be a mapping.")
        if not isinstance(self.enums, Mapping):
            raise InvalidArgumentError("schema enums must be a mapping.")
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))
        object.__setattr__(self, "enums", MappingProxyType(dict(self.enums)))

        for class_id, metadata_class in self.classes.items():
            for property_id, class_property in metadata_class.properties.items():
                enum_type = class_property.enum_type
                if enum_type is not None and self.enums.get(enum_type.id) is not enum_type:
                    raise InvalidArgumentError(
                        f"classes.{class_id}.properties.{property_id} refers to enum "
                        f"'{enum_type.id}' not owned by this schema."
                    )

    def get_class(self, class_id: str) -> MetadataClass:
        try:
            return self.classes[class_id]
        except KeyError:
            raise KeyError(f"Unknown class: {class_id}") from None

    def get_enum(self, enum_id: str) -> MetadataEnum:
        try:
            return self.enums[enum_id]
        except KeyError:
            raise KeyError(f"Unknown enum: {enum_id}") from None
