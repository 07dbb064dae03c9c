"""Class construction and the class table pass."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from structural_metadata.enum_definitions import MetadataEnum
from structural_metadata.metadata_types import (
    MetadataType,
    MetadataTypeError,
    is_integer_type,
    parse_metadata_type,
)

from .class_models import MetadataClass, MetadataClassProperty

_LOGGER = logging.getLogger(__name__)


class ClassDefinitionError(Exception):
    """Raised when a raw class definition is structurally invalid."""


class UnresolvedEnumError(ClassDefinitionError):
    """Raised when a property names an enum missing from the enum table."""

    def __init__(self, field_name: str, enum_id: str) -> None:
        super().__init__(f"{field_name} '{enum_id}' does not exist in schema enums.")
        self.field_name = field_name
        self.enum_id = enum_id


def build_class_table(
    class_definitions: Mapping[str, Any], enums: Mapping[str, MetadataEnum]
) -> Mapping[str, MetadataClass]:
    """Build every class of a schema against the completed enum table.

    Classes never reference each other, so entries are independent of one
    another and of iteration order.
    """
    classes = {
        class_id: build_class(class_id, definition, enums)
        for class_id, definition in class_definitions.items()
    }
    _LOGGER.debug("Built %d class(es) against %d enum(s).", len(classes), len(enums))
    return MappingProxyType(classes)


def build_class(
    class_id: str, definition: Any, enums: Mapping[str, MetadataEnum]
) -> MetadataClass:
    """Construct one class, resolving enum-typed properties against ``enums``."""
    label = f"classes.{class_id}"
    if not isinstance(class_id, str) or not class_id:
        raise ClassDefinitionError(
            f"classes.{class_id!r} identifier must be a non-empty string."
        )
    if not isinstance(definition, Mapping):
        raise ClassDefinitionError(f"{label} must be an object.")

    raw_properties = definition.get("properties")
    if raw_properties is None:
        raw_properties = {}
    if not isinstance(raw_properties, Mapping):
        raise ClassDefinitionError(f"{label}.properties must be an object.")

    properties: dict[str, MetadataClassProperty] = {}
    seen_semantics: dict[str, str] = {}
    for property_id, raw_property in raw_properties.items():
        class_property = _build_property(
            property_id, raw_property, enums, f"{label}.properties.{property_id}"
        )
        semantic = class_property.semantic
        if semantic is not None:
            if semantic in seen_semantics:
                raise ClassDefinitionError(
                    f"{label} assigns semantic '{semantic}' to both "
                    f"'{seen_semantics[semantic]}' and '{property_id}'."
                )
            seen_semantics[semantic] = property_id
        properties[property_id] = class_property

    return MetadataClass(
        id=class_id,
        properties=MappingProxyType(properties),
        name=_optional_string(definition.get("name"), f"{label}.name"),
        description=_optional_string(definition.get("description"), f"{label}.description"),
        extras=copy.deepcopy(definition.get("extras")),
    )


def build_class_property(
    property_id: str, definition: Any, enums: Mapping[str, MetadataEnum]
) -> MetadataClassProperty:
    """Construct one class property outside of a class definition."""
    return _build_property(property_id, definition, enums, f"properties.{property_id}")


def _build_property(
    property_id: str, definition: Any, enums: Mapping[str, MetadataEnum], label: str
) -> MetadataClassProperty:
    if not isinstance(property_id, str) or not property_id:
        raise ClassDefinitionError(f"{label} identifier must be a non-empty string.")
    if not isinstance(definition, Mapping):
        raise ClassDefinitionError(f"{label} must be an object.")

    property_type = _require_type(definition.get("type"), f"{label}.type")
    component_type, component_count = _parse_array_shape(definition, property_type, label)
    scalar_type = component_type if component_type is not None else property_type

    enum_type = _resolve_enum_type(definition.get("enumType"), scalar_type, enums, label)
    value_type = enum_type.value_type if enum_type is not None else scalar_type

    normalized = _optional_bool(definition.get("normalized"), f"{label}.normalized")
    if normalized and (enum_type is not None or not is_integer_type(value_type)):
        raise ClassDefinitionError(f"{label}.normalized is only allowed for integer types.")

    return MetadataClassProperty(
        id=property_id,
        type=property_type,
        value_type=value_type,
        component_type=component_type,
        component_count=component_count,
        enum_type=enum_type,
        normalized=normalized,
        optional=_optional_bool(definition.get("optional"), f"{label}.optional"),
        semantic=_optional_string(definition.get("semantic"), f"{label}.semantic"),
        min=copy.deepcopy(definition.get("min")),
        max=copy.deepcopy(definition.get("max")),
        default=copy.deepcopy(definition.get("default")),
        name=_optional_string(definition.get("name"), f"{label}.name"),
        description=_optional_string(definition.get("description"), f"{label}.description"),
        extras=copy.deepcopy(definition.get("extras")),
    )


def _parse_array_shape(
    definition: Mapping[str, Any], property_type: MetadataType, label: str
) -> tuple[MetadataType | None, int | None]:
    raw_component_type = definition.get("componentType")
    raw_component_count = definition.get("componentCount")

    if property_type is not MetadataType.ARRAY:
        if raw_component_type is not None:
            raise ClassDefinitionError(f"{label}.componentType is only allowed for ARRAY.")
        if raw_component_count is not None:
            raise ClassDefinitionError(f"{label}.componentCount is only allowed for ARRAY.")
        return None, None

    component_type = _require_type(raw_component_type, f"{label}.componentType")
    if component_type is MetadataType.ARRAY:
        raise ClassDefinitionError(f"{label}.componentType must not be ARRAY.")

    if raw_component_count is None:
        return component_type, None
    if isinstance(raw_component_count, bool) or not isinstance(raw_component_count, int):
        raise ClassDefinitionError(f"{label}.componentCount must be an integer.")
    if raw_component_count <= 0:
        raise ClassDefinitionError(f"{label}.componentCount must be greater than zero.")
    return component_type, raw_component_count


def _resolve_enum_type(
    value: Any,
    scalar_type: MetadataType,
    enums: Mapping[str, MetadataEnum],
    label: str,
) -> MetadataEnum | None:
    field_name = f"{label}.enumType"
    if scalar_type is not MetadataType.ENUM:
        if value is not None:
            raise ClassDefinitionError(f"{field_name} is only allowed for ENUM values.")
        return None
    if not isinstance(value, str) or not value:
        raise ClassDefinitionError(f"{field_name} is required for ENUM values.")
    try:
        return enums[value]
    except KeyError as exc:
        raise UnresolvedEnumError(field_name, value) from exc


def _require_type(value: Any, field_name: str) -> MetadataType:
    if value is None:
        raise ClassDefinitionError(f"{field_name} is required.")
    try:
        return parse_metadata_type(value, field_name)
    except MetadataTypeError as exc:
        raise ClassDefinitionError(str(exc)) from exc


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ClassDefinitionError(f"{field_name} must be a boolean.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ClassDefinitionError(f"{field_name} must be a string.")
    return value
