"""Enum construction and the enum table pass."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from structural_metadata.metadata_types import (
    MetadataType,
    MetadataTypeError,
    integer_range,
    is_integer_type,
    parse_metadata_type,
)

from .enum_models import MetadataEnum, MetadataEnumValue

_LOGGER = logging.getLogger(__name__)

DEFAULT_ENUM_VALUE_TYPE = MetadataType.UINT16


class EnumDefinitionError(Exception):
    """Raised when a raw enum definition is structurally invalid."""


def build_enum_table(enum_definitions: Mapping[str, Any]) -> Mapping[str, MetadataEnum]:
    """Build every enum of a schema, keyed by its identifier."""
    enums = {
        enum_id: build_enum(enum_id, definition)
        for enum_id, definition in enum_definitions.items()
    }
    _LOGGER.debug("Built %d enum(s).", len(enums))
    return MappingProxyType(enums)


def build_enum(enum_id: str, definition: Any) -> MetadataEnum:
    """Construct one enum from its raw definition."""
    label = f"enums.{enum_id}"
    if not isinstance(enum_id, str) or not enum_id:
        raise EnumDefinitionError(f"enums.{enum_id!r} identifier must be a non-empty string.")
    if not isinstance(definition, Mapping):
        raise EnumDefinitionError(f"{label} must be an object.")

    value_type = _parse_value_type(definition.get("valueType"), label)
    values = _parse_values(definition.get("values"), value_type, label)

    return MetadataEnum(
        id=enum_id,
        values=values,
        value_type=value_type,
        name=_optional_string(definition.get("name"), f"{label}.name"),
        description=_optional_string(definition.get("description"), f"{label}.description"),
        extras=copy.deepcopy(definition.get("extras")),
    )


def _parse_value_type(value: Any, label: str) -> MetadataType:
    if value is None:
        return DEFAULT_ENUM_VALUE_TYPE
    try:
        value_type = parse_metadata_type(value, f"{label}.valueType")
    except MetadataTypeError as exc:
        raise EnumDefinitionError(str(exc)) from exc
    if not is_integer_type(value_type):
        raise EnumDefinitionError(f"{label}.valueType must be an integer type.")
    return value_type


def _parse_values(
    value: Any, value_type: MetadataType, label: str
) -> tuple[MetadataEnumValue, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise EnumDefinitionError(f"{label}.values must be a list.")
    if not value:
        raise EnumDefinitionError(f"{label}.values must contain at least one value.")

    minimum, maximum = integer_range(value_type)
    parsed: list[MetadataEnumValue] = []
    seen_names: set[str] = set()
    seen_values: set[int] = set()
    for index, raw_value in enumerate(value):
        entry = _parse_value(raw_value, f"{label}.values[{index}]")
        if entry.name in seen_names:
            raise EnumDefinitionError(f"{label} has duplicate value name '{entry.name}'.")
        if entry.value in seen_values:
            raise EnumDefinitionError(f"{label} has duplicate integer value {entry.value}.")
        if not minimum <= entry.value <= maximum:
            raise EnumDefinitionError(
                f"{label}.values[{index}].value {entry.value} is out of range "
                f"for {value_type.value}."
            )
        seen_names.add(entry.name)
        seen_values.add(entry.value)
        parsed.append(entry)
    return tuple(parsed)


def _parse_value(raw_value: Any, label: str) -> MetadataEnumValue:
    if not isinstance(raw_value, Mapping):
        raise EnumDefinitionError(f"{label} must be an object.")
    name = raw_value.get("name")
    if not isinstance(name, str) or not name:
        raise EnumDefinitionError(f"{label}.name must be a non-empty string.")
    value = raw_value.get("value")
    if isinstance(value, bool) or not isinstance(value, int):
        raise EnumDefinitionError(f"{label}.value must be an integer.")
    return MetadataEnumValue(
        name=name,
        value=value,
        description=_optional_string(raw_value.get("description"), f"{label}.description"),
        extras=copy.deepcopy(raw_value.get("extras")),
    )


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise EnumDefinitionError(f"{field_name} must be a string.")
    return value
