"""Schema assembly service."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from structural_metadata.class_definitions import build_class_table
from structural_metadata.enum_definitions import build_enum_table

from .schema_models import InvalidArgumentError, MetadataSchema

_LOGGER = logging.getLogger(__name__)


def build_schema(schema: Any) -> MetadataSchema:
    """Build an immutable schema from a raw schema object.

    Enums are built before classes so that enum-typed properties resolve to
    the enum instances held by the returned schema. Failures raised while
    building an individual enum or class propagate unchanged.
    """
    if not isinstance(schema, Mapping):
        raise InvalidArgumentError(
            f"schema must be an object, got {type(schema).__name__}."
        )

    enum_definitions = _optional_mapping(schema.get("enums"), "enums")
    class_definitions = _optional_mapping(schema.get("classes"), "classes")

    enums = build_enum_table(enum_definitions)
    classes = build_class_table(class_definitions, enums)

    _LOGGER.debug(
        "Assembled schema %r with %d class(es) and %d enum(s).",
        schema.get("name"),
        len(classes),
        len(enums),
    )
    return MetadataSchema(
        classes=classes,
        enums=enums,
        name=schema.get("name"),
        description=schema.get("description"),
        extras=copy.deepcopy(schema.get("extras")),
    )


def _optional_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"schema.{field_name} must be an object.")
    return value
