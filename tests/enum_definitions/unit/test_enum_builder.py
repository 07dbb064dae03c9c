"""Enum construction tests."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest
from structural_metadata.enum_definitions import (
    EnumDefinitionError,
    MetadataEnumValue,
    build_enum,
    build_enum_table,
)
from structural_metadata.metadata_types import MetadataType


def _roof_definition() -> dict[str, object]:
    return {
        "name": "Roof type",
        "description": "Shape of the roof",
        "valueType": "UINT8",
        "values": [
            {"name": "FLAT", "value": 0},
            {"name": "GABLED", "value": 1, "description": "Two slopes"},
        ],
        "extras": {"origin": ["survey"]},
    }


def test_builds_enum_with_identifier_and_values() -> None:
    metadata_enum = build_enum("roofType", _roof_definition())

    assert metadata_enum.id == "roofType"
    assert metadata_enum.name == "Roof type"
    assert metadata_enum.description == "Shape of the roof"
    assert metadata_enum.value_type is MetadataType.UINT8
    assert [entry.name for entry in metadata_enum.values] == ["FLAT", "GABLED"]
    assert metadata_enum.values[1].description == "Two slopes"
    assert metadata_enum.values_by_name == {"FLAT": 0, "GABLED": 1}
    assert metadata_enum.names_by_value == {0: "FLAT", 1: "GABLED"}


def test_value_type_defaults_to_uint16() -> None:
    metadata_enum = build_enum("e", {"values": [{"name": "A", "value": 65535}]})

    assert metadata_enum.value_type is MetadataType.UINT16


def test_enum_identifier_cannot_be_reassigned() -> None:
    metadata_enum = build_enum("roofType", _roof_definition())

    with pytest.raises(FrozenInstanceError):
        metadata_enum.id = "other"  # type: ignore[misc]


def test_extras_are_copied_from_definition() -> None:
    definition = _roof_definition()
    metadata_enum = build_enum("roofType", definition)

    definition["extras"]["origin"].append("mutated")  # type: ignore[index]

    assert metadata_enum.extras == {"origin": ["survey"]}


@pytest.mark.parametrize(
    ("definition", "message"),
    [
        (None, "must be an object"),
        ([], "must be an object"),
        ({}, "values must be a list"),
        ({"values": "FLAT"}, "values must be a list"),
        ({"values": []}, "at least one value"),
        ({"values": [1]}, r"values\[0\] must be an object"),
        ({"values": [{"value": 1}]}, "name must be a non-empty string"),
        ({"values": [{"name": "A", "value": "1"}]}, "value must be an integer"),
        ({"values": [{"name": "A", "value": True}]}, "value must be an integer"),
        ({"values": [{"name": "A", "value": 1.5}]}, "value must be an integer"),
        (
            {"values": [{"name": "A", "value": 0}, {"name": "A", "value": 1}]},
            "duplicate value name 'A'",
        ),
        (
            {"values": [{"name": "A", "value": 0}, {"name": "B", "value": 0}]},
            "duplicate integer value 0",
        ),
        ({"valueType": "FLOAT32", "values": [{"name": "A", "value": 0}]}, "integer type"),
        ({"valueType": "BYTE", "values": [{"name": "A", "value": 0}]}, "not a known"),
        ({"valueType": "UINT8", "values": [{"name": "A", "value": 256}]}, "out of range"),
        ({"valueType": "INT8", "values": [{"name": "A", "value": -129}]}, "out of range"),
        ({"name": 3, "values": [{"name": "A", "value": 0}]}, "name must be a string"),
    ],
)
def test_rejects_malformed_enum_definitions(definition: object, message: str) -> None:
    with pytest.raises(EnumDefinitionError, match=message):
        build_enum("broken", definition)


def test_enum_table_preserves_every_key() -> None:
    table = build_enum_table(
        {
            "roofType": _roof_definition(),
            "species": {"values": [{"name": "OAK", "value": 1}]},
        }
    )

    assert set(table) == {"roofType", "species"}
    assert all(table[enum_id].id == enum_id for enum_id in table)


def test_enum_table_is_read_only() -> None:
    table = build_enum_table({"roofType": _roof_definition()})

    with pytest.raises(TypeError):
        table["other"] = table["roofType"]  # type: ignore[index]


def test_enum_table_propagates_definition_errors() -> None:
    with pytest.raises(EnumDefinitionError, match="enums.broken"):
        build_enum_table({"ok": {"values": [{"name": "A", "value": 0}]}, "broken": {}})


def test_enum_values_with_extras_are_hashable() -> None:
    metadata_enum = build_enum(
        "roofType", {"values": [{"name": "FLAT", "value": 0, "extras": {"legacy": True}}]}
    )

    flat = metadata_enum.values[0]

    assert {flat: "flat"}[flat] == "flat"
    assert flat == MetadataEnumValue(name="FLAT", value=0, extras={"legacy": True})
