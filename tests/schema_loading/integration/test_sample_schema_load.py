"""Integration tests loading the bundled sample schema documents."""

from __future__ import annotations

from pathlib import Path

from structural_metadata import MetadataType, load_metadata_schema


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def test_sample_json_schema_builds_full_model() -> None:
    schema = load_metadata_schema(_samples_dir() / "sample-metadata-schema.json")

    assert schema.name == "City"
    assert set(schema.enums) == {"roofType", "species"}
    assert set(schema.classes) == {"building", "tree"}

    roof_type = schema.enums["roofType"]
    assert roof_type.value_type is MetadataType.UINT8
    assert roof_type.names_by_value[2] == "HIPPED"

    building = schema.classes["building"]
    assert building.properties["roof"].enum_type is roof_type
    assert building.properties["occupancy"].normalized is True
    assert building.properties_by_semantic["HEIGHT"] is building.properties["height"]

    species = schema.classes["tree"].properties["species"]
    assert species.enum_type is schema.enums["species"]
    assert species.component_count == 2
    assert schema.extras == {"source": {"survey": "2021", "tags": ["lidar", "manual"]}}


def test_json_and_yaml_samples_build_equivalent_schemas() -> None:
    json_schema = load_metadata_schema(_samples_dir() / "sample-metadata-schema.json")
    yaml_schema = load_metadata_schema(_samples_dir() / "sample-metadata-schema.yaml")

    assert json_schema.name == yaml_schema.name
    assert json_schema.description == yaml_schema.description
    assert json_schema.extras == yaml_schema.extras
    assert set(json_schema.enums) == set(yaml_schema.enums)
    for class_id, json_class in json_schema.classes.items():
        yaml_class = yaml_schema.classes[class_id]
        assert list(json_class.properties) == list(yaml_class.properties)
        for property_id, json_property in json_class.properties.items():
            yaml_property = yaml_class.properties[property_id]
            assert json_property.value_type is yaml_property.value_type
            assert json_property.default == yaml_property.default
    assert json_schema.enums["species"] is not yaml_schema.enums["species"]
