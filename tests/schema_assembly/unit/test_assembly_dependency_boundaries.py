"""Boundary tests for the build passes' internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "structural_metadata"


def test_enum_pass_does_not_depend_on_classes_or_schema() -> None:
    enum_dir = _package_root() / "enum_definitions"
    forbidden_import_fragments = (
        "structural_metadata.class_definitions",
        "structural_metadata.schema_assembly",
    )

    for module_path in enum_dir.glob("*.py"):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden enum dependency in {module_path}: {fragment}"


def test_class_pass_does_not_depend_on_schema_assembly() -> None:
    class_dir = _package_root() / "class_definitions"

    for module_path in class_dir.glob("*.py"):
        text = module_path.read_text(encoding="utf-8")
        assert "structural_metadata.schema_assembly" not in text, module_path
        assert "structural_metadata.schema_loading" not in text, module_path
