"""Schema document loader service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from structural_metadata.schema_assembly import MetadataSchema, build_schema

from .source_models import SchemaSource

_LOGGER = logging.getLogger(__name__)

_FORMATS_BY_SUFFIX = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class SchemaLoadError(Exception):
    """Raised when a schema document cannot be read or parsed."""


def load_metadata_schema(schema_path: Path | str) -> MetadataSchema:
    """Read, parse and build the schema stored at ``schema_path``."""
    source = read_schema_source(schema_path)
    return build_schema(parse_schema_source(source))


def read_schema_source(schema_path: Path | str) -> SchemaSource:
    """Read a JSON or YAML schema document from disk."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaLoadError(f"Schema file not found: {path}")

    document_format = _FORMATS_BY_SUFFIX.get(path.suffix.lower())
    if document_format is None:
        raise SchemaLoadError(
            f"Unsupported schema file extension '{path.suffix}'; "
            "expected .json, .yaml or .yml."
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Failed to read schema file {path}: {exc}") from exc

    _LOGGER.debug("Read %s schema document from %s.", document_format, path)
    return SchemaSource(document_format=document_format, text=text, source_path=path)


def parse_schema_source(source: SchemaSource) -> Mapping[str, Any]:
    """Parse schema document text into a raw schema object."""
    if source.document_format == "json":
        parsed = _parse_json(source.text)
    elif source.document_format == "yaml":
        parsed = _parse_yaml(source.text)
    else:
        raise SchemaLoadError(f"Unsupported schema document format: {source.document_format}")

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise SchemaLoadError("Schema document root must be a mapping.")
    return parsed


def _parse_json(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Invalid JSON schema document: {exc}") from exc


def _parse_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Invalid YAML schema document: {exc}") from exc
