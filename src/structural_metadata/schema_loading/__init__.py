"""Schema document loading exports."""

from .loader import (
    SchemaLoadError,
    load_metadata_schema,
    parse_schema_source,
    read_schema_source,
)
from .source_models import SchemaSource

__all__ = [
    "SchemaSource",
    "SchemaLoadError",
    "load_metadata_schema",
    "parse_schema_source",
    "read_schema_source",
]
