"""Schema assembly exports."""

from .schema_builder import build_schema
from .schema_models import InvalidArgumentError, MetadataSchema

__all__ = [
    "MetadataSchema",
    "InvalidArgumentError",
    "build_schema",
]
