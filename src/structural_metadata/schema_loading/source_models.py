"""Schema document source entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSource:
    """Raw schema document text and where it came from."""

    document_format: str
    text: str
    source_path: Path | None
