"""Enum definition entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from structural_metadata.metadata_types import MetadataType


@dataclass(frozen=True)
class MetadataEnumValue:
    """One named integer constant of an enum."""

    name: str
    value: int
    description: str | None = None
    extras: Any = field(default=None, hash=False)


@dataclass(frozen=True, eq=False)
class MetadataEnum:
    """Named set of integer constants, identified within a schema by ``id``.

    Instances compare by identity: properties typed by an enum hold a reference
    to the exact object owned by the schema's enum table.
    """

    id: str
    values: tuple[MetadataEnumValue, ...]
    value_type: MetadataType = MetadataType.UINT16
    name: str | None = None
    description: str | None = None
    extras: Any = None

    @property
    def values_by_name(self) -> Mapping[str, int]:
        return MappingProxyType({entry.name: entry.value for entry in self.values})

    @property
    def names_by_value(self) -> Mapping[int, str]:
        return MappingProxyType({entry.value: entry.name for entry in self.values})
