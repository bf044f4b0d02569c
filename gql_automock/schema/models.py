"""
Schema catalog models.

This module defines the name-indexed view of a schema that the mock engine
works from: object types and their fields with raw type signatures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class OperationKind(str, Enum):
    """Root operation types, named after their root object types."""

    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    A single field of an object type.

    ``type`` is the rendered type signature including wrapper syntax,
    e.g. ``String``, ``[Widget!]!`` or the ``Int[]`` array convention.
    """

    name: str
    type: str

    @property
    def is_array(self) -> bool:
        """True when the signature uses the trailing ``[]`` array convention."""
        return self.type.endswith("[]")

    @property
    def base_type(self) -> str:
        """Signature with one trailing ``[]`` removed."""
        return self.type[:-2] if self.is_array else self.type


@dataclass(frozen=True)
class TypeDescriptor:
    """An object type and its fields in declaration order."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = ()

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Get field by name."""
        for field_def in self.fields:
            if field_def.name == name:
                return field_def
        return None


@dataclass
class SchemaCatalog:
    """Mapping of type name to TypeDescriptor, built once per analysis."""

    types: Dict[str, TypeDescriptor] = field(default_factory=dict)

    def get(self, name: str) -> Optional[TypeDescriptor]:
        return self.types.get(name)

    @property
    def type_names(self) -> List[str]:
        return list(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self.types

    def __len__(self) -> int:
        return len(self.types)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self.types.values())
