"""
Schema support for gql_automock.

This package turns an SDL document into a name-indexed catalog of object
types and resolves types against it.
"""

from .analyzer import analyze_schema
from .models import FieldDescriptor, OperationKind, SchemaCatalog, TypeDescriptor
from .resolver import resolve_type

__all__ = [
    "analyze_schema",
    "resolve_type",
    "FieldDescriptor",
    "TypeDescriptor",
    "SchemaCatalog",
    "OperationKind",
]
