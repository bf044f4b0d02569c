"""
Type resolution against a SchemaCatalog.

Lookups are by exact name. Callers strip wrapper syntax before resolving.
"""

from __future__ import annotations

from typing import Optional

from .models import SchemaCatalog, TypeDescriptor


def resolve_type(type_name: str, catalog: SchemaCatalog) -> Optional[TypeDescriptor]:
    """
    Look up an object type by name.

    Args:
        type_name: Bare type name (no ``[``, ``]`` or ``!``)
        catalog: Catalog to search

    Returns:
        The matching TypeDescriptor, or None if the catalog has no such type
    """
    return catalog.get(type_name)
