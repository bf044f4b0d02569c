"""
Schema analyzer.

Builds a SchemaCatalog from an SDL document using graphql-core.
"""

from __future__ import annotations

import logging

from graphql import GraphQLError, build_schema, is_object_type

from ..exceptions import SchemaParseError
from .models import FieldDescriptor, SchemaCatalog, TypeDescriptor

logger = logging.getLogger(__name__)

INTROSPECTION_PREFIX = "__"


def analyze_schema(schema_sdl: str) -> SchemaCatalog:
    """
    Parse an SDL document into a catalog of its object types.

    Args:
        schema_sdl: GraphQL schema definition language text

    Returns:
        SchemaCatalog holding every non-introspection object type

    Raises:
        SchemaParseError: If graphql-core cannot build a schema from the text
    """
    try:
        schema = build_schema(schema_sdl)
    except GraphQLError as e:
        line = column = None
        if e.locations:
            line, column = e.locations[0].line, e.locations[0].column
        raise SchemaParseError(e.message, line=line, column=column) from e
    except TypeError as e:
        # graphql-core reports semantically invalid SDL (unknown types,
        # duplicate definitions) as TypeError
        raise SchemaParseError(str(e)) from e

    types = {}
    for name, graphql_type in schema.type_map.items():
        if not is_object_type(graphql_type) or name.startswith(INTROSPECTION_PREFIX):
            continue
        types[name] = TypeDescriptor(
            name=name,
            fields=tuple(
                FieldDescriptor(name=field_name, type=str(field_def.type))
                for field_name, field_def in graphql_type.fields.items()
            ),
        )

    logger.debug("Catalogued %d object types", len(types), extra={"type_count": len(types)})
    return SchemaCatalog(types=types)
