"""
Operation-level mocking.

mock_operation is the single entry point for callers that want a fake
result for a named Query, Mutation or Subscription field.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..exceptions import (
    OperationNotFoundError,
    OperationTypeNotFoundError,
    ReturnTypeNotFoundError,
)
from ..schema import OperationKind, analyze_schema, resolve_type
from .config import MockConfig
from .generator import MockDataGenerator

logger = logging.getLogger(__name__)

LIST_RESULT_LENGTH = 5
WRAPPER_CHARS = "[]!"


def strip_wrappers(type_signature: str) -> str:
    """Remove every ``[``, ``]`` and ``!`` from a type signature."""
    return type_signature.translate({ord(c): None for c in WRAPPER_CHARS}).strip()


def is_list_signature(type_signature: str) -> bool:
    """True when the signature is a list type (``[Foo]``, ``[Foo!]!``...)."""
    return type_signature.strip().startswith("[")


def mock_operation(
    schema_sdl: str,
    operation_kind: Union[OperationKind, str],
    operation_name: str,
    config: Union[MockConfig, Dict[str, Any], None] = None,
    *,
    generator: Optional[MockDataGenerator] = None,
) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Generate mock data for an operation in a schema.

    Args:
        schema_sdl: GraphQL schema as SDL
        operation_kind: ``Query``, ``Mutation`` or ``Subscription``
        operation_name: Root field to mock (e.g. ``getPortfolio``)
        config: Optional MockConfig or equivalent plain dict data
        generator: Generator to draw values from (a fresh unseeded one if None)

    Returns:
        One object, or a list of LIST_RESULT_LENGTH objects when the
        operation returns a list type

    Raises:
        SchemaParseError: If the SDL cannot be parsed
        OperationTypeNotFoundError: If the root type is not declared
        OperationNotFoundError: If the root type has no such field
        ReturnTypeNotFoundError: If the unwrapped return type is not an object type
    """
    kind = OperationKind(operation_kind).value
    mock_config = MockConfig.coerce(config)

    catalog = analyze_schema(schema_sdl)

    root_type = resolve_type(kind, catalog)
    if root_type is None:
        raise OperationTypeNotFoundError(kind)

    operation_field = root_type.get_field(operation_name)
    if operation_field is None:
        raise OperationNotFoundError(operation_name, kind)

    return_type = resolve_type(strip_wrappers(operation_field.type), catalog)
    if return_type is None:
        raise ReturnTypeNotFoundError(operation_field.type, operation_name)

    if generator is None:
        generator = MockDataGenerator()

    is_list = is_list_signature(operation_field.type)
    logger.debug(
        "Mocking %s.%s -> %s (list=%s)",
        kind,
        operation_name,
        return_type.name,
        is_list,
        extra={
            "operation_kind": kind,
            "operation_name": operation_name,
            "return_type": return_type.name,
            "is_list": is_list,
        },
    )
    if is_list:
        return generator.generate_objects(return_type, LIST_RESULT_LENGTH, mock_config)
    return generator.generate_object(return_type, mock_config)
