"""
Schema-driven mock data for GraphQL operations.

Given a schema document and an operation name, gql_automock produces a
structurally valid fake result without contacting a server.

Features:
- Catalog of object types built from SDL with graphql-core
- Name and type heuristics for scalar values, backed by Faker
- Per-type, per-field overrides (ranges, date bounds, list sizes, literals
  and producers) through MockConfig
- Seedable generation for reproducible test fixtures
"""

__version__ = "0.1.0"

from .exceptions import (
    AutoMockError,
    ConfigError,
    OperationNotFoundError,
    OperationTypeNotFoundError,
    ReturnTypeNotFoundError,
    SchemaParseError,
)
from .mock import (
    FieldOverride,
    MockConfig,
    MockDataGenerator,
    MockOperationConfig,
    MockTypeConfig,
    ValueRule,
    mock_operation,
    should_mock,
)
from .schema import (
    FieldDescriptor,
    OperationKind,
    SchemaCatalog,
    TypeDescriptor,
    analyze_schema,
    resolve_type,
)

__all__ = [
    # Entry point
    "mock_operation",
    "should_mock",
    # Schema
    "analyze_schema",
    "resolve_type",
    "SchemaCatalog",
    "TypeDescriptor",
    "FieldDescriptor",
    "OperationKind",
    # Generation
    "MockDataGenerator",
    "ValueRule",
    # Configuration
    "MockConfig",
    "MockTypeConfig",
    "MockOperationConfig",
    "FieldOverride",
    # Exceptions
    "AutoMockError",
    "SchemaParseError",
    "OperationTypeNotFoundError",
    "OperationNotFoundError",
    "ReturnTypeNotFoundError",
    "ConfigError",
]
