"""
Mock data synthesis for gql_automock.

This package holds the mock configuration models, the ordered value rules,
the seedable generator and the operation entry point.
"""

from .config import (
    FieldOverride,
    MockConfig,
    MockOperationConfig,
    MockTypeConfig,
    should_mock,
)
from .generator import MockDataGenerator
from .operation import LIST_RESULT_LENGTH, mock_operation
from .rules import DEFAULT_RULES, NAME_RULES, TYPE_RULES, ValueRule

__all__ = [
    # Config
    "MockConfig",
    "MockTypeConfig",
    "MockOperationConfig",
    "FieldOverride",
    "should_mock",
    # Generation
    "MockDataGenerator",
    "ValueRule",
    "DEFAULT_RULES",
    "NAME_RULES",
    "TYPE_RULES",
    # Operations
    "mock_operation",
    "LIST_RESULT_LENGTH",
]
