"""
Exception hierarchy for gql_automock.

Every failure the engine can raise derives from AutoMockError. Resolution
failures are fatal to the current call: nothing is retried and no partial
result is returned.
"""

from __future__ import annotations

from typing import Any, Optional


class AutoMockError(Exception):
    """
    Base exception for all mocking operations.

    Attributes:
        message: Human-readable error message
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = kwargs


class SchemaParseError(AutoMockError):
    """
    Raised when a schema document cannot be built into a type system.

    Attributes:
        line: 1-based line of the first reported location (if known)
        column: 1-based column of the first reported location (if known)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message, line=line, column=column)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        location = f" at line {self.line}"
        if self.column is not None:
            location += f", column {self.column}"
        return f"{self.message}{location}"


class OperationTypeNotFoundError(AutoMockError):
    """Raised when the root type for an operation kind is not declared."""

    def __init__(self, operation_kind: str) -> None:
        super().__init__(
            f"Operation type {operation_kind} not found",
            operation_kind=operation_kind,
        )
        self.operation_kind = operation_kind


class OperationNotFoundError(AutoMockError):
    """Raised when the root type has no field with the requested name."""

    def __init__(self, operation_name: str, operation_kind: str) -> None:
        super().__init__(
            f"Operation {operation_name} not found in {operation_kind}",
            operation_name=operation_name,
            operation_kind=operation_kind,
        )
        self.operation_name = operation_name
        self.operation_kind = operation_kind


class ReturnTypeNotFoundError(AutoMockError):
    """
    Raised when an operation's unwrapped return type is not an object type.

    Attributes:
        return_type: The raw declared signature, wrappers included
        operation_name: The operation whose return type failed to resolve
    """

    def __init__(self, return_type: str, operation_name: Optional[str] = None) -> None:
        super().__init__(
            f"Return type {return_type} not found",
            return_type=return_type,
            operation_name=operation_name,
        )
        self.return_type = return_type
        self.operation_name = operation_name


class ConfigError(AutoMockError):
    """Raised when a settings or mock configuration file cannot be loaded."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, path=path)
        self.path = path
