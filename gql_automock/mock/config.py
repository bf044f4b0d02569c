"""
Mock configuration models.

MockConfig narrows or replaces value generation per type and field, and
switches mocking on or off globally or per operation. Keys are accepted in
camelCase (``arrayMin``) or snake_case (``array_min``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigError

DEFAULT_ARRAY_MIN = 1
DEFAULT_ARRAY_MAX = 3


class FieldOverride(BaseModel):
    """Per-field constraints and overrides."""

    min: Optional[float] = Field(default=None, description="Lower bound for numbers")
    max: Optional[float] = Field(default=None, description="Upper bound for numbers")
    min_date: Optional[str] = Field(
        default=None, alias="minDate", description="Lower bound for dates (ISO-8601)"
    )
    max_date: Optional[str] = Field(
        default=None, alias="maxDate", description="Upper bound for dates (ISO-8601)"
    )
    array_min: Optional[int] = Field(
        default=None, ge=0, alias="arrayMin", description="Minimum generated list length"
    )
    array_max: Optional[int] = Field(
        default=None, ge=0, alias="arrayMax", description="Maximum generated list length"
    )
    value: Any = Field(
        default=None, description="Literal value, or zero-argument callable producing one"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    @property
    def has_value(self) -> bool:
        """True if ``value`` was supplied, even as an explicit None."""
        return "value" in self.model_fields_set

    def resolve_value(self) -> Any:
        """Return the literal, or call the producer afresh."""
        if callable(self.value):
            return self.value()
        return self.value

    @property
    def array_bounds(self) -> Tuple[int, int]:
        low = DEFAULT_ARRAY_MIN if self.array_min is None else self.array_min
        high = DEFAULT_ARRAY_MAX if self.array_max is None else self.array_max
        return low, high


class MockTypeConfig(BaseModel):
    """Per-type configuration."""

    fields: Dict[str, FieldOverride] = Field(
        default_factory=dict, description="Per-field overrides"
    )

    model_config = ConfigDict(extra="ignore")


class MockOperationConfig(BaseModel):
    """Per-operation configuration."""

    enabled: Optional[bool] = Field(default=None, description="Mock this operation")

    model_config = ConfigDict(extra="ignore")


class MockConfig(BaseModel):
    """Top-level mock configuration."""

    enabled: Optional[bool] = Field(default=None, description="Enable mocking globally")
    operations: Dict[str, MockOperationConfig] = Field(
        default_factory=dict, description="Per-operation configuration"
    )
    types: Dict[str, MockTypeConfig] = Field(
        default_factory=dict, description="Per-type configuration"
    )

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def coerce(cls, config: Union["MockConfig", Dict[str, Any], None]) -> "MockConfig":
        """
        Normalize caller input into a MockConfig.

        Args:
            config: None, a MockConfig, or plain nested dict data

        Returns:
            MockConfig instance (empty if config is None)

        Raises:
            ConfigError: If the data does not describe a valid MockConfig
        """
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise ConfigError(f"Invalid mock config: {e}") from e

    def field_override(self, type_name: str, field_name: str) -> FieldOverride:
        """Override for a field, or an empty one if not configured."""
        type_config = self.types.get(type_name)
        if type_config is None:
            return FieldOverride()
        override = type_config.fields.get(field_name)
        return override if override is not None else FieldOverride()

    def is_operation_enabled(self, operation_name: str) -> bool:
        """An operation is mocked unless explicitly disabled."""
        operation = self.operations.get(operation_name)
        return operation is None or operation.enabled is not False


def should_mock(
    config: Union[MockConfig, Dict[str, Any], None], operation_name: Optional[str]
) -> bool:
    """
    Decide whether a named operation should be answered with mock data.

    Mocking is on unless disabled globally or for the operation. Anonymous
    operations are never mocked.
    """
    if not operation_name:
        return False
    mock_config = MockConfig.coerce(config)
    return mock_config.enabled is not False and mock_config.is_operation_enabled(
        operation_name
    )
