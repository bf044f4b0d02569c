"""
Mock data generator.

MockDataGenerator owns a seedable Faker instance and turns TypeDescriptors
into plain dicts by running each field through the value rule chain.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from faker import Faker

from ..config.models import GenerationConfig
from ..schema.models import TypeDescriptor
from .config import FieldOverride, MockConfig
from .rules import DEFAULT_RULES, ValueRule, find_rule

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


class MockDataGenerator:
    """
    Synthesizes field values and objects.

    Output is reproducible for a given seed: every random draw, including
    Faker's, comes from the same seeded instance.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        locale: str = DEFAULT_LOCALE,
        faker: Optional[Faker] = None,
        rules: Optional[Iterable[ValueRule]] = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            seed: Seed for the random source (None for nondeterministic output)
            locale: Faker locale, ignored when ``faker`` is given
            faker: Preconfigured Faker instance to draw from
            rules: Replacement rule chain, evaluated in order
        """
        self.faker = faker if faker is not None else Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)
        self.rules = tuple(rules) if rules is not None else DEFAULT_RULES

    @classmethod
    def from_settings(cls, generation: GenerationConfig) -> "MockDataGenerator":
        """Create a generator from a GenerationConfig."""
        return cls(seed=generation.seed, locale=generation.locale)

    def fake_value(
        self, field_name: str, type_name: str, override: Optional[FieldOverride] = None
    ) -> Any:
        """
        Produce one value for a field.

        Args:
            field_name: Field name, matched case-insensitively by name rules
            type_name: Base type name, matched exactly by type rules
            override: Field override; a supplied ``value`` wins over every rule

        Returns:
            Synthetic value, or None when no rule matches
        """
        if override is None:
            override = FieldOverride()
        if override.has_value:
            return override.resolve_value()

        rule = find_rule(self.rules, field_name, type_name)
        if rule is None:
            return None
        return rule.produce(self.faker, override)

    def generate_object(
        self,
        type_descriptor: TypeDescriptor,
        config: Union[MockConfig, Dict[str, Any], None] = None,
    ) -> Dict[str, Any]:
        """
        Build one object for a type.

        Fields whose signature ends in ``[]`` become lists of values of the
        base type. Nested object types are not expanded and yield None.

        Args:
            type_descriptor: Type to synthesize
            config: MockConfig or plain dict data with per-type overrides

        Returns:
            Dict keyed by the type's field names in declaration order
        """
        mock_config = MockConfig.coerce(config)
        obj: Dict[str, Any] = {}

        for field_def in type_descriptor.fields:
            override = mock_config.field_override(type_descriptor.name, field_def.name)
            if field_def.is_array:
                length = self._array_length(override, type_descriptor.name, field_def.name)
                obj[field_def.name] = [
                    self.fake_value(field_def.name, field_def.base_type, override)
                    for _ in range(length)
                ]
            else:
                obj[field_def.name] = self.fake_value(field_def.name, field_def.type, override)

        return obj

    def generate_objects(
        self,
        type_descriptor: TypeDescriptor,
        count: int,
        config: Union[MockConfig, Dict[str, Any], None] = None,
    ) -> List[Dict[str, Any]]:
        """Build ``count`` independent objects."""
        mock_config = MockConfig.coerce(config)
        return [self.generate_object(type_descriptor, mock_config) for _ in range(count)]

    def _array_length(self, override: FieldOverride, type_name: str, field_name: str) -> int:
        low, high = override.array_bounds
        if low > high:
            logger.warning(
                "arrayMin %d exceeds arrayMax %d for %s.%s, using arrayMin",
                low,
                high,
                type_name,
                field_name,
                extra={
                    "type_name": type_name,
                    "field_name": field_name,
                    "array_min": low,
                    "array_max": high,
                },
            )
            return low
        return self.faker.random.randint(low, high)
