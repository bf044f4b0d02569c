"""
Value rules for scalar synthesis.

A rule pairs a predicate over (lower-cased field name, base type name) with
a producer. Rules are evaluated in order and the first match wins, so
precedence is the position in the chain. Name heuristics come before type
defaults.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Tuple

from faker import Faker

from ..exceptions import ConfigError
from .config import FieldOverride

Predicate = Callable[[str, str], bool]
Producer = Callable[[Faker, FieldOverride], Any]

LOREM_WORD_COUNT = 3


@dataclass(frozen=True)
class ValueRule:
    """One entry of the synthesis chain."""

    name: str
    matches: Predicate
    produce: Producer


def name_contains(*needles: str) -> Predicate:
    """Match when the lower-cased field name contains any needle."""

    def predicate(field_name: str, type_name: str) -> bool:
        return any(needle in field_name for needle in needles)

    return predicate


def type_is(expected: str) -> Predicate:
    """Match on the exact base type name."""

    def predicate(field_name: str, type_name: str) -> bool:
        return type_name == expected

    return predicate


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or timestamp.

    A trailing ``Z`` is read as UTC and naive values are assumed to be UTC.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_iso_datetime(value: datetime) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _numeric_bounds(
    override: FieldOverride, default_low: float, default_high: float
) -> Tuple[float, float]:
    low = default_low if override.min is None else override.min
    high = default_high if override.max is None else override.max
    return (low, high) if low <= high else (high, low)


def _float_between(default_low: float, default_high: float) -> Producer:
    def produce(fake: Faker, override: FieldOverride) -> float:
        low, high = _numeric_bounds(override, default_low, default_high)
        return fake.random.uniform(low, high)

    return produce


def _int_between(default_low: int, default_high: int) -> Producer:
    def produce(fake: Faker, override: FieldOverride) -> int:
        low, high = _numeric_bounds(override, default_low, default_high)
        int_low, int_high = math.ceil(low), math.floor(high)
        if int_low > int_high:
            raise ConfigError(f"No integer lies between min {low} and max {high}")
        return fake.random.randint(int_low, int_high)

    return produce


def _timestamp(fake: Faker, override: FieldOverride) -> str:
    if override.min_date:
        low = parse_iso_datetime(override.min_date)
    else:
        low = fake.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc)
    if override.max_date:
        high = parse_iso_datetime(override.max_date)
    else:
        high = fake.date_time_between(start_date="now", end_date="+1y", tzinfo=timezone.utc)

    seconds = fake.random.uniform(low.timestamp(), high.timestamp())
    return format_iso_datetime(datetime.fromtimestamp(seconds, tz=timezone.utc))


def _lorem_words(fake: Faker, override: FieldOverride) -> str:
    return " ".join(fake.words(nb=LOREM_WORD_COUNT))


def _uuid(fake: Faker, override: FieldOverride) -> str:
    return fake.uuid4()


NAME_RULES: Tuple[ValueRule, ...] = (
    ValueRule("email", name_contains("email"), lambda fake, _: fake.email()),
    ValueRule("name", name_contains("name"), lambda fake, _: fake.name()),
    ValueRule("date", name_contains("date"), _timestamp),
    ValueRule("phone", name_contains("phone"), lambda fake, _: fake.phone_number()),
    ValueRule("id", name_contains("id"), _uuid),
    ValueRule("money", name_contains("amount", "value", "price"), _float_between(0, 10000)),
)

TYPE_RULES: Tuple[ValueRule, ...] = (
    ValueRule("String", type_is("String"), _lorem_words),
    ValueRule("Int", type_is("Int"), _int_between(0, 100)),
    ValueRule("Float", type_is("Float"), _float_between(0, 100)),
    ValueRule("Boolean", type_is("Boolean"), lambda fake, _: fake.pybool()),
    ValueRule("ID", type_is("ID"), _uuid),
)

DEFAULT_RULES: Tuple[ValueRule, ...] = NAME_RULES + TYPE_RULES


def find_rule(
    rules: Tuple[ValueRule, ...], field_name: str, type_name: str
) -> Optional[ValueRule]:
    """First rule matching the field, or None."""
    lowered = field_name.lower()
    for rule in rules:
        if rule.matches(lowered, type_name):
            return rule
    return None
