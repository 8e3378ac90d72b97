"""Typed value model for decoded SEON documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
import math
from typing import Final, TypeAlias


class Sign(StrEnum):
    POSITIVE = "+"
    NEGATIVE = "-"


@dataclass(frozen=True, slots=True)
class NullValue:
    """`#nil`"""


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class IntValue:
    """Integer literal; signed 64-bit unless big integers are enabled."""

    value: int


@dataclass(frozen=True, slots=True)
class FloatValue:
    """Finite IEEE-754 double."""

    value: float


@dataclass(frozen=True, slots=True)
class InfinityValue:
    sign: Sign = Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    def as_float(self) -> float:
        return -math.inf if self.is_negative else math.inf


@dataclass(frozen=True, slots=True)
class StringValue:
    """Bare or back-quoted string atom."""

    value: str


@dataclass(frozen=True, slots=True)
class ListValue:
    """Ordered sequence; duplicates allowed."""

    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """Ordered key/value members with unique keys."""

    members: tuple[tuple[str, Value], ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return any(member_key == key for member_key, _ in self.members)

    def __getitem__(self, key: str) -> Value:
        for member_key, value in self.members:
            if member_key == key:
                return value
        raise KeyError(key)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        for member_key, value in self.members:
            if member_key == key:
                return value
        return default

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.members)

    def values(self) -> tuple[Value, ...]:
        return tuple(value for _, value in self.members)

    def to_dict(self) -> dict[str, Value]:
        return dict(self.members)


ScalarValue: TypeAlias = NullValue | BoolValue | IntValue | FloatValue | InfinityValue | StringValue
Value: TypeAlias = ScalarValue | ListValue | ObjectValue

SCALAR_TYPES: Final = (NullValue, BoolValue, IntValue, FloatValue, InfinityValue, StringValue)
VALUE_TYPES: Final = (*SCALAR_TYPES, ListValue, ObjectValue)

NULL: Final[NullValue] = NullValue()
TRUE: Final[BoolValue] = BoolValue(True)
FALSE: Final[BoolValue] = BoolValue(False)
POSITIVE_INFINITY: Final[InfinityValue] = InfinityValue(Sign.POSITIVE)
NEGATIVE_INFINITY: Final[InfinityValue] = InfinityValue(Sign.NEGATIVE)


def is_value(obj: object) -> bool:
    return isinstance(obj, VALUE_TYPES)


__all__ = [
    "FALSE",
    "NEGATIVE_INFINITY",
    "NULL",
    "POSITIVE_INFINITY",
    "SCALAR_TYPES",
    "TRUE",
    "VALUE_TYPES",
    "BoolValue",
    "FloatValue",
    "InfinityValue",
    "IntValue",
    "ListValue",
    "NullValue",
    "ObjectValue",
    "ScalarValue",
    "Sign",
    "StringValue",
    "Value",
    "is_value",
]
