"""Conversion between SEON values and plain Python objects."""

from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Any

from seonpy.value.model import (
    NEGATIVE_INFINITY,
    NULL,
    POSITIVE_INFINITY,
    VALUE_TYPES,
    BoolValue,
    FloatValue,
    InfinityValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)


def to_python(value: Value) -> Any:
    """Map a value to `None`/`bool`/`int`/`float`/`str`/`list`/`dict`.

    Infinities become `float("inf")` / `float("-inf")`.
    """
    match value:
        case NullValue():
            return None
        case BoolValue(value=flag):
            return flag
        case IntValue(value=number):
            return number
        case FloatValue(value=number):
            return number
        case InfinityValue():
            return value.as_float()
        case StringValue(value=text):
            return text
        case ListValue(items=items):
            return [to_python(item) for item in items]
        case ObjectValue(members=members):
            return {key: to_python(member) for key, member in members}
    raise TypeError(f"Not a SEON value: {value!r}")


def from_python(obj: Any) -> Value:
    """Inverse of `to_python`; values pass through unchanged.

    Tuples and lists become lists, mappings with `str` keys become objects.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        return IntValue(obj)
    if isinstance(obj, float):
        if math.isnan(obj):
            raise ValueError("NaN has no SEON representation")
        if math.isinf(obj):
            return NEGATIVE_INFINITY if obj < 0 else POSITIVE_INFINITY
        return FloatValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, Mapping):
        members: list[tuple[str, Value]] = []
        for key, member in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, not {type(key).__name__}")
            members.append((key, from_python(member)))
        return ObjectValue(tuple(members))
    if isinstance(obj, (list, tuple)):
        return ListValue(tuple(from_python(item) for item in obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not SEON serializable")


__all__ = ["from_python", "to_python"]
