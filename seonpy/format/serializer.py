"""Canonical SEON serializer.

Output re-parses to an equal value. Object members invert the arity rule: lists
of zero or one element are always wrapped in parentheses, longer lists are
written as bare trailing values unless explicit wrapping is requested.
"""

from __future__ import annotations

from decimal import Decimal
import math
from typing import Any

from seonpy.format.options import FloatFormat, SerializeOptions
from seonpy.lexer import RESERVED_CHARS, is_invalid_control
from seonpy.value import (
    NATIVE_OBJECT_TAG,
    BoolValue,
    FloatValue,
    InfinityValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
    from_python,
)


class Serializer:
    def __init__(self, options: SerializeOptions | None = None) -> None:
        self._options = options or SerializeOptions()

    @property
    def options(self) -> SerializeOptions:
        return self._options

    def serialize(self, value: Value) -> str:
        return self._format_value(value, 0)

    def _format_value(self, value: Value, level: int) -> str:
        match value:
            case ListValue(items=items):
                multiline = any(isinstance(item, (ListValue, ObjectValue)) for item in items)
                parts = [self._format_value(item, level + 1) for item in items]
                return self._join("(", parts, ")", level, multiline=multiline)
            case ObjectValue(members=members):
                parts = [self._format_member(key, member, level + 1) for key, member in members]
                if self._options.brace_sugar:
                    return self._join("{", parts, "}", level, multiline=True)
                return self._join(f"({NATIVE_OBJECT_TAG}", parts, ")", level, multiline=True, head=True)
            case _:
                return self._format_scalar(value)

    def _format_member(self, key: str, value: Value, level: int) -> str:
        trailing: list[Value]
        if isinstance(value, ListValue) and len(value) >= 2 and not self._options.always_explicit_single_lists:
            trailing = list(value.items)
        else:
            trailing = [value]
        parts = [format_string(key), *(self._format_value(item, level) for item in trailing)]
        return "(" + " ".join(parts) + ")"

    def _join(
        self,
        open_text: str,
        parts: list[str],
        close_text: str,
        level: int,
        *,
        multiline: bool,
        head: bool = False,
    ) -> str:
        if not parts:
            return open_text + close_text

        indent = self._options.indent
        if indent is None or not multiline:
            separator = " " if head else ""
            return open_text + separator + " ".join(parts) + close_text

        inner = " " * (indent * (level + 1))
        outer = " " * (indent * level)
        body = "\n".join(inner + part for part in parts)
        return f"{open_text}\n{body}\n{outer}{close_text}"

    def _format_scalar(self, value: Value) -> str:
        match value:
            case NullValue():
                return "#nil"
            case BoolValue(value=flag):
                return "#true" if flag else "#false"
            case IntValue(value=number):
                return f"#{number}"
            case FloatValue(value=number):
                return "#" + format_float(number, self._options.float_format)
            case InfinityValue():
                return "#-inf" if value.is_negative else "#inf"
            case StringValue(value=text):
                return format_string(text)
        raise TypeError(f"Not a SEON value: {value!r}")


def format_float(number: float, float_format: FloatFormat = FloatFormat.SHORTEST) -> str:
    """Float literal text without the `#` prefix; always carries a `.` or an exponent."""
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"{number!r} has no SEON float representation")

    # repr() is the shortest text that round-trips, switching to an exponent
    # only for very large or very small magnitudes.
    text = repr(number)
    if float_format == FloatFormat.FIXED:
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def format_string(text: str) -> str:
    """String atom text: bare, `\\#`-escaped, or back-quoted."""
    if not text:
        return "``"
    # A leading U+FEFF would be read back as a byte-order mark.
    if text[0] != "\ufeff" and all(_is_bare_char(ch) for ch in text):
        return text
    if text[0] == "#" and all(_is_bare_char(ch) for ch in text[1:]):
        return "\\" + text
    escaped = text.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def _is_bare_char(ch: str) -> bool:
    return ch not in RESERVED_CHARS and not ch.isspace() and not is_invalid_control(ch)


def serialize(value: Value, options: SerializeOptions | None = None) -> str:
    return Serializer(options).serialize(value)


def dumps(obj: Any, options: SerializeOptions | None = None) -> str:
    """Serialize plain Python data (see `from_python`)."""
    return serialize(from_python(obj), options)


__all__ = [
    "Serializer",
    "dumps",
    "format_float",
    "format_string",
    "serialize",
]
