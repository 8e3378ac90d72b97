"""Atom classification into typed scalars."""

from __future__ import annotations

import math
import re
from typing import Final, NoReturn

from seonpy.diagnostics import (
    TYPE_FLOAT_OVERFLOW,
    TYPE_INTEGER_OVERFLOW,
    TYPE_MALFORMED_NUMBER,
    TYPE_UNKNOWN_TAG,
    Diagnostic,
    DiagnosticSpec,
    SeonTypeError,
)
from seonpy.parser.raw import RawAtom
from seonpy.text import Span
from seonpy.value.model import (
    FALSE,
    NEGATIVE_INFINITY,
    NULL,
    POSITIVE_INFINITY,
    TRUE,
    FloatValue,
    IntValue,
    ScalarValue,
    StringValue,
)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# ASCII digits only: `\d` and int() would also accept other Unicode digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_NUMBER_START: Final[frozenset[str]] = frozenset("+-.0123456789")

_LITERAL_TAGS: Final[dict[str, ScalarValue]] = {
    "true": TRUE,
    "false": FALSE,
    "nil": NULL,
    "inf": POSITIVE_INFINITY,
    "-inf": NEGATIVE_INFINITY,
}


def classify(atom: RawAtom, *, allow_big_integers: bool = False) -> ScalarValue:
    """Turn one atom into its scalar value.

    Quoted atoms and bare atoms without an unescaped leading `#` are strings;
    everything else is dispatched on the tag after `#`.
    """
    if not atom.is_typed:
        return StringValue(atom.text)
    return classify_tag(atom.text[1:], atom.span, allow_big_integers=allow_big_integers)


def classify_tag(tag: str, span: Span, *, allow_big_integers: bool = False) -> ScalarValue:
    literal = _LITERAL_TAGS.get(tag)
    if literal is not None:
        return literal

    if _INTEGER_RE.fullmatch(tag):
        return IntValue(_parse_integer(tag, span, allow_big_integers=allow_big_integers))

    if _FLOAT_RE.fullmatch(tag):
        number = float(tag)
        if math.isinf(number):
            _fail(TYPE_FLOAT_OVERFLOW, span, f"`#{tag}`.")
        return FloatValue(number)

    if tag[:1] in _NUMBER_START:
        _fail(TYPE_MALFORMED_NUMBER, span, f"`#{tag}`.")

    if not tag:
        _fail(TYPE_UNKNOWN_TAG, span, "The tag after `#` is empty.")
    _fail(TYPE_UNKNOWN_TAG, span, f"`#{tag}`.")


def _parse_integer(tag: str, span: Span, *, allow_big_integers: bool) -> int:
    digits = tag.lstrip("+-").lstrip("0")
    if not allow_big_integers and len(digits) > 19:
        _fail(TYPE_INTEGER_OVERFLOW, span, f"`#{tag}`.")

    try:
        number = int(tag)
    except ValueError:
        # int() refuses strings beyond sys.get_int_max_str_digits().
        _fail(TYPE_INTEGER_OVERFLOW, span, f"`#{tag}` has too many digits.")

    if not allow_big_integers and not INT64_MIN <= number <= INT64_MAX:
        _fail(TYPE_INTEGER_OVERFLOW, span, f"`#{tag}`.")
    return number


def _fail(spec: DiagnosticSpec, span: Span, detail: str) -> NoReturn:
    raise SeonTypeError(Diagnostic.from_spec(spec, span, detail=detail))


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "classify",
    "classify_tag",
]
