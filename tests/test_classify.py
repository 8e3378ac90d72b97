import math

import pytest

from seonpy.diagnostics import SeonTypeError
from seonpy.parser import RawAtom
from seonpy.text import Span, TextRange
from seonpy.value import (
    FALSE,
    INT64_MAX,
    INT64_MIN,
    NEGATIVE_INFINITY,
    NULL,
    POSITIVE_INFINITY,
    TRUE,
    FloatValue,
    IntValue,
    StringValue,
    Value,
    classify,
)

_SPAN = Span(TextRange(0, 1), 1, 1)


def _bare(text: str, *, escaped_prefix: bool = False) -> RawAtom:
    return RawAtom(text=text, is_quoted=False, span=_SPAN, escaped_prefix=escaped_prefix)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#true", TRUE),
        ("#false", FALSE),
        ("#nil", NULL),
        ("#inf", POSITIVE_INFINITY),
        ("#-inf", NEGATIVE_INFINITY),
        ("#42", IntValue(42)),
        ("#-7", IntValue(-7)),
        ("#+7", IntValue(7)),
        ("#007", IntValue(7)),
        ("#-0", IntValue(0)),
        (f"#{INT64_MAX}", IntValue(INT64_MAX)),
        (f"#{INT64_MIN}", IntValue(INT64_MIN)),
        ("#15.5", FloatValue(15.5)),
        ("#2.4e3", FloatValue(2400.0)),
        ("#-1E-2", FloatValue(-0.01)),
        ("#5.", FloatValue(5.0)),
        ("#.5", FloatValue(0.5)),
        ("#1e-400", FloatValue(0.0)),
        ("hello", StringValue("hello")),
        ("42", StringValue("42")),
        ("true", StringValue("true")),
    ],
)
def test_classify_bare_atoms(text: str, expected: Value) -> None:
    assert classify(_bare(text)) == expected


def test_classify_numbers_keep_their_kind() -> None:
    integer = classify(_bare("#1"))
    floating = classify(_bare("#1.0"))

    assert type(integer) is IntValue
    assert type(floating) is FloatValue


def test_classify_quoted_and_escaped_atoms_are_strings() -> None:
    quoted = RawAtom(text="#true", is_quoted=True, span=_SPAN)

    assert classify(quoted) == StringValue("#true")
    assert classify(_bare("#facccc", escaped_prefix=True)) == StringValue("#facccc")


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("#yes", "TYPE_UNKNOWN_TAG"),
        ("#TRUE", "TYPE_UNKNOWN_TAG"),
        ("#", "TYPE_UNKNOWN_TAG"),
        ("#object", "TYPE_UNKNOWN_TAG"),
        ("#1.2.3", "TYPE_MALFORMED_NUMBER"),
        ("#12abc", "TYPE_MALFORMED_NUMBER"),
        ("#-", "TYPE_MALFORMED_NUMBER"),
        ("#1e", "TYPE_MALFORMED_NUMBER"),
        ("#.", "TYPE_MALFORMED_NUMBER"),
        ("#+inf", "TYPE_MALFORMED_NUMBER"),
        ("#1_000", "TYPE_MALFORMED_NUMBER"),
        (f"#{INT64_MAX + 1}", "TYPE_INTEGER_OVERFLOW"),
        (f"#{INT64_MIN - 1}", "TYPE_INTEGER_OVERFLOW"),
        ("#123456789012345678901234567890", "TYPE_INTEGER_OVERFLOW"),
        ("#1e400", "TYPE_FLOAT_OVERFLOW"),
        ("#-1.5e309", "TYPE_FLOAT_OVERFLOW"),
    ],
)
def test_classify_rejects(text: str, code: str) -> None:
    with pytest.raises(SeonTypeError) as excinfo:
        classify(_bare(text))

    assert excinfo.value.code == code
    assert excinfo.value.diagnostic.range == _SPAN.range


def test_classify_big_integers_when_enabled() -> None:
    big = "123456789012345678901234567890"

    assert classify(_bare(f"#{big}"), allow_big_integers=True) == IntValue(int(big))
    assert classify(_bare(f"#-{big}"), allow_big_integers=True) == IntValue(-int(big))


def test_classify_leading_zeros_do_not_count_towards_overflow() -> None:
    assert classify(_bare("#" + "0" * 40 + "1")) == IntValue(1)


def test_classify_big_integers_still_bounded_by_int_digit_limit() -> None:
    with pytest.raises(SeonTypeError) as excinfo:
        classify(_bare("#" + "1" * 5000), allow_big_integers=True)

    assert excinfo.value.code == "TYPE_INTEGER_OVERFLOW"


def test_classify_infinity_maps_to_float() -> None:
    assert POSITIVE_INFINITY.as_float() == math.inf
    assert NEGATIVE_INFINITY.as_float() == -math.inf
    assert NEGATIVE_INFINITY.is_negative is True
