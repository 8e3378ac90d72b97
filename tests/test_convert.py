import math

import pytest

from seonpy.value import (
    FALSE,
    NEGATIVE_INFINITY,
    NULL,
    POSITIVE_INFINITY,
    TRUE,
    FloatValue,
    IntValue,
    ListValue,
    ObjectValue,
    StringValue,
    from_python,
    is_value,
    to_python,
)


def test_from_python_scalars() -> None:
    assert from_python(None) == NULL
    assert from_python(True) == TRUE
    assert from_python(False) == FALSE
    assert from_python(3) == IntValue(3)
    assert from_python(1.5) == FloatValue(1.5)
    assert from_python(math.inf) == POSITIVE_INFINITY
    assert from_python(-math.inf) == NEGATIVE_INFINITY
    assert from_python("x") == StringValue("x")


def test_from_python_bool_is_not_an_integer() -> None:
    assert type(from_python(True)) is not IntValue


def test_from_python_containers() -> None:
    value = from_python({"a": [1, (2, 3)], "b": {}})

    assert value == ObjectValue(
        (
            ("a", ListValue((IntValue(1), ListValue((IntValue(2), IntValue(3)))))),
            ("b", ObjectValue()),
        )
    )


def test_from_python_passes_values_through() -> None:
    value = ListValue((StringValue("a"),))

    assert from_python(value) is value
    assert from_python([value]) == ListValue((value,))


@pytest.mark.parametrize(
    ("obj", "error"),
    [
        (math.nan, ValueError),
        ({1: "a"}, TypeError),
        ({"a"}, TypeError),
        (b"bytes", TypeError),
        (object(), TypeError),
    ],
)
def test_from_python_rejects(obj: object, error: type[Exception]) -> None:
    with pytest.raises(error):
        from_python(obj)


def test_to_python_inverts_from_python() -> None:
    data = {"name": "Ada", "tags": ["a", "b"], "score": -1, "ratio": 0.5, "none": None, "on": True}

    assert to_python(from_python(data)) == data


def test_is_value() -> None:
    assert is_value(NULL) is True
    assert is_value(None) is False
    assert is_value("x") is False
