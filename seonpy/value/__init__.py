"""Typed values: model, atom classification, resolution and Python conversion."""

from seonpy.value.classify import INT64_MAX, INT64_MIN, classify, classify_tag
from seonpy.value.convert import from_python, to_python
from seonpy.value.model import (
    FALSE,
    NEGATIVE_INFINITY,
    NULL,
    POSITIVE_INFINITY,
    SCALAR_TYPES,
    TRUE,
    VALUE_TYPES,
    BoolValue,
    FloatValue,
    InfinityValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    Sign,
    StringValue,
    Value,
    is_value,
)
from seonpy.value.resolve import NATIVE_OBJECT_TAG, ResolveContext, Resolver, resolve

__all__ = [
    "FALSE",
    "INT64_MAX",
    "INT64_MIN",
    "NATIVE_OBJECT_TAG",
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
    "ResolveContext",
    "Resolver",
    "ScalarValue",
    "Sign",
    "StringValue",
    "Value",
    "classify",
    "classify_tag",
    "from_python",
    "is_value",
    "resolve",
    "to_python",
]
