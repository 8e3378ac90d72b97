"""Canonical serializer."""

from seonpy.format.options import FloatFormat, SerializeOptions
from seonpy.format.serializer import Serializer, dumps, format_float, format_string, serialize

__all__ = [
    "FloatFormat",
    "SerializeOptions",
    "Serializer",
    "dumps",
    "format_float",
    "format_string",
    "serialize",
]
