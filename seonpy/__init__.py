"""SEON: a parenthesized data-interchange notation.

Decode with `parse`/`parse_all`/`parse_result` (or `loads` for plain Python
data) and encode with `serialize` (or `dumps`).
"""

from seonpy.diagnostics import (
    Diagnostic,
    SeonCancelled,
    SeonDecodeError,
    SeonLexError,
    SeonSemanticError,
    SeonSyntaxError,
    SeonTypeError,
    render_diagnostic,
)
from seonpy.format import FloatFormat, SerializeOptions, dumps, serialize
from seonpy.parser import CancellationToken, DuplicateKeyPolicy, ParseMode, ParserOptions
from seonpy.pipeline import SeonParseResult, loads, parse, parse_all, parse_result
from seonpy.value import (
    BoolValue,
    FloatValue,
    InfinityValue,
    IntValue,
    ListValue,
    NullValue,
    ObjectValue,
    Sign,
    StringValue,
    Value,
    from_python,
    to_python,
)

__all__ = [
    "BoolValue",
    "CancellationToken",
    "Diagnostic",
    "DuplicateKeyPolicy",
    "FloatFormat",
    "FloatValue",
    "InfinityValue",
    "IntValue",
    "ListValue",
    "NullValue",
    "ObjectValue",
    "ParseMode",
    "ParserOptions",
    "SeonCancelled",
    "SeonDecodeError",
    "SeonLexError",
    "SeonParseResult",
    "SeonSemanticError",
    "SeonSyntaxError",
    "SeonTypeError",
    "SerializeOptions",
    "Sign",
    "StringValue",
    "Value",
    "dumps",
    "from_python",
    "loads",
    "parse",
    "parse_all",
    "parse_result",
    "render_diagnostic",
    "serialize",
    "to_python",
]
