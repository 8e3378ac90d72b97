"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_QUOTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_QUOTE",
    message="Unterminated back-quoted atom.",
    hint="Close the atom with a back-quote; write \\` for a literal back-quote inside it.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_CONTROL_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_CONTROL_CHARACTER",
    message="Invalid control character.",
    hint="Control characters may only appear inside a back-quoted atom or a comment.",
    severity="error",
    category="lexer",
)

SYNTAX_MISMATCHED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISMATCHED_BRACKET",
    message="Closing bracket does not match the opening bracket.",
    severity="error",
    category="syntax",
)

SYNTAX_UNEXPECTED_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNEXPECTED_CLOSE",
    message="Closing bracket without a matching opening bracket.",
    hint="Remove the bracket or escape it with a backslash.",
    severity="error",
    category="syntax",
)

SYNTAX_UNTERMINATED_FORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNTERMINATED_FORM",
    message="Form is never closed.",
    severity="error",
    category="syntax",
)

SYNTAX_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_TOO_DEEP",
    message="Forms are nested deeper than the configured maximum depth.",
    hint="Raise ParserOptions.max_depth if the document is trusted.",
    severity="error",
    category="syntax",
)

SYNTAX_EMPTY_DOCUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_EMPTY_DOCUMENT",
    message="Expected one top-level form, found none.",
    severity="error",
    category="syntax",
)

SYNTAX_MULTIPLE_FORMS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MULTIPLE_FORMS",
    message="Expected one top-level form, found more.",
    hint="Use parse_all() to read a sequence of top-level forms.",
    severity="error",
    category="syntax",
)

TYPE_UNKNOWN_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPE_UNKNOWN_TAG",
    message="Unknown type tag.",
    hint="Escape a leading `#` as `\\#` to write a plain string.",
    severity="error",
    category="type",
)

TYPE_MALFORMED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPE_MALFORMED_NUMBER",
    message="Malformed numeric literal.",
    severity="error",
    category="type",
)

TYPE_INTEGER_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPE_INTEGER_OVERFLOW",
    message="Integer literal does not fit in a signed 64-bit integer.",
    hint="Enable ParserOptions.allow_big_integers to accept arbitrary precision.",
    severity="error",
    category="type",
)

TYPE_FLOAT_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TYPE_FLOAT_OVERFLOW",
    message="Float literal is out of range for a double.",
    hint="Write `#inf` or `#-inf` for infinities.",
    severity="error",
    category="type",
)

SEMANTIC_MISSING_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_MISSING_VALUE",
    message="Key has no value.",
    hint="Write `(key #nil)` for an explicit null or `(key ())` for an empty list.",
    severity="error",
    category="semantic",
)

SEMANTIC_INVALID_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_INVALID_KEY",
    message="Object key must be a string atom.",
    severity="error",
    category="semantic",
)

SEMANTIC_MALFORMED_PAIR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_MALFORMED_PAIR",
    message="Object member must be a parenthesized `(key value...)` form.",
    severity="error",
    category="semantic",
)

SEMANTIC_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_DUPLICATE_KEY",
    message="Duplicate object key.",
    hint="Keep only one member per key in the same object.",
    severity="warning",
    category="semantic",
)

DECODE_CANCELLED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DECODE_CANCELLED",
    message="Decode was cancelled.",
    severity="error",
    category="cancelled",
)
