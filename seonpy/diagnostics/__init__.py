"""Diagnostics."""

from seonpy.diagnostics.codes import (
    DECODE_CANCELLED,
    LEXER_INVALID_CONTROL_CHARACTER,
    LEXER_UNTERMINATED_QUOTE,
    SEMANTIC_DUPLICATE_KEY,
    SEMANTIC_INVALID_KEY,
    SEMANTIC_MALFORMED_PAIR,
    SEMANTIC_MISSING_VALUE,
    SYNTAX_EMPTY_DOCUMENT,
    SYNTAX_MISMATCHED_BRACKET,
    SYNTAX_MULTIPLE_FORMS,
    SYNTAX_TOO_DEEP,
    SYNTAX_UNEXPECTED_CLOSE,
    SYNTAX_UNTERMINATED_FORM,
    TYPE_FLOAT_OVERFLOW,
    TYPE_INTEGER_OVERFLOW,
    TYPE_MALFORMED_NUMBER,
    TYPE_UNKNOWN_TAG,
    DiagnosticSpec,
    Severity,
)
from seonpy.diagnostics.diagnostic import Diagnostic
from seonpy.diagnostics.errors import (
    SeonCancelled,
    SeonDecodeError,
    SeonLexError,
    SeonSemanticError,
    SeonSyntaxError,
    SeonTypeError,
    error_for,
)
from seonpy.diagnostics.report import collect_diagnostics, has_errors, render_diagnostic

__all__ = [
    "DECODE_CANCELLED",
    "LEXER_INVALID_CONTROL_CHARACTER",
    "LEXER_UNTERMINATED_QUOTE",
    "SEMANTIC_DUPLICATE_KEY",
    "SEMANTIC_INVALID_KEY",
    "SEMANTIC_MALFORMED_PAIR",
    "SEMANTIC_MISSING_VALUE",
    "SYNTAX_EMPTY_DOCUMENT",
    "SYNTAX_MISMATCHED_BRACKET",
    "SYNTAX_MULTIPLE_FORMS",
    "SYNTAX_TOO_DEEP",
    "SYNTAX_UNEXPECTED_CLOSE",
    "SYNTAX_UNTERMINATED_FORM",
    "TYPE_FLOAT_OVERFLOW",
    "TYPE_INTEGER_OVERFLOW",
    "TYPE_MALFORMED_NUMBER",
    "TYPE_UNKNOWN_TAG",
    "Diagnostic",
    "DiagnosticSpec",
    "SeonCancelled",
    "SeonDecodeError",
    "SeonLexError",
    "SeonSemanticError",
    "SeonSyntaxError",
    "SeonTypeError",
    "Severity",
    "collect_diagnostics",
    "error_for",
    "has_errors",
    "render_diagnostic",
]
