"""Exceptions raised by the decoding pipeline.

Every exception wraps exactly one `Diagnostic`; the exception class mirrors the
diagnostic category so callers can catch one stage's failures.
"""

from typing import Final

from seonpy.diagnostics.diagnostic import Diagnostic


class SeonDecodeError(ValueError):
    """Base class for all decode failures."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"{diagnostic.message} (line {diagnostic.line}, column {diagnostic.column})")
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code


class SeonLexError(SeonDecodeError):
    """Character-level failure: unterminated quote, invalid control character."""


class SeonSyntaxError(SeonDecodeError):
    """Bracket structure failure."""


class SeonTypeError(SeonDecodeError):
    """Atom classification failure: unknown `#` tag, malformed or overflowing number."""


class SeonSemanticError(SeonDecodeError):
    """Object shape failure: missing value, invalid key, malformed pair, strict duplicate key."""


class SeonCancelled(SeonDecodeError):
    """The decode was cancelled cooperatively."""


_ERROR_BY_CATEGORY: Final[dict[str, type[SeonDecodeError]]] = {
    "lexer": SeonLexError,
    "syntax": SeonSyntaxError,
    "type": SeonTypeError,
    "semantic": SeonSemanticError,
    "cancelled": SeonCancelled,
}


def error_for(diagnostic: Diagnostic) -> SeonDecodeError:
    """Build the exception matching the diagnostic's category."""
    error_type = _ERROR_BY_CATEGORY.get(diagnostic.category or "", SeonDecodeError)
    return error_type(diagnostic)
