"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from seonpy.text import Span, TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Atoms
    # -------------------------
    BARE_ATOM = 20
    QUOTED_ATOM = 21

    # -------------------------
    # Brackets
    # -------------------------
    LPAREN = 60  # (
    RPAREN = 61  # )
    LBRACE = 62  # {
    RBRACE = 63  # }

    @property
    def is_atom(self) -> bool:
        return self in (TokenKind.BARE_ATOM, TokenKind.QUOTED_ATOM)

    @property
    def is_open(self) -> bool:
        return self in (TokenKind.LPAREN, TokenKind.LBRACE)

    @property
    def is_close(self) -> bool:
        return self in (TokenKind.RPAREN, TokenKind.RBRACE)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    WAS_QUOTED = 1 << 1
    HAS_ESCAPE = 1 << 2
    ESCAPED_PREFIX = 1 << 3  # first character of a bare atom was escaped


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` holds the decoded atom text (escapes applied); use `token_text` for the
    exact source slice.
    """

    kind: TokenKind
    text: str
    range: TextRange
    line: int
    column: int
    flags: TokenFlags = TokenFlags.NONE

    @property
    def span(self) -> Span:
        return Span(range=self.range, line=self.line, column=self.column)

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def has_escaped_prefix(self) -> bool:
        return bool(self.flags & TokenFlags.ESCAPED_PREFIX)


RESERVED_CHARS: Final[frozenset[str]] = frozenset("(){};#\\`")
"""Characters that must be escaped (or quoted) to appear literally in a bare atom."""

DELIMITER_CHARS: Final[frozenset[str]] = frozenset("(){};`")
"""Characters that end a bare atom unless escaped."""

WHITESPACE_CHARS: Final[frozenset[str]] = frozenset(" \t\r\n")


def is_invalid_control(ch: str) -> bool:
    """Control characters (Unicode `Cc`) other than tab, LF and CR."""
    return (ch < " " and ch not in "\t\r\n") or "\x7f" <= ch <= "\x9f"


