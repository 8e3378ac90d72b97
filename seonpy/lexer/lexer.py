"""Lexer."""

from collections.abc import Iterator
from typing import NoReturn

from seonpy.diagnostics import (
    LEXER_INVALID_CONTROL_CHARACTER,
    LEXER_UNTERMINATED_QUOTE,
    Diagnostic,
    DiagnosticSpec,
    SeonLexError,
)
from seonpy.lexer.tokens import (
    DELIMITER_CHARS,
    RESERVED_CHARS,
    WHITESPACE_CHARS,
    Token,
    TokenFlags,
    TokenKind,
    is_invalid_control,
)
from seonpy.text import Span, TextRange, slice_text_range

_BRACKET_KINDS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


class Lexer:
    """Single-pass lexer that drops whitespace and comments.

    Tokens are pulled one at a time with `next_token`; once EOF has been returned
    the lexer keeps returning EOF. Failures raise `SeonLexError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1
        self._line_start = 0
        self._after_newline = False
        self._eof_emitted = False

        # A byte-order mark is not part of the document.
        if source.startswith("\ufeff"):
            self._position = 1
            self._line_start = 1

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._position - self._line_start + 1

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def eof_emitted(self) -> bool:
        return self._eof_emitted

    def next_token(self) -> Token:
        self._skip_trivia()

        start = self._position
        line = self._line
        column = self.column
        flags = TokenFlags.PRECEDING_LINE_BREAK if self._after_newline else TokenFlags.NONE

        if self.is_eof:
            self._eof_emitted = True
            self._after_newline = False
            return Token(TokenKind.EOF, "", TextRange(start, start), line, column, flags)

        ch = self._current_char()
        if ch in _BRACKET_KINDS:
            self._bump()
            kind = _BRACKET_KINDS[ch]
            text = ch
        elif ch == "`":
            kind = TokenKind.QUOTED_ATOM
            text, atom_flags = self._lex_quoted(start, line, column)
            flags |= atom_flags
        else:
            kind = TokenKind.BARE_ATOM
            text, atom_flags = self._lex_bare()
            flags |= atom_flags

        # Newlines inside a quoted atom do not count as a break before the next token.
        self._after_newline = False
        return Token(kind, text, TextRange(start, self._position), line, column, flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _skip_trivia(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch in WHITESPACE_CHARS:
                self._bump()
                continue
            if ch == ";":
                self._skip_comment()
                continue
            break

    def _skip_comment(self) -> None:
        # Consume until end of line, do not consume the newline itself.
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._bump()

    def _lex_quoted(self, start: int, line: int, column: int) -> tuple[str, TokenFlags]:
        self._bump()
        flags = TokenFlags.WAS_QUOTED
        parts: list[str] = []

        while True:
            if self.is_eof:
                raise SeonLexError(
                    Diagnostic.from_spec(
                        LEXER_UNTERMINATED_QUOTE,
                        Span(TextRange(start, start + 1), line, column),
                    )
                )
            ch = self._current_char()
            if ch == "`":
                self._bump()
                break
            if ch == "\\" and self._peek_char() in ("`", "\\"):
                flags |= TokenFlags.HAS_ESCAPE
                self._bump()
                parts.append(self._bump())
                continue
            parts.append(self._bump())

        return "".join(parts), flags

    def _lex_bare(self) -> tuple[str, TokenFlags]:
        flags = TokenFlags.NONE
        parts: list[str] = []

        while not self.is_eof:
            ch = self._current_char()
            if ch in WHITESPACE_CHARS or ch in DELIMITER_CHARS:
                break
            if ch == "\\":
                escaped = self._peek_char()
                if escaped in RESERVED_CHARS:
                    if not parts:
                        flags |= TokenFlags.ESCAPED_PREFIX
                    flags |= TokenFlags.HAS_ESCAPE
                    self._bump()
                    parts.append(self._bump())
                    continue
                parts.append(self._bump())
                continue
            if is_invalid_control(ch):
                self._error_at_current(LEXER_INVALID_CONTROL_CHARACTER, detail=f"Found U+{ord(ch):04X}.")
            parts.append(self._bump())

        return "".join(parts), flags

    def _error_at_current(self, spec: DiagnosticSpec, *, detail: str | None = None) -> NoReturn:
        span = Span(TextRange(self._position, self._position + 1), self._line, self.column)
        raise SeonLexError(Diagnostic.from_spec(spec, span, detail=detail))

    def _current_char(self) -> str:
        if self.is_eof:
            return ""
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return ""
        return self._source[index]

    def _bump(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        # CRLF counts once, on the LF.
        if ch == "\n" or (ch == "\r" and self._current_char() != "\n"):
            self._line += 1
            self._line_start = self._position
            self._after_newline = True
        return ch


def tokenize(text: str) -> Iterator[Token]:
    """Lazily lex `text`, ending with a single EOF token.

    The generator is single-pass; a lexer error ends it by raising `SeonLexError`.
    """
    lexer = Lexer(text)
    while True:
        token = lexer.next_token()
        yield token
        if token.kind == TokenKind.EOF:
            return


def token_text(source: str, token: Token) -> str:
    """Get the exact source text of a token based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, position, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        raw = token_text(source, tok)
        print(
            f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} "
            f"at={tok.line}:{tok.column} flags={tok.flags!r} text={tok.text!r} raw={raw!r}"
        )
