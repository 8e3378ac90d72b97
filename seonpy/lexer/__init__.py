"""Lexer."""

from seonpy.lexer.lexer import Lexer, dump_tokens, token_text, tokenize
from seonpy.lexer.tokens import (
    DELIMITER_CHARS,
    RESERVED_CHARS,
    WHITESPACE_CHARS,
    Token,
    TokenFlags,
    TokenKind,
    is_invalid_control,
)

__all__ = [
    "DELIMITER_CHARS",
    "RESERVED_CHARS",
    "WHITESPACE_CHARS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "is_invalid_control",
    "token_text",
    "tokenize",
]
