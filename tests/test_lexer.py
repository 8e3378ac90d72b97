import pytest

from seonpy.diagnostics import SeonLexError
from seonpy.lexer import Lexer, TokenFlags, TokenKind, token_text, tokenize
from tests._debug import debug_dump_tokens
from tests._shared_cases import DOCUMENT_CASES, SeonCase, case_id


def _kinds(source: str) -> list[TokenKind]:
    return [token.kind for token in Lexer(source).lex()]


@pytest.mark.parametrize("case", DOCUMENT_CASES, ids=case_id)
def test_lexer_ends_every_case_with_single_eof(case: SeonCase) -> None:
    tokens = Lexer(case.source).lex()
    debug_dump_tokens(case.name, case.source, tokens)

    assert tokens[-1].kind == TokenKind.EOF
    assert [token.kind for token in tokens].count(TokenKind.EOF) == 1


def test_lexer_emits_brackets_and_atoms() -> None:
    assert _kinds("(a `b c`)\n{x}") == [
        TokenKind.LPAREN,
        TokenKind.BARE_ATOM,
        TokenKind.QUOTED_ATOM,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.BARE_ATOM,
        TokenKind.RBRACE,
        TokenKind.EOF,
    ]


def test_lexer_drops_comments_and_whitespace() -> None:
    tokens = Lexer("; leading\n  a ; trailing ( ignored\n\tb").lex()

    assert [token.text for token in tokens] == ["a", "b", ""]


def test_lexer_tracks_offsets_lines_and_columns() -> None:
    tokens = Lexer("(ab\n  cd)").lex()
    cd = tokens[2]

    assert tokens[1].range.as_tuple() == (1, 3)
    assert (cd.line, cd.column) == (2, 3)
    assert cd.range.as_tuple() == (6, 8)
    assert cd.has_preceding_line_break() is True
    assert tokens[1].has_preceding_line_break() is False


def test_lexer_counts_crlf_and_lone_cr_as_single_line_break() -> None:
    crlf = Lexer("a\r\nb").lex()
    lone_cr = Lexer("a\rb").lex()

    assert (crlf[1].line, crlf[1].column) == (2, 1)
    assert (lone_cr[1].line, lone_cr[1].column) == (2, 1)


def test_lexer_bare_atom_keeps_type_prefix_and_inner_hash() -> None:
    tokens = Lexer("#15.5 a#b").lex()

    assert [token.text for token in tokens[:2]] == ["#15.5", "a#b"]
    assert tokens[0].has_escaped_prefix() is False


def test_lexer_escaped_prefix_is_flagged() -> None:
    token = Lexer("\\#facccc").next_token()

    assert token.kind == TokenKind.BARE_ATOM
    assert token.text == "#facccc"
    assert token.has_escaped_prefix() is True
    assert token.flags & TokenFlags.HAS_ESCAPE


def test_lexer_escapes_reserved_characters_inside_bare_atom() -> None:
    token = Lexer("a\\(b\\)\\;c\\`").next_token()

    assert token.text == "a(b);c`"
    assert token.has_escaped_prefix() is False


def test_lexer_keeps_backslash_before_unreserved_character() -> None:
    tokens = Lexer("a\\b c\\").lex()

    assert tokens[0].text == "a\\b"
    assert tokens[1].text == "c\\"


def test_lexer_quoted_atom_decodes_only_backquote_and_backslash_escapes() -> None:
    token = Lexer("`x\\`y\\\\z\\n`").next_token()

    assert token.kind == TokenKind.QUOTED_ATOM
    assert token.text == "x`y\\z\\n"
    assert token.flags & TokenFlags.WAS_QUOTED
    assert token.flags & TokenFlags.HAS_ESCAPE


def test_lexer_quoted_atom_may_span_lines_and_hold_reserved_characters() -> None:
    tokens = Lexer("`a\n(b)` c").lex()

    assert tokens[0].text == "a\n(b)"
    assert (tokens[1].line, tokens[1].column) == (2, 6)
    assert tokens[1].has_preceding_line_break() is False


def test_lexer_backquote_ends_bare_atom() -> None:
    tokens = Lexer("ab`cd`").lex()

    assert [(token.kind, token.text) for token in tokens[:2]] == [
        (TokenKind.BARE_ATOM, "ab"),
        (TokenKind.QUOTED_ATOM, "cd"),
    ]


def test_lexer_skips_byte_order_mark() -> None:
    token = Lexer("\ufeffa").next_token()

    assert token.text == "a"
    assert token.range.as_tuple() == (1, 2)
    assert (token.line, token.column) == (1, 1)


def test_token_text_returns_raw_source_slice() -> None:
    source = "\\#x `a\\`b`"
    tokens = Lexer(source).lex()

    assert token_text(source, tokens[0]) == "\\#x"
    assert token_text(source, tokens[1]) == "`a\\`b`"
    assert token_text(source, tokens[-1]) == ""


def test_lexer_unterminated_quote_points_at_opening_backquote() -> None:
    with pytest.raises(SeonLexError) as excinfo:
        Lexer("(a `open").lex()

    diagnostic = excinfo.value.diagnostic
    assert diagnostic.code == "LEXER_UNTERMINATED_QUOTE"
    assert diagnostic.range.as_tuple() == (3, 4)
    assert (diagnostic.line, diagnostic.column) == (1, 4)


def test_lexer_rejects_control_character_outside_quotes() -> None:
    with pytest.raises(SeonLexError) as excinfo:
        Lexer("ok\x07").lex()

    assert excinfo.value.code == "LEXER_INVALID_CONTROL_CHARACTER"
    assert excinfo.value.diagnostic.column == 3


def test_lexer_allows_control_characters_in_quotes_and_comments() -> None:
    tokens = Lexer("; bell \x07\n`tab\tand \x01`").lex()

    assert tokens[0].text == "tab\tand \x01"


def test_lexer_keeps_returning_eof() -> None:
    lexer = Lexer("a")
    lexer.next_token()

    assert lexer.next_token().kind == TokenKind.EOF
    assert lexer.eof_emitted is True
    assert lexer.next_token().kind == TokenKind.EOF


def test_tokenize_is_lazy_and_stops_after_eof() -> None:
    stream = tokenize("a `b")

    first = next(stream)
    assert first.text == "a"
    with pytest.raises(SeonLexError):
        next(stream)

    assert [token.kind for token in tokenize("")] == [TokenKind.EOF]


def test_token_kind_groups() -> None:
    assert TokenKind.QUOTED_ATOM.is_atom is True
    assert TokenKind.LBRACE.is_open is True
    assert TokenKind.RPAREN.is_close is True
    assert TokenKind.EOF.is_atom is False
