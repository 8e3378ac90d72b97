"""Bracket-balancing builder from tokens to raw forms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
import logging

from seonpy.diagnostics import (
    SYNTAX_MISMATCHED_BRACKET,
    SYNTAX_TOO_DEEP,
    SYNTAX_UNEXPECTED_CLOSE,
    SYNTAX_UNTERMINATED_FORM,
    Diagnostic,
    DiagnosticSpec,
    SeonSyntaxError,
)
from seonpy.lexer import Token, TokenFlags, TokenKind
from seonpy.parser.options import ParserOptions
from seonpy.parser.raw import Bracket, RawAtom, RawDocument, RawForm, RawNode
from seonpy.text import Span, TextRange

logger = logging.getLogger(__name__)

_OPEN_BRACKETS = {TokenKind.LPAREN: Bracket.PAREN, TokenKind.LBRACE: Bracket.BRACE}
_CLOSE_BRACKETS = {TokenKind.RPAREN: Bracket.PAREN, TokenKind.RBRACE: Bracket.BRACE}


@dataclass(slots=True)
class _OpenForm:
    bracket: Bracket
    span: Span
    children: list[RawNode] = field(default_factory=list)


class FormBuilder:
    """Assemble top-level raw forms from a token stream.

    Strict mode raises `SeonSyntaxError` on the first bracket error. Lenient mode
    records the diagnostic, drops the forms that were open and skips tokens until
    the broken form is balanced again, then resumes at the next top-level form.
    """

    def __init__(self, tokens: Iterable[Token], options: ParserOptions | None = None) -> None:
        self._tokens = iter(tokens)
        self._options = options or ParserOptions()
        self._stack: list[_OpenForm] = []
        self._diagnostics: list[Diagnostic] = []
        self._skip_depth = 0
        self._eof_span = Span(TextRange(0, 0), 1, 1)

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Syntax diagnostics recorded in lenient mode."""
        return self._diagnostics

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def eof_span(self) -> Span:
        """Empty span at the end of input (valid once the stream is exhausted)."""
        return self._eof_span

    def iter_forms(self) -> Iterator[RawNode]:
        """Yield each top-level form as soon as its closing bracket is read."""
        for token in self._tokens:
            if token.kind == TokenKind.EOF:
                self._eof_span = token.span
                break
            node = self._push_token(token)
            if node is not None:
                yield node

        if self._stack:
            innermost = self._stack[-1]
            self._fail(
                SYNTAX_UNTERMINATED_FORM,
                innermost.span,
                detail=f"`{innermost.bracket.open_char}` is missing its `{innermost.bracket.close_char}`.",
            )

    def _push_token(self, token: Token) -> RawNode | None:
        if self._skip_depth > 0:
            if token.kind.is_open:
                self._skip_depth += 1
            elif token.kind.is_close:
                self._skip_depth -= 1
            return None

        match token.kind:
            case TokenKind.LPAREN | TokenKind.LBRACE:
                if len(self._stack) >= self._options.max_depth:
                    self._fail(
                        SYNTAX_TOO_DEEP,
                        token.span,
                        detail=f"Maximum depth is {self._options.max_depth}.",
                        skip_depth=len(self._stack) + 1,
                    )
                    return None
                self._stack.append(_OpenForm(bracket=_OPEN_BRACKETS[token.kind], span=token.span))
                return None
            case TokenKind.RPAREN | TokenKind.RBRACE:
                return self._close(token, _CLOSE_BRACKETS[token.kind])
            case TokenKind.BARE_ATOM | TokenKind.QUOTED_ATOM:
                atom = RawAtom(
                    text=token.text,
                    is_quoted=token.kind == TokenKind.QUOTED_ATOM,
                    span=token.span,
                    escaped_prefix=bool(token.flags & TokenFlags.ESCAPED_PREFIX),
                )
                return self._attach(atom)
            case _:
                raise ValueError(f"Unexpected token kind: {token.kind!r}")

    def _close(self, token: Token, bracket: Bracket) -> RawNode | None:
        if not self._stack:
            self._fail(
                SYNTAX_UNEXPECTED_CLOSE,
                token.span,
                detail=f"Found `{bracket.close_char}` at top level.",
            )
            return None

        opened = self._stack[-1]
        if opened.bracket != bracket:
            # The stray closer stands in for the innermost form's closer.
            self._fail(
                SYNTAX_MISMATCHED_BRACKET,
                token.span,
                detail=(
                    f"Found `{bracket.close_char}` but `{opened.bracket.open_char}` opened at "
                    f"line {opened.span.line}, column {opened.span.column} expects "
                    f"`{opened.bracket.close_char}`."
                ),
                skip_depth=len(self._stack) - 1,
                related=opened.span,
            )
            return None

        self._stack.pop()
        form = RawForm(
            bracket=opened.bracket,
            children=tuple(opened.children),
            span=opened.span.cover(token.span),
        )
        return self._attach(form)

    def _attach(self, node: RawNode) -> RawNode | None:
        if self._stack:
            self._stack[-1].children.append(node)
            return None
        return node

    def _fail(
        self,
        spec: DiagnosticSpec,
        span: Span,
        *,
        detail: str,
        skip_depth: int = 0,
        related: Span | None = None,
    ) -> None:
        diagnostic = Diagnostic.from_spec(spec, span, detail=detail, related=related)
        if not self._options.is_lenient:
            raise SeonSyntaxError(diagnostic)

        logger.debug("recovering from %s at %d:%d", spec.code, span.line, span.column)
        self._diagnostics.append(diagnostic)
        self._stack.clear()
        self._skip_depth = skip_depth


def build(tokens: Iterable[Token], options: ParserOptions | None = None) -> RawDocument:
    """Build every top-level form of a token stream."""
    builder = FormBuilder(tokens, options)
    forms = tuple(builder.iter_forms())
    return RawDocument(forms=forms, diagnostics=tuple(builder.diagnostics))


__all__ = ["FormBuilder", "build"]
