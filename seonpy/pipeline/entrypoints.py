"""Decode entrypoints: text through lexer, builder and resolver in one pass."""

from __future__ import annotations

import logging
from typing import Any

from seonpy.diagnostics import (
    SYNTAX_EMPTY_DOCUMENT,
    SYNTAX_MULTIPLE_FORMS,
    Diagnostic,
    SeonDecodeError,
    SeonLexError,
    SeonSemanticError,
    SeonSyntaxError,
    SeonTypeError,
    collect_diagnostics,
)
from seonpy.lexer import tokenize
from seonpy.parser import FormBuilder, ParseMode, ParserOptions
from seonpy.pipeline.result import SeonParseResult
from seonpy.value import Resolver, Value, to_python

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


class _Decoder:
    """One decode lifecycle; streams top-level forms into the resolver."""

    def __init__(self, text: str, options: ParserOptions, *, single: bool) -> None:
        self._options = options
        self._single = single
        self._builder = FormBuilder(tokenize(text), options)
        self._resolver = Resolver(options)
        self._errors: list[Diagnostic] = []
        self.values: list[Value] = []

    def run(self) -> None:
        form_count = 0
        try:
            for form in self._builder.iter_forms():
                form_count += 1
                self._resolver.check_cancelled(form.span)
                if self._single and form_count > 1:
                    # Report the second form once and keep draining for syntax errors.
                    if form_count == 2:
                        self._record(SeonSyntaxError(Diagnostic.from_spec(SYNTAX_MULTIPLE_FORMS, form.span)))
                    continue
                try:
                    self.values.append(self._resolver.resolve(form))
                except (SeonTypeError, SeonSemanticError) as error:
                    self._record(error)
        except SeonLexError as error:
            # Lexing cannot resume past a bad character; the stream ends here.
            self._record(error)

        if self._single and form_count == 0 and not self.diagnostics():
            self._record(SeonSyntaxError(Diagnostic.from_spec(SYNTAX_EMPTY_DOCUMENT, self._builder.eof_span)))

    def record(self, diagnostic: Diagnostic) -> None:
        self._errors.append(diagnostic)

    def diagnostics(self) -> list[Diagnostic]:
        collected = collect_diagnostics(self._builder.diagnostics, self._resolver.warnings, self._errors)
        return sorted(collected, key=lambda d: d.range.start.value)

    def _record(self, error: SeonDecodeError) -> None:
        if not self._options.is_lenient:
            raise error
        logger.debug(
            "skipping to the next top-level form after %s at %d:%d",
            error.code,
            error.diagnostic.line,
            error.diagnostic.column,
        )
        self._errors.append(error.diagnostic)


def _decode(
    text: str,
    options: ParserOptions | None,
    mode: ParseMode | None,
    *,
    single: bool,
) -> SeonParseResult:
    resolved_options = _resolve_options(options=options, mode=mode)
    logger.debug("decoding %d characters (mode=%s)", len(text), resolved_options.mode)

    decoder = _Decoder(text, resolved_options, single=single)
    try:
        decoder.run()
    except SeonDecodeError as error:
        decoder.record(error.diagnostic)
        decoder.values.clear()

    result = SeonParseResult(
        source_text=text,
        values=tuple(decoder.values),
        diagnostics=decoder.diagnostics(),
        options=resolved_options,
    )
    logger.debug(
        "decoded %d value(s) with %d diagnostic(s)",
        len(result.values),
        len(result.diagnostics),
    )
    return result


def _values_or_raise(result: SeonParseResult) -> tuple[Value, ...]:
    for warning in result.warnings:
        logger.warning("%s (line %d, column %d)", warning.message, warning.line, warning.column)
    result.raise_for_errors()
    return result.values


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Value:
    """Decode a document holding exactly one top-level form.

    Raises the `SeonDecodeError` subclass of the first error detected. Strict mode
    stops at the first failing stage, so a bracket error can win over an earlier
    bad atom.
    """
    values = _values_or_raise(_decode(text, options, mode, single=True))
    return values[0]


def parse_all(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> tuple[Value, ...]:
    """Decode a stream of zero or more top-level forms."""
    return _values_or_raise(_decode(text, options, mode, single=False))


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SeonParseResult:
    """Decode every top-level form, reporting failures as diagnostics instead of raising."""
    return _decode(text, options, mode, single=False)


def loads(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Any:
    """`parse` followed by `to_python`."""
    return to_python(parse(text, options, mode=mode))


__all__ = [
    "loads",
    "parse",
    "parse_all",
    "parse_result",
]
