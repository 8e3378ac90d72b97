"""Diagnostics core types."""

from dataclasses import dataclass

from seonpy.diagnostics.codes import DiagnosticSpec, Severity
from seonpy.text import Span, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, builder, classifier and resolver.

    `range` holds character offsets into the decoded `str`; use `Span.byte_range`
    for UTF-8 byte offsets.
    """

    code: str
    message: str
    range: TextRange
    line: int
    column: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    related: Span | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        span: Span,
        *,
        detail: str | None = None,
        severity: Severity | None = None,
        related: Span | None = None,
    ) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            range=span.range,
            line=span.line,
            column=span.column,
            severity=severity or spec.severity,
            hint=spec.hint,
            category=spec.category,
            related=related,
        )

    @property
    def span(self) -> Span:
        return Span(range=self.range, line=self.line, column=self.column)
