"""Decode carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field

from seonpy.diagnostics import Diagnostic, error_for, has_errors, render_diagnostic
from seonpy.parser.options import ParserOptions
from seonpy.value import Value, to_python


@dataclass(slots=True)
class SeonParseResult:
    """Every value and diagnostic of one decode.

    Diagnostics are ordered by source offset. Under strict options a failed
    decode carries no values; under lenient options `values` holds every
    top-level form that resolved cleanly.
    """

    source_text: str
    values: tuple[Value, ...]
    diagnostics: list[Diagnostic]
    options: ParserOptions = field(default_factory=ParserOptions)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "error"]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == "warning"]

    @property
    def value(self) -> Value | None:
        """The document's value when it holds exactly one top-level form."""
        if len(self.values) != 1:
            return None
        return self.values[0]

    def raise_for_errors(self) -> None:
        """Raise the exception of the first error diagnostic, if any."""
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                raise error_for(diagnostic)

    def to_python(self) -> list[object]:
        return [to_python(value) for value in self.values]

    def render_diagnostics(self, *, path: str = "<memory>") -> str:
        return "\n\n".join(render_diagnostic(self.source_text, d, path=path) for d in self.diagnostics)
