"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from seonpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(source: str, diagnostic: Diagnostic, *, path: str = "<memory>") -> str:
    """Render a diagnostic with the offending source line and a caret underline."""
    lines = [
        f"{path}:{diagnostic.line}:{diagnostic.column}: "
        f"{diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}"
    ]

    start = diagnostic.range.start.value
    line_start = start - (diagnostic.column - 1)
    line_end = line_start
    while line_end < len(source) and source[line_end] not in "\r\n":
        line_end += 1
    source_line = source[line_start:line_end]

    # Multi-line ranges are underlined up to the end of their first line.
    width = max(1, min(diagnostic.range.end.value, line_end) - start)
    gutter = f"{diagnostic.line} | "
    lines.append(f"{gutter}{source_line}")
    lines.append(" " * (len(gutter) + diagnostic.column - 1) + "^" * width)

    if diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")
    return "\n".join(lines)
