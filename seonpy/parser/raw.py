"""Raw form tree produced by the builder, before any typing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from seonpy.diagnostics import Diagnostic
from seonpy.text import Span


class Bracket(StrEnum):
    PAREN = "paren"
    BRACE = "brace"

    @property
    def open_char(self) -> str:
        return "(" if self == Bracket.PAREN else "{"

    @property
    def close_char(self) -> str:
        return ")" if self == Bracket.PAREN else "}"


@dataclass(frozen=True, slots=True)
class RawAtom:
    """Atom text with escapes already applied."""

    text: str
    is_quoted: bool
    span: Span
    escaped_prefix: bool = False

    @property
    def is_typed(self) -> bool:
        """Whether the atom is a `#`-prefixed literal (bare, leading `#` not escaped)."""
        return not self.is_quoted and not self.escaped_prefix and self.text.startswith("#")


@dataclass(frozen=True, slots=True)
class RawForm:
    """Bracket-balanced form; `span` covers the opening and closing bracket."""

    bracket: Bracket
    children: tuple[RawNode, ...]
    span: Span

    @property
    def is_paren(self) -> bool:
        return self.bracket == Bracket.PAREN

    @property
    def is_brace(self) -> bool:
        return self.bracket == Bracket.BRACE


@dataclass(frozen=True, slots=True)
class RawDocument:
    """Ordered top-level forms of one document."""

    forms: tuple[RawNode, ...]
    diagnostics: tuple[Diagnostic, ...] = ()


RawNode: TypeAlias = RawAtom | RawForm


__all__ = [
    "Bracket",
    "RawAtom",
    "RawDocument",
    "RawForm",
    "RawNode",
]
