"""Resolve raw forms into typed values.

The notation has one structural ambiguity: inside an object body a member
`(key x1 ... xn)` carries a scalar, an explicit list or an object when `n == 1`,
and an implicit list when `n > 1`. Everywhere else a parenthesized form is a
list. The resolver handles that with two contexts instead of parser state:

- `ResolveContext.VALUE`: the form is a value on its own (top level, list
  element, or the single trailing form of a member).
- `ResolveContext.KEY`: the form is a direct member of an object body.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum
import logging
from typing import Final, Literal, NoReturn, overload

from seonpy.diagnostics import (
    DECODE_CANCELLED,
    SEMANTIC_DUPLICATE_KEY,
    SEMANTIC_INVALID_KEY,
    SEMANTIC_MALFORMED_PAIR,
    SEMANTIC_MISSING_VALUE,
    Diagnostic,
    DiagnosticSpec,
    SeonCancelled,
    SeonSemanticError,
)
from seonpy.parser.options import DuplicateKeyPolicy, ParserOptions
from seonpy.parser.raw import RawAtom, RawDocument, RawForm, RawNode
from seonpy.text import Span
from seonpy.value.classify import classify
from seonpy.value.model import ListValue, ObjectValue, Value

logger = logging.getLogger(__name__)

NATIVE_OBJECT_TAG: Final[str] = "#object"
"""Head atom of the native object form `(#object (key value)...)`."""


class ResolveContext(StrEnum):
    VALUE = "value"
    KEY = "key"


class Resolver:
    """Stateless apart from collected warnings; one instance per decode."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._warnings: list[Diagnostic] = []

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def warnings(self) -> list[Diagnostic]:
        """Recoverable diagnostics (duplicate keys under last-write-wins)."""
        return self._warnings

    @overload
    def resolve(self, node: RawNode, context: Literal[ResolveContext.VALUE] = ...) -> Value: ...

    @overload
    def resolve(self, node: RawNode, context: Literal[ResolveContext.KEY]) -> tuple[str, Value]: ...

    def resolve(
        self,
        node: RawNode,
        context: ResolveContext = ResolveContext.VALUE,
    ) -> Value | tuple[str, Value]:
        match context:
            case ResolveContext.VALUE:
                return self._resolve_value(node)
            case ResolveContext.KEY:
                _, key, value = self._resolve_member(node)
                return key, value
        raise ValueError(f"Unknown resolve context: {context!r}")

    def resolve_document(self, document: RawDocument) -> tuple[Value, ...]:
        values: list[Value] = []
        for form in document.forms:
            self.check_cancelled(form.span)
            values.append(self._resolve_value(form))
        return tuple(values)

    def check_cancelled(self, span: Span) -> None:
        token = self._options.cancel
        if token is not None and token.is_cancelled:
            raise SeonCancelled(Diagnostic.from_spec(DECODE_CANCELLED, span))

    def _resolve_value(self, node: RawNode) -> Value:
        match node:
            case RawAtom():
                return classify(node, allow_big_integers=self._options.allow_big_integers)
            case RawForm() if node.is_brace:
                return self._resolve_object(node.children)
            case RawForm() if _is_native_object(node):
                return self._resolve_object(node.children[1:])
            case RawForm():
                return ListValue(self._resolve_items(node.children))
        raise TypeError(f"Not a raw node: {node!r}")

    def _resolve_items(self, nodes: Iterable[RawNode]) -> tuple[Value, ...]:
        items: list[Value] = []
        for child in nodes:
            self.check_cancelled(child.span)
            items.append(self._resolve_value(child))
        return tuple(items)

    def _resolve_object(self, nodes: Sequence[RawNode]) -> ObjectValue:
        # dict keeps the first insertion position when a later member replaces a value.
        members: dict[str, Value] = {}
        for node in nodes:
            self.check_cancelled(node.span)
            key_atom, key, value = self._resolve_member(node)
            if key in members:
                self._duplicate_key(key, key_atom)
            members[key] = value
        return ObjectValue(tuple(members.items()))

    def _resolve_member(self, node: RawNode) -> tuple[RawAtom, str, Value]:
        if isinstance(node, RawAtom):
            _fail(SEMANTIC_MALFORMED_PAIR, node.span, f"Found the bare atom `{node.text}`.")
        if not node.is_paren:
            _fail(SEMANTIC_MALFORMED_PAIR, node.span, "Found a braced form.")
        if not node.children:
            _fail(SEMANTIC_MALFORMED_PAIR, node.span, "Found an empty form.")

        key_node, *trailing = node.children
        if not isinstance(key_node, RawAtom):
            _fail(SEMANTIC_INVALID_KEY, key_node.span, "Found a bracketed form in key position.")
        if key_node.is_typed:
            _fail(
                SEMANTIC_INVALID_KEY,
                key_node.span,
                f"`{key_node.text}` is a typed literal; write `\\{key_node.text}` for a string key.",
            )

        key = key_node.text
        if not trailing:
            _fail(SEMANTIC_MISSING_VALUE, key_node.span, f"`{key}` is followed by nothing.")

        if len(trailing) == 1:
            return key_node, key, self._resolve_value(trailing[0])
        return key_node, key, ListValue(self._resolve_items(trailing))

    def _duplicate_key(self, key: str, key_atom: RawAtom) -> None:
        detail = f"`{key}` was already set in this object."
        if self._options.duplicate_keys == DuplicateKeyPolicy.REJECT:
            raise SeonSemanticError(
                Diagnostic.from_spec(SEMANTIC_DUPLICATE_KEY, key_atom.span, detail=detail, severity="error")
            )

        logger.debug(
            "duplicate key %r at %d:%d, keeping the last value",
            key,
            key_atom.span.line,
            key_atom.span.column,
        )
        self._warnings.append(
            Diagnostic.from_spec(
                SEMANTIC_DUPLICATE_KEY,
                key_atom.span,
                detail=f"{detail} The last value wins.",
            )
        )


def resolve(
    node: RawNode,
    context: ResolveContext = ResolveContext.VALUE,
    options: ParserOptions | None = None,
) -> Value | tuple[str, Value]:
    """Resolve one raw node with a throwaway `Resolver`."""
    return Resolver(options).resolve(node, context)


def _is_native_object(form: RawForm) -> bool:
    if not form.children:
        return False
    head = form.children[0]
    return isinstance(head, RawAtom) and head.is_typed and head.text == NATIVE_OBJECT_TAG


def _fail(spec: DiagnosticSpec, span: Span, detail: str) -> NoReturn:
    raise SeonSemanticError(Diagnostic.from_spec(spec, span, detail=detail))


__all__ = [
    "NATIVE_OBJECT_TAG",
    "ResolveContext",
    "Resolver",
    "resolve",
]
