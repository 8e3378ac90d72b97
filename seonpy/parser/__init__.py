"""Parser infrastructure (options + raw-form builder)."""

from seonpy.parser.builder import FormBuilder, build
from seonpy.parser.cancel import CancellationToken
from seonpy.parser.options import DuplicateKeyPolicy, ParseMode, ParserOptions
from seonpy.parser.raw import Bracket, RawAtom, RawDocument, RawForm, RawNode

__all__ = [
    "Bracket",
    "CancellationToken",
    "DuplicateKeyPolicy",
    "FormBuilder",
    "ParseMode",
    "ParserOptions",
    "RawAtom",
    "RawDocument",
    "RawForm",
    "RawNode",
    "build",
]
