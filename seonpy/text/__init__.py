"""Text positions."""

from seonpy.text.text import Span, TextRange, TextSize, slice_text_range

__all__ = [
    "Span",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
