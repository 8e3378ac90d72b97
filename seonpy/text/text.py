from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Character offset into decoded source text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of character offsets.

    Invariant:
    - 0 <= start <= end

    Offsets index the decoded `str`, not its UTF-8 encoding.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> int:
        return self._end - self._start

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """(start, end) as plain integers."""
        return (self._start, self._end)

    def contains(self, offset: int) -> bool:
        return self._start <= offset < self._end

    def cover(self, other: "TextRange") -> "TextRange":
        """Smallest range spanning both ranges."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


@dataclass(frozen=True, slots=True)
class Span:
    """A text range anchored to the 1-based line and column of its start."""

    range: TextRange
    line: int
    column: int

    @property
    def start(self) -> TextSize:
        return self.range.start

    @property
    def end(self) -> TextSize:
        return self.range.end

    def cover(self, other: "Span") -> "Span":
        """Extend this span to cover `other`, keeping the earlier start position."""
        first = self if self.range.start <= other.range.start else other
        return Span(range=self.range.cover(other.range), line=first.line, column=first.column)

    def byte_range(self, source: str) -> tuple[int, int]:
        """UTF-8 byte offsets of this span within `source`."""
        start = len(source[: self.range.start.value].encode("utf-8"))
        width = len(slice_text_range(source, self.range).encode("utf-8"))
        return (start, start + width)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """(start, end, line, column)"""
        return (self.range.start.value, self.range.end.value, self.line, self.column)


def slice_text_range(source: str, range: TextRange) -> str:
    """Source text covered by `range`; offsets are plain `str` indices."""
    return source[range.start.value : range.end.value]
