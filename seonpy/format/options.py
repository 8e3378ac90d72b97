"""Serializer configuration."""

from dataclasses import dataclass
from enum import StrEnum


class FloatFormat(StrEnum):
    SHORTEST = "shortest"
    FIXED = "fixed"


@dataclass(frozen=True, slots=True)
class SerializeOptions:
    """Output shape switches; every combination re-parses to the same value."""

    brace_sugar: bool = True
    always_explicit_single_lists: bool = False
    float_format: FloatFormat = FloatFormat.SHORTEST
    indent: int | None = None

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            raise ValueError("indent cannot be negative")
