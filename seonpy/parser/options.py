"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from seonpy.parser.cancel import CancellationToken


class ParseMode(StrEnum):
    """Top-level decode behavior profile."""

    STRICT = "strict"
    LENIENT = "lenient"


class DuplicateKeyPolicy(StrEnum):
    """What to do when an object body repeats a key."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling decoding limits and error recovery."""

    mode: ParseMode = ParseMode.STRICT
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    max_depth: int = 256
    allow_big_integers: bool = False
    cancel: CancellationToken | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @property
    def is_lenient(self) -> bool:
        return self.mode == ParseMode.LENIENT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.LENIENT:
            return ParserOptions(mode=mode)
        return ParserOptions(mode=ParseMode.STRICT)
