"""Decode entrypoints and the parse result carrier."""

from seonpy.pipeline.entrypoints import loads, parse, parse_all, parse_result
from seonpy.pipeline.result import SeonParseResult

__all__ = [
    "SeonParseResult",
    "loads",
    "parse",
    "parse_all",
    "parse_result",
]
