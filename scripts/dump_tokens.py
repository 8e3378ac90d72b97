#!/usr/bin/env python3
"""Print the token stream of a SEON file."""

from __future__ import annotations

import argparse
from pathlib import Path

from seonpy.diagnostics import SeonLexError, render_diagnostic
from seonpy.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the tokens of a .seon file")
    parser.add_argument("path", type=Path, help="File to tokenize")
    args = parser.parse_args()

    path: Path = args.path
    text = path.read_text(encoding="utf-8")

    lexer = Lexer(text)
    try:
        tokens = lexer.lex()
    except SeonLexError as error:
        print(render_diagnostic(text, error.diagnostic, path=str(path)))
        return 1

    dump_tokens(tokens, text)
    print(f"{len(tokens)} tokens")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
