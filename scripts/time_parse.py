#!/usr/bin/env python3
"""Parse throughput benchmark over a directory of .seon files."""

from __future__ import annotations

import argparse
import cProfile
from dataclasses import dataclass
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from seonpy import ParseMode, parse_result


@dataclass(slots=True)
class RunStats:
    seconds: float
    characters: int
    values: int
    diagnostics: int


def _collect_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.seon") if path.is_file())


def _run_once(sources: list[str], *, mode: ParseMode, label: str, show_progress: bool) -> RunStats:
    values = 0
    diagnostics = 0
    started = time.perf_counter()
    for text in tqdm(sources, desc=label, unit="file", disable=not show_progress):
        result = parse_result(text, mode=mode)
        values += len(result.values)
        diagnostics += len(result.diagnostics)
    return RunStats(
        seconds=time.perf_counter() - started,
        characters=sum(len(text) for text in sources),
        values=values,
        diagnostics=diagnostics,
    )


def _benchmark(sources: list[str], args: argparse.Namespace) -> list[RunStats]:
    for index in range(args.warmups):
        _run_once(sources, mode=args.mode, label=f"warmup {index + 1}/{args.warmups}", show_progress=args.progress)
    return [
        _run_once(sources, mode=args.mode, label=f"run {index + 1}/{args.runs}", show_progress=args.progress)
        for index in range(args.runs)
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark SEON parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .seon files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.LENIENT,
        help="Decode mode (default: lenient)",
    )
    parser.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        help="Disable tqdm progress bars",
    )
    parser.add_argument("--profile", action="store_true", help="Run under cProfile and print hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="cProfile rows to print")
    parser.add_argument("--profile-sort", default="tottime", help="cProfile sort key")
    args = parser.parse_args()
    args.runs = max(args.runs, 1)
    args.warmups = max(args.warmups, 0)

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")
    files = _collect_files(root)
    if not files:
        raise SystemExit(f"No .seon files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        runs = _benchmark(sources, args)
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        runs = _benchmark(sources, args)

    timings = [run.seconds for run in runs]
    mean = statistics.mean(timings)
    last = runs[-1]
    print(f"Dataset: {root} ({len(files)} files, {last.characters} characters)")
    print(f"Values: {last.values}  Diagnostics: {last.diagnostics}")
    print(f"Runs: {len(timings)} (warmups={args.warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Chars/s (mean): {last.characters / mean:,.0f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
