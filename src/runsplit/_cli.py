from __future__ import annotations

import argparse
import json
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from hypothesis import strategies as st

from runsplit._collector import Collector, ConfigurationError
from runsplit._fold import collect, collect_partitioned, split_at
from runsplit._strings import StrMatch, for_strings
from runsplit._term import bold, cyan, dim, force_color, green, red, style
from runsplit._verify import CheckResult, check_collector


def _status_label(status: str) -> str:
    if status == "pass":
        return green("PASS")
    if status == "fail":
        return style("FAIL", 31, 1)  # red bold
    if status == "error":
        return red("ERROR")
    return status.upper()


def _print_check_line(r: CheckResult, *, verbose: bool = False) -> None:
    raw = r.status.upper()
    pad = " " * (5 - len(raw))
    timing = "  " + dim(f"({r.duration_s:.1f}s)") if r.duration_s >= 0.05 else ""
    print(f"  {pad}{_status_label(r.status)}  {r.check:<22}  {bold(r.collector)}{timing}")

    if verbose and r.status != "pass":
        ce = r.details.get("counterexample")
        if isinstance(ce, dict):
            for key, value in ce.items():
                print(f"         {key + ':':<12} {json.dumps(value, default=str)}")
        elif "error" in r.details:
            print(f"         error:  {r.details['error']}")


def _read_lines(paths: list[str]) -> list[str]:
    if not paths:
        return [line.rstrip("\r\n") for line in sys.stdin]
    lines: list[str] = []
    for path in paths:
        with open(path, encoding="utf-8") as f:
            lines.extend(line.rstrip("\r\n") for line in f)
    return lines


def _split(lines: list[str], collector: Collector, chunks: int) -> Any:
    if chunks <= 1:
        return collect(lines, collector)
    cuts = [len(lines) * k // chunks for k in range(1, chunks)]
    with ThreadPoolExecutor(max_workers=min(chunks, os.cpu_count() or 1)) as pool:
        return collect_partitioned(split_at(lines, cuts), collector, executor=pool)


def _verify(lines: list[str], collector: Collector, args: argparse.Namespace) -> int:
    results = check_collector(
        collector,
        st.sampled_from(sorted(set(lines)) + [args.delimiter]),
        max_examples=args.max_examples,
        name=f"{args.match}:{args.delimiter!r}",
        on_result=None if args.json else (lambda r: _print_check_line(r, verbose=args.verbose)),
    )
    failed = sum(1 for r in results if r.status in ("fail", "error"))
    if args.json:
        print(json.dumps([r.to_json() for r in results], indent=2, default=str))
    else:
        passed = len(results) - failed
        parts = [green(f"{passed} passed")] if passed else []
        if failed:
            parts.append(red(f"{failed} failed"))
        print("\n" + ", ".join(parts))
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="runsplit", description="Split lines of text into runs at delimiter lines.")
    p.add_argument("delimiter", help="String that marks the start of a new run")
    p.add_argument("files", nargs="*", help="Input files (default: stdin)")
    p.add_argument(
        "--match",
        default=StrMatch.EQUALS.value,
        choices=[m.value for m in StrMatch],
        help="How a line is compared against the delimiter",
    )
    p.add_argument("-i", "--ignore-case", action="store_true", help="Compare case-insensitively")
    p.add_argument("-x", "--exclude-trigger", action="store_true", help="Drop the delimiter lines from the output")
    p.add_argument("--chunks", type=int, default=1, help="Scan the input as N contiguous chunks on a thread pool")
    p.add_argument("--json", action="store_true", help="Output runs (or check results) as JSON")
    p.add_argument("--verify", action="store_true", help="Property-check the collector instead of printing runs")
    p.add_argument("--max-examples", type=int, default=200, help="Hypothesis examples per check with --verify")
    p.add_argument("-v", "--verbose", action="store_true", help="Show counterexamples for failed checks")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)
    if args.chunks < 1:
        p.error("--chunks must be at least 1")

    try:
        collector = for_strings(args.delimiter, args.exclude_trigger, args.ignore_case, args.match)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        lines = _read_lines(args.files)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: could not read input: {e}", file=sys.stderr)
        return 1

    if args.verify:
        return _verify(lines, collector, args)

    t_start = time.monotonic()
    runs = _split(lines, collector, args.chunks)
    total_s = time.monotonic() - t_start

    if args.json:
        print(json.dumps(runs, indent=2))
        return 0

    for n, run in enumerate(runs, start=1):
        print(f"{cyan(f'#{n}')}  {json.dumps(run)}")
    print(dim(f"\n{len(runs)} runs from {len(lines)} lines ({total_s:.3f}s)"))
    return 0
