from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .arrangements import count_arrangements
from .naive import count_naive, count_naive_unknowns
from .parse import read_records
from .smoke import run_smoke
from .solve import METHODS, count_records, resolve_workers, solve
from .unfold import unfold


def _load(path: str):
    try:
        return read_records(path)
    except (OSError, ValueError) as exc:
        print(f"[springs] cannot read {path}: {exc}", file=sys.stderr)
        raise SystemExit(2)


def _run_solve(args: argparse.Namespace) -> int:
    records = _load(args.input)
    answer = solve(records, workers=resolve_workers(args.workers))
    print(f"Question 1 answer is: {answer.part1}")
    print(f"Question 2 answer is: {answer.part2}")
    return 0


def _run_count(args: argparse.Namespace) -> int:
    records = _load(args.input)
    counts = count_records(
        records,
        copies=args.unfold,
        method=args.method,
        workers=resolve_workers(args.workers),
    )
    if args.verbose:
        for idx, (record, count) in enumerate(zip(records, counts), start=1):
            print(f"[count] {idx}: {record} -> {count}")
    print(sum(counts))
    return 0


def _run_check(args: argparse.Namespace) -> int:
    if args.unfold < 1:
        raise ValueError(f"--unfold must be positive, got {args.unfold}.")
    records = _load(args.input)
    mismatches = 0
    for idx, record in enumerate(records, start=1):
        if args.unfold > 1:
            record = unfold(record, args.unfold)
            # The range scan is exponential in the unfolded length.
            slow = count_naive_unknowns(record)
        else:
            slow = count_naive(record)
        fast = count_arrangements(record)
        if fast != slow:
            mismatches += 1
            print(
                f"[check] {idx}: {record} pruning={fast} naive={slow} MISMATCH",
                file=sys.stderr,
            )
    print(f"[check] records={len(records)} mismatches={mismatches}")
    return 1 if mismatches else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="springs")
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Print both puzzle answers for an input file.")
    solve_p.add_argument("input")
    solve_p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (0 = all CPUs; default $SPRINGS_WORKERS or 1).",
    )

    count = sub.add_parser("count", help="Sum arrangement counts over an input file.")
    count.add_argument("input")
    count.add_argument("--unfold", type=int, default=1, help="Copies per record.")
    count.add_argument("--method", choices=sorted(METHODS), default="fast")
    count.add_argument("--workers", type=int, default=None)
    count.add_argument("--verbose", action="store_true", help="Print per-record counts.")

    check = sub.add_parser("check", help="Cross-check both counters on every record.")
    check.add_argument("input")
    check.add_argument("--unfold", type=int, default=1, help="Copies per record.")

    smoke = sub.add_parser("smoke", help="Cross-check both counters on random records.")
    smoke.add_argument("--trials", type=int, default=200)
    smoke.add_argument("--max-length", type=int, default=14)
    smoke.add_argument("--seed", type=int, default=None)

    args = parser.parse_args(argv)

    try:
        if args.command == "solve":
            return _run_solve(args)
        if args.command == "count":
            return _run_count(args)
        if args.command == "check":
            return _run_check(args)
        if args.command == "smoke":
            return run_smoke(
                trials=args.trials, max_length=args.max_length, seed=args.seed
            )
    except ValueError as exc:
        print(f"[springs] {exc}", file=sys.stderr)
        return 2
    except RuntimeError as exc:
        print(f"[springs] {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
