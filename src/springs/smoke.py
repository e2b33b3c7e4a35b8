"""Randomized cross-check of the pruning search against the brute-force oracle."""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from .arrangements import count_arrangements
from .naive import count_naive
from .record import SpringRecord


def random_record(rng: random.Random, length: int, max_groups: int) -> SpringRecord:
    """Random record; unknown tiles are drawn twice as often as known ones."""
    tiles = "".join(rng.choice("#.??") for _ in range(length))
    k = rng.randint(0, max_groups)
    sizes = [rng.randint(1, 3) for _ in range(k)]
    return SpringRecord.from_tiles(tiles, sizes)


def run_smoke(*, trials: int, max_length: int, seed: int | None) -> int:
    if trials < 0:
        raise ValueError("trials must be nonnegative")
    if max_length < 0:
        raise ValueError("max_length must be nonnegative")
    rng = random.Random(seed)
    nonzero = 0
    for t in range(trials):
        record = random_record(rng, rng.randint(0, max_length), max_groups=4)
        fast = count_arrangements(record)
        slow = count_naive(record)
        if fast != slow:
            raise RuntimeError(
                f"Counters disagree on trial {t} for '{record}': "
                f"pruning={fast} naive={slow}"
            )
        if fast:
            nonzero += 1
    print(
        "[smoke]",
        f"trials={trials}",
        f"max_length={max_length}",
        f"seed={seed}",
        f"nonzero={nonzero}",
        "PASS",
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Cross-check the pruning search against the naive oracle."
    )
    parser.add_argument("--trials", type=int, default=200, help="Random records to check.")
    parser.add_argument(
        "--max-length", type=int, default=14, help="Longest random record."
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed.")
    args = parser.parse_args(argv)
    try:
        return run_smoke(trials=args.trials, max_length=args.max_length, seed=args.seed)
    except ValueError as exc:
        print(f"[smoke] {exc}", file=sys.stderr)
        return 2
    except RuntimeError as exc:
        print(f"[smoke] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
