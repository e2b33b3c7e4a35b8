"""Evaluate batches of records, optionally unfolded, across worker processes."""

from __future__ import annotations

import concurrent.futures as cf
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .arrangements import count_arrangements
from .naive import count_naive
from .record import SpringRecord
from .unfold import UNFOLD_COPIES, unfold

METHODS: Dict[str, Callable[[SpringRecord], int]] = {
    "fast": count_arrangements,
    "naive": count_naive,
}


@dataclass(frozen=True)
class PuzzleAnswer:
    part1: int
    part2: int

    def as_dict(self) -> dict:
        return {"part1": self.part1, "part2": self.part2}


def resolve_workers(value: Optional[int]) -> int:
    """Worker count from a flag, then SPRINGS_WORKERS, then 1; 0 means all CPUs."""
    if value is None:
        env_value = os.environ.get("SPRINGS_WORKERS")
        if not env_value:
            return 1
        try:
            value = int(env_value)
        except ValueError as exc:
            raise ValueError(
                f"Invalid SPRINGS_WORKERS '{env_value}'; expected an integer."
            ) from exc
    if value < 0:
        raise ValueError(f"Worker count must be nonnegative, got {value}.")
    if value == 0:
        return os.cpu_count() or 1
    return value


def _count_one(record: SpringRecord, copies: int, method: str) -> int:
    if copies > 1:
        record = unfold(record, copies)
    return METHODS[method](record)


def count_records(
    records: Sequence[SpringRecord],
    *,
    copies: int = 1,
    method: str = "fast",
    workers: int = 1,
) -> List[int]:
    """Count arrangements for each record, in input order."""
    if method not in METHODS:
        raise ValueError(
            f"Unknown method '{method}'; expected one of {sorted(METHODS)}."
        )
    if copies < 1:
        raise ValueError(f"copies must be positive, got {copies}.")
    if workers <= 1 or len(records) <= 1:
        return [_count_one(r, copies, method) for r in records]
    with cf.ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_count_one, r, copies, method) for r in records]
        return [f.result() for f in futures]


def solve(records: Sequence[SpringRecord], *, workers: int = 1) -> PuzzleAnswer:
    """Sum counts for the plain records and for their five-fold unfolding."""
    part1 = sum(count_records(records, workers=workers))
    part2 = sum(count_records(records, copies=UNFOLD_COPIES, workers=workers))
    return PuzzleAnswer(part1=part1, part2=part2)


__all__ = ["METHODS", "PuzzleAnswer", "resolve_workers", "count_records", "solve"]
