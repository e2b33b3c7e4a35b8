"""Brute-force arrangement counter, used as an oracle for the pruning search."""

from __future__ import annotations

from typing import Iterator, Tuple

from .bits import low_mask, pack_runs, run_lengths
from .record import SpringRecord

DEFAULT_MAX_CANDIDATES = 1 << 22


def naive_bounds(record: SpringRecord) -> Tuple[int, int]:
    """Smallest and largest bitsets with the record's group shape.

    The lower bound packs every group against tile 0 with single gaps, the
    upper bound packs them against the last tile. Both bounds are inclusive;
    upper < lower when the groups do not fit.
    """
    sizes = list(record.sizes)
    if not sizes:
        return 0, 0
    k = len(sizes)
    lower = pack_runs(sizes, [0] + [1] * (k - 1))
    slack = record.length - (sum(sizes) + k - 1)
    if slack < 0:
        return lower, lower - 1
    upper = pack_runs(sizes, [slack] + [1] * (k - 1))
    return lower, upper


def iter_naive_arrangements(record: SpringRecord) -> Iterator[int]:
    """Yield every valid assignment bitset in increasing order."""
    lower, upper = naive_bounds(record)
    damaged = record.damaged
    operational = record.operational
    num_damaged = record.total_damaged()
    sizes = list(record.sizes)
    free = low_mask(record.length)
    for candidate in range(lower, upper + 1):
        if candidate & damaged != damaged:
            continue
        if ~candidate & free & operational != operational:
            continue
        if candidate.bit_count() != num_damaged:
            continue
        if run_lengths(candidate) != sizes:
            continue
        yield candidate


def count_naive(
    record: SpringRecord, max_candidates: int = DEFAULT_MAX_CANDIDATES
) -> int:
    """Count valid arrangements by scanning every candidate between the bounds.

    Exponential in the record length; raises ValueError instead of starting a
    scan wider than max_candidates.
    """
    lower, upper = naive_bounds(record)
    width = upper - lower + 1
    if width > max_candidates:
        raise ValueError(
            f"Naive enumeration of {width} candidates exceeds the limit of "
            f"{max_candidates} (record length {record.length})."
        )
    return sum(1 for _ in iter_naive_arrangements(record))


def iter_unknown_assignments(record: SpringRecord) -> Iterator[int]:
    """Yield every valid assignment by walking the submasks of the unknown tiles.

    Exponential in the number of unknown tiles rather than in the length, so
    it stays usable on long records with few unknowns.
    """
    unknown = low_mask(record.length) & ~record.known_mask()
    missing = record.total_damaged() - record.damaged.bit_count()
    if missing < 0:
        return
    sizes = list(record.sizes)
    sub = unknown
    while True:
        if sub.bit_count() == missing:
            candidate = record.damaged | sub
            if run_lengths(candidate) == sizes:
                yield candidate
        if sub == 0:
            break
        sub = (sub - 1) & unknown


def count_naive_unknowns(
    record: SpringRecord, max_candidates: int = DEFAULT_MAX_CANDIDATES
) -> int:
    """Count valid arrangements by trying every damaged subset of the unknowns."""
    width = 1 << record.unknown_count()
    if width > max_candidates:
        raise ValueError(
            f"Naive enumeration of {width} unknown subsets exceeds the limit of "
            f"{max_candidates} ({record.unknown_count()} unknown tiles)."
        )
    return sum(1 for _ in iter_unknown_assignments(record))


__all__ = [
    "DEFAULT_MAX_CANDIDATES",
    "naive_bounds",
    "iter_naive_arrangements",
    "count_naive",
    "iter_unknown_assignments",
    "count_naive_unknowns",
]
