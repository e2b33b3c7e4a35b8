"""Small helpers for int bitsets (LSB = tile 0)."""

from __future__ import annotations

from typing import List


def low_mask(n: int) -> int:
    """Bitset with the n lowest bits set."""
    if n <= 0:
        return 0
    return (1 << n) - 1


def bit_range(value: int, lo: int, hi: int) -> int:
    """Restrict value to the half-open bit range [lo, hi), shifted down to bit 0.

    An empty or inverted range restricts to 0.
    """
    if hi <= lo:
        return 0
    return (value >> lo) & low_mask(hi - lo)


def run_mask(size: int, start: int) -> int:
    """Bitset of `size` consecutive bits starting at bit `start`."""
    return low_mask(size) << start


def trailing_zeros(value: int) -> int:
    """Number of unset bits below the lowest set bit (0 for value 0)."""
    if value == 0:
        return 0
    return (value & -value).bit_length() - 1


def trailing_ones(value: int) -> int:
    """Number of consecutive set bits starting at bit 0."""
    return trailing_zeros(~value)


def run_lengths(value: int) -> List[int]:
    """Decompose a bitset into its maximal runs of set bits, lowest bit first."""
    if value < 0:
        raise ValueError("run_lengths expects a nonnegative bitset")
    runs: List[int] = []
    while value:
        value >>= trailing_zeros(value)
        size = trailing_ones(value)
        runs.append(size)
        value >>= size
    return runs


def pack_runs(sizes: List[int], gaps: List[int]) -> int:
    """Build a bitset from run sizes and the unset gap preceding each run."""
    if len(sizes) != len(gaps):
        raise ValueError("pack_runs needs one gap per run")
    value = 0
    pos = 0
    for size, gap in zip(sizes, gaps):
        pos += gap
        value |= run_mask(size, pos)
        pos += size
    return value


__all__ = [
    "low_mask",
    "bit_range",
    "run_mask",
    "trailing_zeros",
    "trailing_ones",
    "run_lengths",
    "pack_runs",
]
