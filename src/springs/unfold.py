"""Unfolding: repeat a record with unknown separator tiles between copies."""

from __future__ import annotations

from .record import SpringRecord

UNFOLD_COPIES = 5


def _replicate(bits: int, stride: int, copies: int) -> int:
    out = 0
    for c in range(copies):
        out |= bits << (c * stride)
    return out


def unfold(record: SpringRecord, copies: int = UNFOLD_COPIES) -> SpringRecord:
    """Repeat tiles and sizes `copies` times; separators are left unknown."""
    if copies < 1:
        raise ValueError(f"copies must be positive, got {copies}.")
    stride = record.length + 1
    return SpringRecord(
        damaged=_replicate(record.damaged, stride, copies),
        operational=_replicate(record.operational, stride, copies),
        sizes=record.sizes * copies,
        length=copies * record.length + (copies - 1),
    )


__all__ = ["UNFOLD_COPIES", "unfold"]
