"""Pruning search that counts arrangements by placing groups left to right."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .bits import bit_range, run_mask, trailing_zeros
from .record import SpringRecord


def count_unconstrained(sizes: Sequence[int], span: int) -> int:
    """Count placements of ordered groups in `span` unconstrained tiles.

    Groups keep their order and are separated by at least one tile. With
    k groups and `slack` spare tiles the count is C(slack + k, k).
    """
    k = len(sizes)
    if k == 0:
        return 1
    slack = span - sum(sizes) - (k - 1)
    if slack < 0:
        return 0
    return math.comb(slack + k, k)


@dataclass
class _Frame:
    key: Tuple[int, int]
    group_index: int
    partial: int
    next_start: int
    end_loc: int
    total: int = 0


class _PruningSearch:
    def __init__(self, record: SpringRecord) -> None:
        self.sizes: Tuple[int, ...] = record.sizes
        self.length = record.length
        self.damaged = record.damaged
        self.operational = record.operational
        self.known = record.known_mask()
        # Tiles needed by groups i.. including their mandatory gaps.
        need: List[int] = [0] * (len(self.sizes) + 1)
        for i in range(len(self.sizes) - 1, -1, -1):
            gap = 1 if i < len(self.sizes) - 1 else 0
            need[i] = self.sizes[i] + gap + need[i + 1]
        self.need = need
        self.memo: Dict[Tuple[int, int], int] = {}

    def _prefix_consistent(self, partial: int, start_loc: int) -> bool:
        damaged = bit_range(self.damaged, 0, start_loc)
        operational = bit_range(self.operational, 0, start_loc)
        placed = bit_range(partial, 0, start_loc)
        return placed & damaged == damaged and placed & operational == 0

    def _fully_consistent(self, partial: int) -> bool:
        return partial & self.damaged == self.damaged and not partial & self.operational

    def _enter(
        self, group_index: int, prev_end: int, partial: int
    ) -> Tuple[int, Optional[_Frame]]:
        """Resolve a state directly, or return a frame that still has to branch."""
        sizes = self.sizes
        if group_index == 0:
            start_loc = 0
        else:
            start_loc = prev_end + sizes[group_index - 1] + 1

        if not self._prefix_consistent(partial, start_loc):
            return 0, None
        if group_index == len(sizes):
            return (1 if self._fully_consistent(partial) else 0), None

        # Past this point the prefix is consistent, so the number of
        # completions depends on (group_index, start_loc) only.
        key = (group_index, start_loc)
        cached = self.memo.get(key)
        if cached is not None:
            return cached, None

        if self.known >> start_loc == 0:
            total = count_unconstrained(sizes[group_index:], self.length - start_loc)
            self.memo[key] = total
            return total, None

        end_loc = self.length - self.need[group_index] + 1
        ahead = self.damaged >> start_loc
        if ahead:
            # Starting past the next known damaged tile would leave it uncovered.
            end_loc = min(end_loc, start_loc + trailing_zeros(ahead) + 1)
        return 0, _Frame(key, group_index, partial, start_loc, end_loc)

    def count(self) -> int:
        total, frame = self._enter(0, 0, 0)
        if frame is None:
            return total
        # Explicit stack: one frame per placed group, so deep records do not
        # hit the interpreter's recursion limit.
        stack = [frame]
        while stack:
            top = stack[-1]
            if top.next_start >= top.end_loc:
                stack.pop()
                self.memo[top.key] = top.total
                if not stack:
                    return top.total
                stack[-1].total += top.total
                continue
            p = top.next_start
            top.next_start += 1
            size = self.sizes[top.group_index]
            result, child = self._enter(
                top.group_index + 1, p, top.partial | run_mask(size, p)
            )
            if child is None:
                top.total += result
            else:
                stack.append(child)
        return 0


def count_arrangements(record: SpringRecord) -> int:
    """Count assignments of the unknown tiles that match record.sizes exactly."""
    return _PruningSearch(record).count()


__all__ = ["count_unconstrained", "count_arrangements"]
