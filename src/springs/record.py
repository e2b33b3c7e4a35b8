"""Spring records as int bitsets plus their damaged-group sizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .bits import low_mask

DAMAGED = "#"
OPERATIONAL = "."
UNKNOWN = "?"
TILE_CHARS = DAMAGED + OPERATIONAL + UNKNOWN


@dataclass(frozen=True)
class SpringRecord:
    """One row of springs.

    Bit i of `damaged` (resp. `operational`) is set when tile i is known to be
    damaged (resp. operational). Tiles with neither bit set are unknown.
    """

    damaged: int
    operational: int
    sizes: Tuple[int, ...]
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Record length must be nonnegative, got {self.length}.")
        sizes = tuple(self.sizes)
        for size in sizes:
            if not isinstance(size, int) or isinstance(size, bool):
                raise ValueError(f"Group sizes must be integers, got {size!r}.")
            if size <= 0:
                raise ValueError(f"Group sizes must be positive, got {list(sizes)}.")
        object.__setattr__(self, "sizes", sizes)
        if self.damaged < 0 or self.operational < 0:
            raise ValueError("Tile bitsets must be nonnegative.")
        overlap = self.damaged & self.operational
        if overlap:
            raise ValueError(
                f"Tiles marked both damaged and operational: {_positions(overlap)}."
            )
        outside = (self.damaged | self.operational) & ~low_mask(self.length)
        if outside:
            raise ValueError(
                f"Tiles {_positions(outside)} lie outside a record of "
                f"length {self.length}."
            )

    @classmethod
    def from_tiles(cls, tiles: str, sizes: Iterable[int]) -> "SpringRecord":
        """Build a record from a '#.?' tile string (leftmost tile = bit 0)."""
        damaged = 0
        operational = 0
        for i, ch in enumerate(tiles):
            if ch == DAMAGED:
                damaged |= 1 << i
            elif ch == OPERATIONAL:
                operational |= 1 << i
            elif ch != UNKNOWN:
                raise ValueError(
                    f"Invalid tile '{ch}' at position {i}; expected one of '{TILE_CHARS}'."
                )
        return cls(
            damaged=damaged,
            operational=operational,
            sizes=tuple(sizes),
            length=len(tiles),
        )

    def is_known_damaged(self, i: int) -> bool:
        return bool((self.damaged >> i) & 1)

    def is_known_operational(self, i: int) -> bool:
        return bool((self.operational >> i) & 1)

    def group_sizes(self) -> Tuple[int, ...]:
        return self.sizes

    def total_damaged(self) -> int:
        return sum(self.sizes)

    def known_mask(self) -> int:
        return self.damaged | self.operational

    def unknown_count(self) -> int:
        return self.length - self.known_mask().bit_count()

    def tiles(self) -> str:
        out = []
        for i in range(self.length):
            if self.is_known_damaged(i):
                out.append(DAMAGED)
            elif self.is_known_operational(i):
                out.append(OPERATIONAL)
            else:
                out.append(UNKNOWN)
        return "".join(out)

    def __str__(self) -> str:
        return f"{self.tiles()} {','.join(str(s) for s in self.sizes)}".rstrip()


def _positions(bits: int) -> list:
    return [i for i in range(bits.bit_length()) if (bits >> i) & 1]


__all__ = [
    "DAMAGED",
    "OPERATIONAL",
    "UNKNOWN",
    "TILE_CHARS",
    "SpringRecord",
]
