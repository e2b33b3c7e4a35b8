"""Parse puzzle text ('???.### 1,1,3' per line) into spring records."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .record import SpringRecord


def parse_sizes(text: str) -> Tuple[int, ...]:
    """Parse comma-separated positive group sizes; empty text means no groups."""
    if not text.strip():
        return ()
    sizes: List[int] = []
    for raw_part in text.split(","):
        part = raw_part.strip()
        if not part:
            raise ValueError("Empty group size; expected comma-separated integers.")
        try:
            size = int(part)
        except ValueError as exc:
            raise ValueError(
                f"Invalid group size '{part}'; expected integers."
            ) from exc
        if size <= 0:
            raise ValueError(f"Invalid group size '{part}'; must be positive.")
        sizes.append(size)
    return tuple(sizes)


def parse_record_line(line: str) -> SpringRecord:
    parts = line.split()
    if not parts:
        raise ValueError("Empty record line.")
    if len(parts) > 2:
        raise ValueError(f"Invalid record line '{line.strip()}'; expected 'tiles sizes'.")
    tiles = parts[0]
    sizes = parse_sizes(parts[1]) if len(parts) == 2 else ()
    return SpringRecord.from_tiles(tiles, sizes)


def parse_records(text: str) -> List[SpringRecord]:
    """Parse one record per non-blank line."""
    records: List[SpringRecord] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_record_line(line))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: {exc}") from exc
    return records


def read_records(path: str | Path) -> List[SpringRecord]:
    return parse_records(Path(path).read_text(encoding="utf-8"))


__all__ = ["parse_sizes", "parse_record_line", "parse_records", "read_records"]
