"""springs: count damaged-spring arrangements over int bitset records."""

from .arrangements import count_arrangements, count_unconstrained
from .bits import run_lengths
from .naive import count_naive, count_naive_unknowns, naive_bounds
from .parse import parse_record_line, parse_records, read_records
from .record import SpringRecord
from .solve import PuzzleAnswer, count_records, solve
from .unfold import UNFOLD_COPIES, unfold

__all__ = [
    "SpringRecord",
    "run_lengths",
    "naive_bounds",
    "count_naive",
    "count_naive_unknowns",
    "count_arrangements",
    "count_unconstrained",
    "UNFOLD_COPIES",
    "unfold",
    "parse_record_line",
    "parse_records",
    "read_records",
    "PuzzleAnswer",
    "count_records",
    "solve",
]
