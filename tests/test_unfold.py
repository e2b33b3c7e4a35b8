"""Tests for record unfolding."""

import pytest

from springs.record import SpringRecord
from springs.unfold import UNFOLD_COPIES, unfold


def test_unfold_layout():
    record = SpringRecord.from_tiles(".#", [1])
    assert unfold(record, 3) == SpringRecord.from_tiles(".#?.#?.#", [1, 1, 1])


def test_unfold_default_copies():
    record = SpringRecord.from_tiles("???.###", [1, 1, 3])
    unfolded = unfold(record)
    assert UNFOLD_COPIES == 5
    assert unfolded.length == 5 * 7 + 4
    assert unfolded.tiles() == "?".join(["???.###"] * 5)
    assert unfolded.sizes == (1, 1, 3) * 5


def test_unfold_single_copy_is_identity():
    record = SpringRecord.from_tiles("?#?.#", [3, 1])
    assert unfold(record, 1) == record


def test_unfold_separators_are_unknown():
    record = SpringRecord.from_tiles("#.", [1])
    unfolded = unfold(record, 4)
    for sep in (2, 5, 8):
        assert not unfolded.is_known_damaged(sep)
        assert not unfolded.is_known_operational(sep)


def test_unfold_empty_record():
    unfolded = unfold(SpringRecord.from_tiles("", []), 5)
    assert unfolded.tiles() == "????"
    assert unfolded.sizes == ()


def test_unfold_rejects_nonpositive_copies():
    with pytest.raises(ValueError):
        unfold(SpringRecord.from_tiles("?", [1]), 0)
