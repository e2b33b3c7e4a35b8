"""Tests for int bitset helpers."""

import pytest

from springs.bits import (
    bit_range,
    low_mask,
    pack_runs,
    run_lengths,
    run_mask,
    trailing_ones,
    trailing_zeros,
)


def test_masks():
    assert low_mask(0) == 0
    assert low_mask(-3) == 0
    assert low_mask(4) == 0b1111
    assert run_mask(3, 2) == 0b11100


def test_bit_range():
    assert bit_range(0b110110, 1, 4) == 0b011
    assert bit_range(0b110110, 0, 0) == 0
    assert bit_range(0b110110, 4, 2) == 0
    assert bit_range(0b110110, 0, 100) == 0b110110


def test_trailing_counts():
    assert trailing_zeros(0b1000) == 3
    assert trailing_zeros(0) == 0
    assert trailing_ones(0b0111) == 3
    assert trailing_ones(0b0110) == 0
    assert trailing_ones(0) == 0


def test_run_lengths():
    assert run_lengths(0) == []
    assert run_lengths(0b11100101) == [1, 1, 3]
    assert run_lengths(0b1111 << 40) == [4]
    with pytest.raises(ValueError):
        run_lengths(-1)


def test_pack_runs():
    assert pack_runs([1, 1, 3], [0, 1, 1]) == 0b1110101
    assert run_lengths(pack_runs([2, 5], [3, 4])) == [2, 5]
    with pytest.raises(ValueError):
        pack_runs([1], [])
