"""Tests for the spring record model."""

import dataclasses

import pytest

from springs.record import SpringRecord


def test_from_tiles_bits():
    record = SpringRecord.from_tiles("#.?#", [1, 1])
    assert record.damaged == 0b1001
    assert record.operational == 0b0010
    assert record.length == 4
    assert record.sizes == (1, 1)
    assert record.is_known_damaged(3)
    assert record.is_known_operational(1)
    assert not record.is_known_damaged(2)
    assert not record.is_known_operational(2)
    assert record.unknown_count() == 1
    assert record.total_damaged() == 2
    assert record.group_sizes() == (1, 1)


def test_render_round_trip():
    record = SpringRecord.from_tiles("?#?.#", [3, 1])
    assert record.tiles() == "?#?.#"
    assert str(record) == "?#?.# 3,1"
    assert str(SpringRecord.from_tiles("...", [])) == "..."


def test_rejects_overlapping_tiles():
    with pytest.raises(ValueError, match="both damaged and operational"):
        SpringRecord(damaged=0b11, operational=0b10, sizes=(1,), length=2)


def test_rejects_tiles_outside_length():
    with pytest.raises(ValueError, match="outside"):
        SpringRecord(damaged=0b100, operational=0, sizes=(1,), length=2)


def test_rejects_bad_sizes_and_tiles():
    with pytest.raises(ValueError):
        SpringRecord.from_tiles("??", [0])
    with pytest.raises(ValueError):
        SpringRecord.from_tiles("?x", [1])
    with pytest.raises(ValueError):
        SpringRecord(damaged=0, operational=0, sizes=(), length=-1)


def test_record_is_frozen_and_hashable():
    record = SpringRecord.from_tiles("?#", [1])
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.length = 3
    assert record == SpringRecord(damaged=0b10, operational=0, sizes=(1,), length=2)
    assert len({record, SpringRecord.from_tiles("?#", (1,))}) == 1


def test_empty_record():
    record = SpringRecord.from_tiles("", [])
    assert record.length == 0
    assert record.unknown_count() == 0
    assert record.tiles() == ""


def test_rejects_non_integer_sizes():
    with pytest.raises(ValueError, match="must be integers"):
        SpringRecord(damaged=0, operational=0, sizes=(2.7,), length=4)
    with pytest.raises(ValueError, match="must be integers"):
        SpringRecord.from_tiles("????", ["3"])
    with pytest.raises(ValueError, match="must be integers"):
        SpringRecord.from_tiles("????", [True])
