from __future__ import annotations

import pytest

from wareki.core.errors import InvalidArgumentError
from wareki.core.months import (
    decode_month_flags,
    decode_month_lengths,
    is_valid_month_code,
    last_day_of_month,
    locate_day,
    month_code_from_index,
    month_index_from_code,
    month_lengths,
    ordinary_month,
)
from wareki.core.tables import YEARS, year_record


def test_decode_month_lengths_from_bitmask():
    # 1868 (明治元年): 閏4月あり、13ヶ月
    assert decode_month_lengths(3366, 13) == (29, 30, 30, 29, 29, 30, 29, 29, 30, 29, 30, 30, 29)
    assert decode_month_flags(0b101, 3) == (True, False, True)
    assert month_lengths(1868) == decode_month_lengths(3366, 13)


def test_leap_code_layout_for_1868():
    rec = year_record(1868)
    assert rec.leap == 4
    codes = [month_code_from_index(rec.leap, i) for i in range(rec.months)]
    assert codes == [1, 2, 3, 4, 24, 5, 6, 7, 8, 9, 10, 11, 12]


def test_code_index_round_trip_for_every_year():
    for rec in YEARS:
        codes = [month_code_from_index(rec.leap, i) for i in range(rec.months)]
        assert len(set(codes)) == rec.months
        for i, code in enumerate(codes):
            assert month_index_from_code(rec.leap, code) == i


def test_leap_code_that_did_not_occur_is_rejected():
    rec = year_record(1868)
    with pytest.raises(InvalidArgumentError):
        month_index_from_code(rec.leap, 25)
    with pytest.raises(InvalidArgumentError):
        month_index_from_code(year_record(1869).leap, 24)


def test_month_code_ranges():
    assert is_valid_month_code(1)
    assert is_valid_month_code(12)
    assert is_valid_month_code(21)
    assert is_valid_month_code(32)
    for bad in (0, 13, 20, 33, -1):
        assert not is_valid_month_code(bad)
    assert ordinary_month(24) == 4
    assert ordinary_month(4) == 4


def test_index_12_needs_a_leap_year():
    with pytest.raises(InvalidArgumentError):
        month_code_from_index(None, 12)


def test_locate_day_walks_month_lengths():
    rec = year_record(1868)
    assert locate_day(rec, 0) == (0, 1)
    assert locate_day(rec, 28) == (0, 29)
    assert locate_day(rec, 29) == (1, 1)
    # 29 + 30 + 30 + 29 = 118 -> 閏4月1日
    assert locate_day(rec, 118) == (4, 1)


def test_final_month_of_1872_is_truncated():
    rec = year_record(1872)
    assert month_lengths(1872)[11] == 30
    assert last_day_of_month(rec, 11) == 2
    assert last_day_of_month(rec, 10) == 29
