# src/wareki/core/months.py
from __future__ import annotations

"""
Month-length codec and the leap-month code convention.

月インデックス (index): その年の最初の月を 0 とする通し番号 (0..months-1)
月コード (code):       表示用の番号。平月は 1..12、閏月は 20 + 直前の平月番号 (21..32)

閏4月のある年:
  index: 0  1  2  3  4   5  6 ... 12
  code:  1  2  3  4  24  5  6 ... 12
"""

from functools import lru_cache
from typing import Optional, Tuple

from .errors import InvalidArgumentError, OutOfRangeError
from .tables import FINAL_MONTH_LAST_DAY, LAST_YEAR, YearRecord, year_record

LEAP_OFFSET = 20

SMALL_MONTH_DAYS = 29
LARGE_MONTH_DAYS = 30


def decode_month_flags(mask: int, count: int) -> Tuple[bool, ...]:
    """bit i -> True なら大の月 (30日)"""
    return tuple(bool((int(mask) >> i) & 1) for i in range(int(count)))


def decode_month_lengths(mask: int, count: int) -> Tuple[int, ...]:
    return tuple(LARGE_MONTH_DAYS if big else SMALL_MONTH_DAYS for big in decode_month_flags(mask, count))


@lru_cache(maxsize=None)
def month_lengths(year: int) -> Tuple[int, ...]:
    """
    旧暦 year の各月の日数（表の値そのまま）。
    1872 年の最終月は表上 30 日だが実際は 2 日で打ち切り。last_day_of_month() を参照。
    """
    rec = year_record(year)
    return decode_month_lengths(rec.mask, rec.months)


def month_length(rec: YearRecord, index: int) -> int:
    return month_lengths(rec.year)[index]


def last_day_of_month(rec: YearRecord, index: int) -> int:
    """その月で実在する最終日。1872 年最終月だけ 2。"""
    if rec.year == LAST_YEAR and index == rec.months - 1:
        return FINAL_MONTH_LAST_DAY
    return month_length(rec, index)


def days_before_month(rec: YearRecord, index: int) -> int:
    return sum(month_lengths(rec.year)[:index])


def locate_day(rec: YearRecord, offset: int) -> Tuple[int, int]:
    """
    正月朔日からの経過日数 -> (月インデックス, 日)。日は 1 始まり。
    """
    cnt = 0
    for i, dm in enumerate(month_lengths(rec.year)):
        if offset < cnt + dm:
            return i, offset - cnt + 1
        cnt += dm
    raise OutOfRangeError(f"day offset {offset} exceeds year {rec.year} ({cnt} days)")


# ============================================================
# index <-> code
# ============================================================

def is_valid_month_code(code: int) -> bool:
    c = int(code)
    return 1 <= c <= 12 or LEAP_OFFSET + 1 <= c <= LEAP_OFFSET + 12


def is_leap_code(code: int) -> bool:
    return int(code) > LEAP_OFFSET


def ordinary_month(code: int) -> int:
    """閏月コードを平月番号に落とす (24 -> 4)"""
    c = int(code)
    return c - LEAP_OFFSET if c > LEAP_OFFSET else c


def month_code_from_index(leap: Optional[int], index: int) -> int:
    i = int(index)
    if leap is None:
        if not (0 <= i < 12):
            raise InvalidArgumentError(f"month index out of range: {index} (no leap month)")
        return i + 1
    if not (0 <= i < 13):
        raise InvalidArgumentError(f"month index out of range: {index}")
    if i < leap:
        return i + 1
    if i == leap:
        return leap + LEAP_OFFSET
    return i


def month_index_from_code(leap: Optional[int], code: int) -> int:
    """
    月コード -> 月インデックス。
    その年に無い閏月を指定したら InvalidArgumentError。
    """
    c = int(code)
    if not is_valid_month_code(c):
        raise InvalidArgumentError(f"month code out of range: {code} (expected 1..12 or 21..32)")
    if is_leap_code(c):
        if c - LEAP_OFFSET != leap:
            raise InvalidArgumentError(f"leap month {c - LEAP_OFFSET} does not exist (leap={leap})")
        return leap
    if leap is None or c <= leap:
        return c - 1
    return c
