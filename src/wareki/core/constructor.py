# src/wareki/core/constructor.py
from __future__ import annotations

from datetime import datetime, timedelta

from .errors import InvalidArgumentError
from .months import (
    days_before_month,
    is_valid_month_code,
    last_day_of_month,
    month_index_from_code,
    ordinary_month,
)
from .tables import (
    FIRST_YEAR,
    GREGORIAN_ADOPTION_YEAR,
    MAX_ERA,
    MIN_ERA,
    era_record,
    year_record,
    year_start,
)
from .timeutil import JST, days_in_month


def validate_era_date(era: int, year: int, month_code: int, day: int) -> None:
    if not (MIN_ERA <= int(era) <= MAX_ERA):
        raise InvalidArgumentError(f"era code out of range: {era} (expected {MIN_ERA}..{MAX_ERA})")
    if int(year) < 1:
        raise InvalidArgumentError(f"year of era must be >= 1 (got {year})")
    if not is_valid_month_code(month_code):
        raise InvalidArgumentError(f"month code out of range: {month_code} (expected 1..12 or 21..32)")
    if not (1 <= int(day) <= 31):
        raise InvalidArgumentError(f"day out of range: {day} (expected 1..31)")


def instant_for_civil(civil_year: int, month_code: int, day: int) -> datetime:
    """
    西暦年（和暦年のマッピング値）+ 月コード + 日 -> その日の 0:00 JST。

    1873 年以降は閏月コードを平月に落としてグレゴリオ暦でそのまま組み立てる。
    それより前は年テーブルから正月朔日と月の大小を引いて積み上げる。
    """
    y = int(civil_year)
    d = int(day)

    if y >= GREGORIAN_ADOPTION_YEAR:
        m = ordinary_month(month_code)
        try:
            last = days_in_month(y, m)
        except ValueError as e:
            raise InvalidArgumentError(f"invalid gregorian year/month: {y}-{m}") from e
        if d > last:
            raise InvalidArgumentError(f"day {d} does not exist in {y}-{m:02d} (last={last})")
        try:
            return datetime(y, m, d, tzinfo=JST)
        except (ValueError, OverflowError) as e:
            raise InvalidArgumentError(f"cannot represent {y}-{m:02d}-{d:02d}") from e

    if y < FIRST_YEAR:
        raise InvalidArgumentError(f"year {y} precedes the first supported lunisolar year {FIRST_YEAR}")

    rec = year_record(y)
    index = month_index_from_code(rec.leap, month_code)
    last = last_day_of_month(rec, index)
    if d > last:
        raise InvalidArgumentError(f"day {d} does not exist in {y} month {month_code} (last={last})")

    days = days_before_month(rec, index) + d - 1
    return year_start(y) + timedelta(days=days)


def instant_for(era: int, year: int, month_code: int = 1, day: int = 1) -> datetime:
    """
    元号コード + 元号年 + 月コード + 日 -> instant (0:00 JST)。

    month_code: 1..12、閏月は +20 (21..32)。その年に無い閏月はエラー。
    元号年が次の元号にはみ出していてもそのまま西暦年に換算する。
    """
    validate_era_date(era, year, month_code, day)
    civil_year = era_record(era).first_year + int(year) - 1
    return instant_for_civil(civil_year, month_code, day)
