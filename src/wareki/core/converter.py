# src/wareki/core/converter.py
from __future__ import annotations

from datetime import date, datetime
from typing import Tuple

from .errors import OutOfRangeError
from .fields import WarekiFields
from .months import locate_day, month_code_from_index
from .tables import (
    ERA_BOUNDARIES,
    LUNISOLAR_START,
    era_record,
    year_record,
    year_start,
)
from .timeutil import DAY, require_aware


def sexagenary_year(civil_year: int) -> Tuple[int, int]:
    """年の (十干, 十二支)。西暦4年 = 甲子。"""
    n = int(civil_year) - 4
    return n % 10, n % 12


def sexagenary_day(d: date) -> Tuple[int, int]:
    """
    日の (十干, 十二支)。JST の暦日だけで決まり、元号・暦法には依存しない。
    proleptic ordinal で数える (2019-05-01 = 戊戌)。
    """
    n = d.toordinal()
    return (n + 4) % 10, (n + 2) % 12


def compute_fields(instant: datetime, *, north_court: bool = False) -> WarekiFields:
    """
    instant -> 和暦フィールド。

    - 1873-01-01 以降: 西暦の月日をそのまま使い、元号だけ改元日で切り替える
    - それより前: 年テーブルの正月朔日から日数を数えて旧暦の月日を出す
    """
    t = require_aware(instant, "instant")
    if t < LUNISOLAR_START:
        raise OutOfRangeError(
            f"instant precedes the first supported lunisolar year: {t.isoformat()} < {LUNISOLAR_START.isoformat()}"
        )

    local = t.date()
    year = local.year

    for start, code in ERA_BOUNDARIES:
        if t >= start:
            era = code
            month = local.month - 1
            day = local.day
            month_code = month + 1
            lunisolar = False
            break
    else:
        # 旧暦の正月は西暦の1月1日より遅れて来る
        if t < year_start(year):
            year -= 1
        rec = year_record(year)
        era = rec.era_for(north_court)

        offset = (t - year_start(year)) // DAY
        month, day = locate_day(rec, offset)
        month_code = month_code_from_index(rec.leap, month)
        lunisolar = True

    year_stem, year_branch = sexagenary_year(year)
    day_stem, day_branch = sexagenary_day(local)

    return WarekiFields(
        era=era,
        year_of_era=year - era_record(era).first_year + 1,
        civil_year=year,
        month=month,
        day_of_month=day,
        month_code=month_code,
        year_stem=year_stem,
        year_branch=year_branch,
        day_stem=day_stem,
        day_branch=day_branch,
        weekday=(local.weekday() + 1) % 7,
        lunisolar=lunisolar,
    )
