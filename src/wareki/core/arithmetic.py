# src/wareki/core/arithmetic.py
from __future__ import annotations

"""
和暦単位の加算。

どの関数も新しい instant を返すだけで、呼び出し側の状態は書き換えない。
失敗したら例外を投げるので、呼び出し側は成功時だけ instant を差し替えればよい。

暦法は旧暦 (593..1872) とグレゴリオ暦 (1873..) の2つ。
1回の加算で境界 (1873-01-01) をまたぐことがある。
"""

import logging
from datetime import datetime, timedelta

from .constructor import instant_for_civil
from .errors import OutOfRangeError, UnsupportedOperationError
from .fields import WarekiFields
from .months import (
    LEAP_OFFSET,
    is_leap_code,
    last_day_of_month,
    month_code_from_index,
    month_index_from_code,
    ordinary_month,
)
from .tables import (
    FIRST_YEAR,
    GREGORIAN_ADOPTION_YEAR,
    GREGORIAN_START,
    LAST_YEAR,
    LUNISOLAR_START,
    YearRecord,
    year_record,
)
from .timeutil import JST, days_in_month, require_aware, shift_months, time_of_day

log = logging.getLogger(__name__)


def _gregorian(year: int, month: int, day: int) -> datetime:
    """month は 1..12。日は月末に丸める。"""
    try:
        return datetime(year, month, min(day, days_in_month(year, month)), tzinfo=JST)
    except (ValueError, OverflowError) as e:
        raise OutOfRangeError(f"cannot represent gregorian date {year}-{month:02d}") from e


def _clamp_lunisolar_day(rec: YearRecord, index: int, day: int) -> int:
    # 30日の月から29日の月へ、1872年の最終月は2日まで
    return min(day, last_day_of_month(rec, index))


def add_days(instant: datetime, days: int) -> datetime:
    t = require_aware(instant, "instant")
    try:
        out = t + timedelta(days=int(days))
    except OverflowError as e:
        raise OutOfRangeError(f"cannot add {days} days to {t.isoformat()}") from e
    if out < LUNISOLAR_START:
        raise UnsupportedOperationError(
            f"result precedes the first supported lunisolar year: {out.isoformat()}"
        )
    return out


def add_years(instant: datetime, fields: WarekiFields, years: int) -> datetime:
    """
    和暦年を years だけ進める（元号年・西暦換算年どちらも同じ動き）。

    - 移動先がグレゴリオ暦: 閏月は平月扱い。日が月末を超えたら月末に丸める（2月29日以降 -> 2月末）
    - 移動先が旧暦: 閏月が移動先の年に無ければ同じ番号の平月にする。
      30日が無い月なら29日、1872年の最終月は2日まで
    """
    target = fields.civil_year + int(years)
    if target < FIRST_YEAR:
        raise UnsupportedOperationError(f"no lunisolar data below {FIRST_YEAR} (target year {target})")

    tod = time_of_day(instant)
    code = fields.month_code
    day = fields.day_of_month

    if target >= GREGORIAN_ADOPTION_YEAR:
        return _gregorian(target, ordinary_month(code), day) + tod

    rec = year_record(target)
    if is_leap_code(code) and code - LEAP_OFFSET != rec.leap:
        log.debug("leap month %d does not exist in %d; using ordinary month", code - LEAP_OFFSET, target)
        code -= LEAP_OFFSET

    index = month_index_from_code(rec.leap, code)
    day = _clamp_lunisolar_day(rec, index, day)
    return instant_for_civil(target, code, day) + tod


def add_months(instant: datetime, fields: WarekiFields, months: int) -> datetime:
    """
    和暦の月を months だけ進める。旧暦は年ごとに 12 / 13 ヶ月なので1年ずつ歩く。

    前向きに 1872 年を抜けたら 1873-01-01 0:00 を起点にグレゴリオ暦の月加算に切り替える（日と時刻は引き継がない）。
    グレゴリオ暦から後ろ向きに 1873-01 より前へ出たら 1872 年の最終月から旧暦で歩く。
    """
    year = fields.civil_year
    index = fields.month
    day = fields.day_of_month
    delta = int(months)
    tod = time_of_day(instant)

    if year >= GREGORIAN_ADOPTION_YEAR:
        # 1872 年最終月から数えた月数
        elapsed = (year - GREGORIAN_ADOPTION_YEAR) * 12 + index + 1
        if delta > 0 or elapsed > -delta:
            try:
                return shift_months(instant, delta)
            except (ValueError, OverflowError) as e:
                raise OutOfRangeError(f"cannot add {delta} months to {instant.isoformat()}") from e
        log.debug("month add leaves the gregorian regime: year=%d index=%d delta=%d", year, index, delta)
        year = LAST_YEAR
        index = year_record(LAST_YEAR).months - 1
        delta += elapsed

    rec = year_record(year)
    while not (0 <= index + delta < rec.months):
        if delta > 0:
            # 翌年の最初の月へ
            delta -= rec.months - index
            year += 1
            index = 0
            if year > LAST_YEAR:
                # 1873-01-01 0:00 から純粋な月加算
                log.debug("month add enters the gregorian regime: remaining=%d", delta)
                try:
                    return shift_months(GREGORIAN_START, delta)
                except (ValueError, OverflowError) as e:
                    raise OutOfRangeError(f"cannot add {months} months to {instant.isoformat()}") from e
            rec = year_record(year)
        else:
            # 前年の最初の月へ
            year -= 1
            if year < FIRST_YEAR:
                raise UnsupportedOperationError(f"no lunisolar data below {FIRST_YEAR}")
            rec = year_record(year)
            delta += rec.months + index
            index = 0

    index += delta
    day = _clamp_lunisolar_day(rec, index, day)
    return instant_for_civil(year, month_code_from_index(rec.leap, index), day) + tod
