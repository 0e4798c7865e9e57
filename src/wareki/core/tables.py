# src/wareki/core/tables.py
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple

from .era_data import ERA_ROWS
from .errors import InvalidArgumentError, OutOfRangeError
from .timeutil import JST, from_epoch_ms
from .year_data import FIRST_YEAR, LAST_YEAR, YEAR_ROWS, YEAR_START_MS

# 1873 年 1 月 1 日からグレゴリオ暦
GREGORIAN_ADOPTION_YEAR = LAST_YEAR + 1

# 明治5年12月は2日で打ち切り（翌日が明治6年1月1日）
FINAL_MONTH_LAST_DAY = 2


# ============================================================
# Era table
# ============================================================

@dataclass(frozen=True)
class EraRecord:
    """
    元号1件。code は 0..255 で時代順。
    0（推古）などの括弧付きは元号が無い期間を天皇名で代用したもの。
    """
    code: int
    key: str
    name: str
    first_year: int

    @property
    def is_provisional(self) -> bool:
        return self.name.startswith("（")

    @property
    def plain_name(self) -> str:
        return self.name.strip("（）")


ERAS: Tuple[EraRecord, ...] = tuple(
    EraRecord(code=i, key=key, name=name, first_year=first_year)
    for i, (key, name, first_year) in enumerate(ERA_ROWS)
)

SUIKO = 0
MEIJI = 251
TAISHOU = 252
SHOUWA = 253
HEISEI = 254
REIWA = 255

MIN_ERA = SUIKO
MAX_ERA = REIWA

_ERA_BY_KEY: Dict[str, EraRecord] = {e.key.lower(): e for e in ERAS}
_ERA_BY_NAME: Dict[str, EraRecord] = {e.plain_name: e for e in ERAS}


def era_record(code: int) -> EraRecord:
    c = int(code)
    if not (MIN_ERA <= c <= MAX_ERA):
        raise OutOfRangeError(f"era code out of range: {code} (expected {MIN_ERA}..{MAX_ERA})")
    return ERAS[c]


def find_era(text: str | int) -> EraRecord:
    """
    元号コード・漢字名・ローマ字キーのどれでも引ける。
      find_era(255) / find_era("令和") / find_era("（推古）") / find_era("reiwa")
    """
    if isinstance(text, int):
        try:
            return era_record(text)
        except OutOfRangeError as e:
            raise InvalidArgumentError(str(e)) from e

    s = unicodedata.normalize("NFKC", str(text)).strip()
    if s.isdigit():
        return find_era(int(s))

    # NFKC で全角括弧は半角になる
    plain = s.strip("()（）")
    hit = _ERA_BY_NAME.get(plain) or _ERA_BY_KEY.get(s.lower())
    if hit is None:
        raise InvalidArgumentError(f"unknown era: {text!r}")
    return hit


# ============================================================
# Year table (593..1872)
# ============================================================

@dataclass(frozen=True)
class YearRecord:
    """
    旧暦1年分。year は「その年の正月朔日が属する西暦年」。

    - era / north_era: 元号コード。北朝側が無い年は north_era=None
    - months: 12 or 13
    - leap: 閏月の位置 (1..12)。閏4月なら 4。無ければ None
    - mask: 月の大小 (bit i = 1 -> i番目の月は30日)
    """
    year: int
    era: int
    north_era: Optional[int]
    months: int
    leap: Optional[int]
    mask: int

    @property
    def has_leap(self) -> bool:
        return self.leap is not None

    def era_for(self, north_court: bool) -> int:
        if north_court and self.north_era is not None:
            return self.north_era
        return self.era


YEARS: Tuple[YearRecord, ...] = tuple(
    YearRecord(year=FIRST_YEAR + i, era=era, north_era=north, months=months, leap=leap, mask=mask)
    for i, (era, north, months, leap, mask) in enumerate(YEAR_ROWS)
)

YEAR_STARTS: Tuple[datetime, ...] = tuple(from_epoch_ms(ms) for ms in YEAR_START_MS)


def is_lunisolar_year(year: int) -> bool:
    return FIRST_YEAR <= int(year) <= LAST_YEAR


def year_record(year: int) -> YearRecord:
    y = int(year)
    if not is_lunisolar_year(y):
        raise OutOfRangeError(f"no lunisolar data for year {year} (expected {FIRST_YEAR}..{LAST_YEAR})")
    return YEARS[y - FIRST_YEAR]


def year_start(year: int) -> datetime:
    """旧暦正月朔日 0:00 JST"""
    y = int(year)
    if not is_lunisolar_year(y):
        raise OutOfRangeError(f"no lunisolar data for year {year} (expected {FIRST_YEAR}..{LAST_YEAR})")
    return YEAR_STARTS[y - FIRST_YEAR]


# ============================================================
# Regime boundaries
# ============================================================

LUNISOLAR_START = YEAR_STARTS[0]

GREGORIAN_START = datetime(1873, 1, 1, tzinfo=JST)
TAISHOU_START = datetime(1912, 7, 30, tzinfo=JST)
SHOUWA_START = datetime(1926, 12, 25, tzinfo=JST)
HEISEI_START = datetime(1989, 1, 8, tzinfo=JST)
REIWA_START = datetime(2019, 5, 1, tzinfo=JST)

# 新しい順。instant >= start の最初の行が該当元号
ERA_BOUNDARIES: Tuple[Tuple[datetime, int], ...] = (
    (REIWA_START, REIWA),
    (HEISEI_START, HEISEI),
    (SHOUWA_START, SHOUWA),
    (TAISHOU_START, TAISHOU),
    (GREGORIAN_START, MEIJI),
)
