# src/wareki/core/fields.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet


class WarekiField(str, Enum):
    """
    和暦フィールドの選択子。

    - ERA:          元号コード 0..255
    - YEAR_OF_ERA:  元号年（元年 = 1）
    - CIVIL_YEAR:   和暦年を西暦年にしたもの（旧暦正月が属する西暦年）
    - MONTH:        年内の月インデックス 0..12
    - DAY_OF_MONTH: 月内の日 (1..)
    - MONTH_CODE:   月コード 1..12、閏月は 21..32
    - YEAR_STEM / YEAR_BRANCH: 年の十干 0..9 / 十二支 0..11
    - DAY_STEM / DAY_BRANCH:   日の十干 / 十二支
    - WEEKDAY:      七曜 0=日 .. 6=土
    """
    ERA = "era"
    YEAR_OF_ERA = "year_of_era"
    CIVIL_YEAR = "civil_year"
    MONTH = "month"
    DAY_OF_MONTH = "day_of_month"
    MONTH_CODE = "month_code"
    YEAR_STEM = "year_stem"
    YEAR_BRANCH = "year_branch"
    DAY_STEM = "day_stem"
    DAY_BRANCH = "day_branch"
    WEEKDAY = "weekday"


ADDABLE_FIELDS: FrozenSet[WarekiField] = frozenset({
    WarekiField.YEAR_OF_ERA,
    WarekiField.CIVIL_YEAR,
    WarekiField.MONTH,
    WarekiField.DAY_OF_MONTH,
})

NAMED_FIELDS: FrozenSet[WarekiField] = frozenset({
    WarekiField.ERA,
    WarekiField.MONTH_CODE,
    WarekiField.YEAR_STEM,
    WarekiField.YEAR_BRANCH,
    WarekiField.DAY_STEM,
    WarekiField.DAY_BRANCH,
    WarekiField.WEEKDAY,
})


@dataclass(frozen=True)
class WarekiFields:
    era: int
    year_of_era: int
    civil_year: int
    month: int
    day_of_month: int
    month_code: int
    year_stem: int
    year_branch: int
    day_stem: int
    day_branch: int
    weekday: int
    lunisolar: bool

    @property
    def is_leap_month(self) -> bool:
        return self.month_code > 20

    def value(self, field: WarekiField) -> int:
        return int(getattr(self, WarekiField(field).value))
