# src/wareki/core/calendar.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple, Union

from wareki.features.config import (
    jikkan_name,
    juunishi_name,
    month_name_from_code,
    shichiyou_name,
)

from . import arithmetic
from .config import WarekiConfig, load_config
from .constructor import instant_for
from .converter import compute_fields
from .errors import UnsupportedOperationError
from .fields import ADDABLE_FIELDS, NAMED_FIELDS, WarekiField, WarekiFields
from .gregorian import GregorianCalendar
from .tables import era_record

log = logging.getLogger(__name__)

FieldLike = Union[WarekiField, str]


class JapaneseCalendar:
    """
    和暦カレンダー。

    instant は JST 固定の GregorianCalendar が持ち、こちらは和暦の読み書きだけを担う。
    西暦の年月日・曜日が欲しいときは .gregorian を使う。

    - 593 年（推古元年）の旧暦正月より前の instant では和暦を取得できない
    - 1873 年（明治6年）1月1日以降の月日はグレゴリオ暦と同じ
    - 明治以前の改元はその年の正月に遡って適用する（年テーブルの元号がそのまま年単位）
    - 大正以降は改元日で切り替える
    """

    def __init__(
        self,
        instant: Optional[datetime] = None,
        *,
        north_court: Optional[bool] = None,
        config: Optional[WarekiConfig] = None,
    ) -> None:
        cfg = config or load_config().wareki
        self._gregorian = GregorianCalendar(instant)
        self._north_court = cfg.north_court if north_court is None else bool(north_court)
        self._fields: Optional[WarekiFields] = None
        self._fields_key: Optional[Tuple[int, bool]] = None

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        **kwargs,
    ) -> "JapaneseCalendar":
        """西暦 (JST) の年月日から作る。month は 1..12"""
        return cls(GregorianCalendar.of(year, month, day, hour, minute, second).instant, **kwargs)

    @classmethod
    def from_era(cls, era: int, year: int, month: int = 1, day: int = 1, **kwargs) -> "JapaneseCalendar":
        return cls(instant_for(era, year, month, day), **kwargs)

    def copy(self) -> "JapaneseCalendar":
        return JapaneseCalendar(self.instant, north_court=self._north_court)

    # ----------------------------
    # instant
    # ----------------------------
    @property
    def gregorian(self) -> GregorianCalendar:
        return self._gregorian

    @property
    def instant(self) -> datetime:
        return self._gregorian.instant

    def set_instant(self, instant: datetime) -> None:
        self._gregorian.set_instant(instant)

    def invalidate(self) -> None:
        """次の読み出しで和暦フィールドを必ず再計算させる。"""
        self._fields = None
        self._fields_key = None

    # ----------------------------
    # north / south court
    # ----------------------------
    @property
    def north_court(self) -> bool:
        return self._north_court

    @north_court.setter
    def north_court(self, value: bool) -> None:
        self._north_court = bool(value)
        self.invalidate()

    # ----------------------------
    # read
    # ----------------------------
    def fields(self) -> WarekiFields:
        key = (self._gregorian.revision, self._north_court)
        if self._fields is None or self._fields_key != key:
            self._fields = compute_fields(self.instant, north_court=self._north_court)
            self._fields_key = key
        return self._fields

    def get(self, field: FieldLike) -> int:
        return self.fields().value(WarekiField(field))

    def get_name(self, field: FieldLike) -> str:
        f = WarekiField(field)
        if f not in NAMED_FIELDS:
            raise UnsupportedOperationError(f"{f.value} has no display name")

        fs = self.fields()
        if f is WarekiField.ERA:
            return era_record(fs.era).name
        if f is WarekiField.MONTH_CODE:
            return month_name_from_code(fs.month_code)
        if f is WarekiField.YEAR_STEM:
            return jikkan_name(fs.year_stem)
        if f is WarekiField.YEAR_BRANCH:
            return juunishi_name(fs.year_branch)
        if f is WarekiField.DAY_STEM:
            return jikkan_name(fs.day_stem)
        if f is WarekiField.DAY_BRANCH:
            return juunishi_name(fs.day_branch)
        return shichiyou_name(fs.weekday)

    # ----------------------------
    # write
    # ----------------------------
    def set_era(self, era: int, year: int, month: int = 1, day: int = 1) -> None:
        """
        和暦をセットする。時刻は 0:00 にリセット。

        month: 月コード 1..12、閏月は +20 (21..32)。存在しない閏月はエラー。
        month / day を省略すると、その元号年の 1月1日（旧暦なら正月朔日）。
        """
        self.set_instant(instant_for(era, year, month, day))

    def add(self, field: FieldLike, delta: int) -> None:
        """
        和暦フィールドに加算する。失敗したときは instant を一切変えない。

        - DAY_OF_MONTH: 日単位の加算
        - YEAR_OF_ERA / CIVIL_YEAR: 和暦年の加算（日は移動先の月に合わせて丸める）
        - MONTH: 旧暦の月（閏月を含む）単位の加算
        - それ以外は派生値なので加算できない
        """
        f = WarekiField(field)
        if f not in ADDABLE_FIELDS:
            raise UnsupportedOperationError(f"cannot add to derived field {f.value}")

        n = int(delta)
        if n == 0:
            return

        if f is WarekiField.DAY_OF_MONTH:
            out = arithmetic.add_days(self.instant, n)
        elif f is WarekiField.MONTH:
            out = arithmetic.add_months(self.instant, self.fields(), n)
        else:
            out = arithmetic.add_years(self.instant, self.fields(), n)

        log.debug("add %s %+d: %s -> %s", f.value, n, self.instant.isoformat(), out.isoformat())
        self.set_instant(out)

    def __repr__(self) -> str:
        return f"JapaneseCalendar({self.instant.isoformat()}, north_court={self._north_court})"
