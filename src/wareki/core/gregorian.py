# src/wareki/core/gregorian.py
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from .timeutil import JST, jst_midnight, require_aware, shift_months


class GregorianCalendar:
    """
    JST 固定の西暦カレンダー。可変な instant を1つだけ持つ。

    JapaneseCalendar はこれを部品として持ち、西暦の年月日・曜日の読み出しと
    instant の書き換えだけをここに任せる。

    revision は instant が変わるたびに増える。和暦フィールドのキャッシュは
    この値で「前回計算から instant が変わったか」を判定する。
    """

    def __init__(self, instant: Optional[datetime] = None) -> None:
        self._instant = datetime.now(JST) if instant is None else require_aware(instant, "instant")
        self._revision = 0

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> "GregorianCalendar":
        """month は 1..12"""
        return cls(datetime(year, month, day, hour, minute, second, tzinfo=JST))

    def copy(self) -> "GregorianCalendar":
        return GregorianCalendar(self._instant)

    # ----------------------------
    # read
    # ----------------------------
    @property
    def instant(self) -> datetime:
        return self._instant

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def year(self) -> int:
        return self._instant.year

    @property
    def month(self) -> int:
        """1..12"""
        return self._instant.month

    @property
    def day(self) -> int:
        return self._instant.day

    @property
    def weekday(self) -> int:
        """0=日曜 .. 6=土曜"""
        return (self._instant.weekday() + 1) % 7

    @property
    def hour(self) -> int:
        return self._instant.hour

    @property
    def minute(self) -> int:
        return self._instant.minute

    @property
    def second(self) -> int:
        return self._instant.second

    def local_date(self) -> date:
        return self._instant.date()

    # ----------------------------
    # write
    # ----------------------------
    def set_instant(self, instant: datetime) -> None:
        self._instant = require_aware(instant, "instant")
        self._revision += 1

    def set_date(self, year: int, month: int, day: int) -> None:
        """JST 0:00 にリセットして年月日をセットする。"""
        self.set_instant(jst_midnight(date(year, month, day)))

    def add_days(self, days: int) -> None:
        self.set_instant(self._instant + timedelta(days=int(days)))

    def add_months(self, months: int) -> None:
        self.set_instant(shift_months(self._instant, months))

    def __repr__(self) -> str:
        return f"GregorianCalendar({self._instant.isoformat()})"
