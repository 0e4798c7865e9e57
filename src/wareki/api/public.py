from __future__ import annotations

import logging
import time
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from wareki.core.calendar import JapaneseCalendar
from wareki.core.config import load_config
from wareki.core.constructor import instant_for
from wareki.core.errors import WarekiError
from wareki.core.fields import WarekiFields
from wareki.core.tables import EraRecord, era_record, find_era
from wareki.core.timeutil import JST, jst_midnight
from wareki.features.config import (
    kanshi_name,
    month_name_from_code,
    shichiyou_name,
    traditional_month_name,
)

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("wareki.api.public")


# ============================================================
# Response Models
# ============================================================
class EraInfo(BaseModel):
    code: int
    name: str
    key: str
    first_year: int


class WarekiDate(BaseModel):
    era: EraInfo
    year_of_era: int
    civil_year: int = Field(description="和暦年を西暦年に換算した値")
    month: int = Field(description="年内の月インデックス 0..12")
    month_code: int = Field(description="1..12、閏月は 21..32")
    month_name: str
    day: int
    is_leap_month: bool = False
    lunisolar: bool = Field(description="1872 年以前の旧暦なら true")
    year_kanshi: str
    day_kanshi: str
    weekday: str
    label: str


class DayResponse(BaseModel):
    date: date
    north_court: bool = False
    wareki: WarekiDate


class RangeResponse(BaseModel):
    start: date
    end: date
    north_court: bool = False
    days: List[DayResponse]


class FromEraResponse(BaseModel):
    era: EraInfo
    year_of_era: int
    month_code: int
    day: int
    date: date
    instant: datetime


# ============================================================
# Helpers
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _parse_date_any(x: str | date) -> date:
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _era_info(rec: EraRecord) -> EraInfo:
    return EraInfo(code=rec.code, name=rec.name, key=rec.key, first_year=rec.first_year)


def _format_wareki_label(era_name: str, year_of_era: int, month_code: int, day: int) -> str:
    y = "元" if year_of_era == 1 else str(year_of_era)
    return f"{era_name}{y}年{month_name_from_code(month_code)}月{day}日"


def _wareki_from_fields(fs: WarekiFields) -> WarekiDate:
    era = era_record(fs.era)
    return WarekiDate(
        era=_era_info(era),
        year_of_era=fs.year_of_era,
        civil_year=fs.civil_year,
        month=fs.month,
        month_code=fs.month_code,
        month_name=traditional_month_name(fs.month_code) if fs.lunisolar else f"{fs.month_code}月",
        day=fs.day_of_month,
        is_leap_month=fs.is_leap_month,
        lunisolar=fs.lunisolar,
        year_kanshi=kanshi_name(fs.year_stem, fs.year_branch),
        day_kanshi=kanshi_name(fs.day_stem, fs.day_branch),
        weekday=shichiyou_name(fs.weekday),
        label=_format_wareki_label(era.name, fs.year_of_era, fs.month_code, fs.day_of_month),
    )


def _resolve_north_court(north_court: Optional[bool]) -> bool:
    if north_court is None:
        return load_config().wareki.north_court
    return bool(north_court)


def _wareki_for_date(d: date, *, north_court: bool) -> WarekiDate:
    cal = JapaneseCalendar(jst_midnight(d), north_court=north_court)
    try:
        fs = cal.fields()
    except WarekiError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _wareki_from_fields(fs)


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
def get_wareki_day(
    date_: str | date,
    *,
    north_court: Optional[bool] = None,
) -> dict:
    d = _parse_date_any(date_)
    nc = _resolve_north_court(north_court)
    res = DayResponse(date=d, north_court=nc, wareki=_wareki_for_date(d, north_court=nc))
    return res.model_dump(mode="json")


def get_wareki_range(
    start: str | date,
    end: str | date,
    *,
    north_court: Optional[bool] = None,
) -> dict:
    s = _parse_date_any(start)
    e = _parse_date_any(end)
    if e < s:
        raise ValueError("end must be >= start")

    nc = _resolve_north_court(north_court)
    cal = JapaneseCalendar(jst_midnight(s), north_court=nc)

    days: List[DayResponse] = []
    cur = s
    while cur <= e:
        try:
            fs = cal.fields()
        except WarekiError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        days.append(DayResponse(date=cal.gregorian.local_date(), north_court=nc, wareki=_wareki_from_fields(fs)))
        cur = cur + timedelta(days=1)
        if cur <= e:
            cal.gregorian.add_days(1)

    return RangeResponse(start=s, end=e, north_court=nc, days=days).model_dump(mode="json")


def get_date_from_era(
    era: str | int,
    year: int,
    month: int = 1,
    day: int = 1,
) -> dict:
    """
    元号 (コード・漢字・ローマ字) + 元号年 + 月コード + 日 -> 西暦日付。
    """
    try:
        rec = find_era(era)
        t = instant_for(rec.code, year, month, day)
    except WarekiError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    res = FromEraResponse(
        era=_era_info(rec),
        year_of_era=int(year),
        month_code=int(month),
        day=int(day),
        date=t.astimezone(JST).date(),
        instant=t,
    )
    return res.model_dump(mode="json")


# ============================================================
# Endpoints
# ============================================================
@router.get("/wareki/day", response_model=DayResponse)
def get_day(
    date_str: str = Query(..., alias="date", description="YYYY-MM-DD (JST)"),
    north_court: Optional[bool] = Query(None, description="南北朝期の元号を北朝で返す"),
) -> Dict[str, Any]:
    return get_wareki_day(date_str, north_court=north_court)


@router.get("/wareki/range", response_model=RangeResponse)
def get_range(
    start_str: str = Query(..., alias="start", description="YYYY-MM-DD (JST)"),
    end_str: str = Query(..., alias="end", description="YYYY-MM-DD (JST)"),
    north_court: Optional[bool] = Query(None, description="南北朝期の元号を北朝で返す"),
    limit_days: Optional[int] = Query(None, ge=1, le=2000, description="最大日数（DoS対策）"),
    timing: bool = Query(False, description="timingログを出す（検証用）"),
) -> Dict[str, Any]:
    start = _parse_iso_date(start_str)
    end = _parse_iso_date(end_str)
    if end < start:
        raise HTTPException(status_code=422, detail="end must be >= start")

    limit = limit_days if limit_days is not None else load_config().api.limit_days
    days_count = (end - start).days + 1
    if days_count > limit:
        raise HTTPException(status_code=422, detail=f"range too large: {days_count} days (limit_days={limit})")

    t0 = time.perf_counter()
    res = get_wareki_range(start, end, north_court=north_court)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /wareki/range start=%s end=%s days=%d total=%.3fs", start, end, days_count, t1 - t0)

    return res


@router.get("/wareki/from-era", response_model=FromEraResponse)
def get_from_era(
    era: str = Query(..., description="元号コード・元号名・ローマ字 (例: 255 / 令和 / reiwa)"),
    year: int = Query(..., ge=1, description="元号年（元年 = 1）"),
    month: int = Query(1, description="月コード 1..12、閏月は 21..32"),
    day: int = Query(1, ge=1, le=31),
) -> Dict[str, Any]:
    return get_date_from_era(era, year, month, day)
