# src/wareki/core/timeutil.py
from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, time, timedelta, timezone

# 和暦の判定はすべて日本標準時 (GMT+9) 固定で行う。
# ZoneInfo("Asia/Tokyo") は 1888 年以前が LMT (+09:18:59) になるので使わない。
JST = timezone(timedelta(hours=9), "JST")
UTC = timezone.utc

DAY = timedelta(days=1)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def require_aware(dt: datetime, name: str = "dt") -> datetime:
    """
    Ensure a datetime is timezone-aware and return it converted to JST.

    Parameters
    ----------
    dt:
        datetime to validate.
    name:
        Parameter name for error messages.

    Raises
    ------
    ValueError
        If dt is naive or has an unusable tzinfo.
    """
    if not isinstance(dt, datetime):
        raise TypeError(f"{name} must be a datetime (got {type(dt).__name__})")
    if dt.tzinfo is None:
        raise ValueError(f"{name} must be timezone-aware datetime (got naive datetime)")
    if dt.utcoffset() is None:
        raise ValueError(f"{name} has invalid tzinfo (utcoffset is None): {dt.tzinfo!r}")
    return dt.astimezone(JST)


def from_epoch_ms(ms: int) -> datetime:
    """epoch milliseconds -> JST datetime"""
    return (_EPOCH + timedelta(milliseconds=int(ms))).astimezone(JST)


def to_epoch_ms(dt: datetime) -> int:
    return (require_aware(dt) - _EPOCH) // timedelta(milliseconds=1)


def jst_midnight(d: date) -> datetime:
    return datetime.combine(d, time(0, 0), tzinfo=JST)


def time_of_day(dt: datetime) -> timedelta:
    """Elapsed time since the JST midnight of dt's own day."""
    t = require_aware(dt)
    return t - jst_midnight(t.date())


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def shift_months(dt: datetime, months: int) -> datetime:
    """
    Add calendar months, clamping the day to the target month's last day
    (2020-01-31 + 1 month -> 2020-02-29). Time of day is kept.
    """
    t = require_aware(dt)
    n = t.year * 12 + (t.month - 1) + int(months)
    year, month0 = divmod(n, 12)
    day = min(t.day, days_in_month(year, month0 + 1))
    return t.replace(year=year, month=month0 + 1, day=day)
