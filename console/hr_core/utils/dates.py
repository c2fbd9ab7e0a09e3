# -*- coding: utf-8 -*-
"""
Calendar helpers. Mọi ngày giờ từ backend đều coi là UTC-naive calendar value:
- 'YYYY-MM-DD' → date
- timestamp đầy đủ ('2025-06-01T10:00:00Z', '2025-06-01 10:00:00+03:00') → lấy phần date, bỏ giờ / timezone
"""
from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional, Tuple

from django.utils.dateparse import parse_date, parse_datetime


def as_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    d = parse_date(s[:10]) if len(s) >= 10 else None
    if d is None:
        dt = parse_datetime(s)
        d = dt.date() if dt else None
    if d is None:
        raise ValueError(f"Invalid date {value!r} (expected YYYY-MM-DD)")
    return d


def as_date_or_none(value: Any) -> Optional[date]:
    try:
        return as_date(value)
    except ValueError:
        return None


def to_iso(d: Optional[date]) -> Optional[str]:
    return d.isoformat() if d else None


def parse_month(value: str) -> Tuple[int, int]:
    """'2025-07' → (2025, 7)."""
    try:
        y, m = str(value).strip().split("-")[:2]
        year, month = int(y), int(m)
    except (ValueError, AttributeError):
        raise ValueError(f"Invalid month {value!r} (expected YYYY-MM)")
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {value!r} (expected YYYY-MM)")
    return year, month


def month_of(d: date) -> Tuple[int, int]:
    return d.year, d.month


def format_month(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def iter_days(start: date, end: date) -> Iterator[date]:
    cur = start
    while cur <= end:
        yield cur
        cur += timedelta(days=1)


def year_bounds(year: int) -> Tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)
