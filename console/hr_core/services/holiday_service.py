# -*- coding: utf-8 -*-
"""
Date-Range Aggregator cho holidays:
- Backend lưu 1 record / ngày; màn hình hiển thị 1 range / kỳ nghỉ liên tục
- group_consecutive(): gộp các ngày liên tiếp (+1 ngày) cùng tên, cùng năm
- expand(): range → 1 body / ngày (cờ Y/N)
- update_range() = xoá hết rồi tạo lại, KHÔNG atomic
"""
from __future__ import annotations
import logging
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from hr_core.clients.backend_client import BackendClient
from hr_core.exceptions import BackendError, RecordNotFound, ValidationError
from hr_core.models import ConsoleSession, HolidayRange, HolidayType, classify_holiday_name
from hr_core.repositories import holiday_repository as repo
from hr_core.serializers.holiday_serializer import HolidayRecordSerializer, HolidayRangeSerializer
from hr_core.utils.validation import first_error
from hr_core.utils.dates import as_date_or_none, iter_days, to_iso

logger = logging.getLogger(__name__)

# type → (english, arabic)
HOLIDAY_NAMES = {
    HolidayType.FITR: ("Eid Al-Fitr", "عيد الفطر"),
    HolidayType.ADHA: ("Eid Al-Adha", "عيد الأضحى"),
    HolidayType.NATIONAL: ("National Holiday", "عيد وطني"),
    HolidayType.FOUNDATION: ("Foundation Day", "يوم التأسيس"),
    HolidayType.CUSTOM: ("Custom Holiday", "إجازة مخصصة"),
}

# backend gửi null cho field optional → dùng giá trị mặc định
RECORD_DEFAULTS = {"holidayName": "", "isRecurring": "N", "isActive": "Y", "isPaid": "Y"}

RECURRING_BY_DEFAULT = frozenset({HolidayType.NATIONAL, HolidayType.FOUNDATION})


def _yn(flag: bool) -> str:
    return "Y" if flag else "N"


def classify_holiday(name: Optional[str]) -> HolidayType:
    return classify_holiday_name(name)


def holiday_names(holiday_type: str) -> Tuple[str, str]:
    """(english, arabic) display names."""
    return HOLIDAY_NAMES[HolidayType(holiday_type)]


# ============================
# grouping
# ============================
def _clean_records(records: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for r in records or []:
        rec = dict(r)
        d = as_date_or_none(rec.get("holidayDate"))
        rec["holidayDate"] = d
        if d is not None and rec.get("holidayYear") is None:
            rec["holidayYear"] = d.year
        ser = HolidayRecordSerializer(data=rec)
        if ser.is_valid():
            data = dict(ser.validated_data)
            for key, default in RECORD_DEFAULTS.items():
                if data.get(key) is None:
                    data[key] = default
            out.append(data)
        else:
            logger.warning("[holiday] skip malformed record %r: %s", r, dict(ser.errors))
    return out


def _to_range(run: List[Dict[str, Any]], serial_no: int) -> HolidayRange:
    first = run[0]
    return HolidayRange(
        from_date=first["holidayDate"],
        to_date=run[-1]["holidayDate"],
        holiday_name=first["holidayName"],
        year=first["holidayYear"],
        holiday_ids=tuple(r["holidayId"] for r in run if r.get("holidayId") is not None),
        is_paid=first["isPaid"] == "Y",
        is_recurring=first["isRecurring"] == "Y",
        is_active=first["isActive"] == "Y",
        serial_no=serial_no,
    )


def group_consecutive(records: Iterable[Mapping[str, Any]]) -> List[HolidayRange]:
    """Daily records → ranges, ascending by start date."""
    recs = sorted(_clean_records(records), key=lambda r: r["holidayDate"])

    runs: List[List[Dict[str, Any]]] = []
    for rec in recs:
        prev = runs[-1][-1] if runs else None
        if (
            prev is not None
            and rec["holidayName"] == prev["holidayName"]
            and rec["holidayYear"] == prev["holidayYear"]
            and rec["holidayDate"] == prev["holidayDate"] + timedelta(days=1)
        ):
            runs[-1].append(rec)
        else:
            runs.append([rec])

    return [_to_range(run, i) for i, run in enumerate(runs, start=1)]


def expand(holiday: HolidayRange) -> List[Dict[str, Any]]:
    if holiday.to_date < holiday.from_date:
        raise ValidationError("to_date", "to_date must be on or after from_date.")
    return [
        {
            "holidayDate": to_iso(d),
            "holidayName": holiday.holiday_name,
            "holidayYear": holiday.year,
            "isRecurring": _yn(holiday.is_recurring),
            "isActive": _yn(holiday.is_active),
            "isPaid": _yn(holiday.is_paid),
        }
        for d in iter_days(holiday.from_date, holiday.to_date)
    ]


# ============================
# commands
# ============================
def build_range(session: ConsoleSession, data: Mapping[str, Any]) -> HolidayRange:
    ser = HolidayRangeSerializer(data=dict(data))
    if not ser.is_valid():
        raise first_error(ser.errors)
    attrs = ser.validated_data

    htype = HolidayType(attrs["holiday_type"])
    if htype == HolidayType.CUSTOM:
        name = attrs["holiday_name"].strip()
    else:
        en, ar = holiday_names(htype)
        name = ar if session.language == "ar" else en

    recurring = attrs["is_recurring"]
    if recurring is None:
        recurring = htype in RECURRING_BY_DEFAULT

    return HolidayRange(
        from_date=attrs["from_date"],
        to_date=attrs["to_date"],
        holiday_name=name,
        year=attrs["year"],
        is_paid=attrs["is_paid"],
        is_recurring=recurring,
    )


def create_range(
    session: ConsoleSession,
    data: Mapping[str, Any],
    *,
    client: Optional[BackendClient] = None,
) -> HolidayRange:
    client = client or BackendClient(session)
    holiday = build_range(session, data)

    ids = []
    for body in expand(holiday):
        resp = repo.create(client, body)
        if isinstance(resp, dict) and resp.get("holidayId") is not None:
            ids.append(resp["holidayId"])

    logger.info(
        "[holiday] created %r %s..%s (%s days)",
        holiday.holiday_name, holiday.from_date, holiday.to_date, holiday.number_of_days,
    )
    return HolidayRange(
        from_date=holiday.from_date,
        to_date=holiday.to_date,
        holiday_name=holiday.holiday_name,
        year=holiday.year,
        holiday_ids=tuple(ids),
        is_paid=holiday.is_paid,
        is_recurring=holiday.is_recurring,
        is_active=holiday.is_active,
    )


def delete_range(
    session: ConsoleSession,
    holiday: HolidayRange,
    *,
    client: Optional[BackendClient] = None,
) -> List[int]:
    if not holiday.holiday_ids:
        raise RecordNotFound(f"No holiday records for {holiday.holiday_name!r} {holiday.from_date}..{holiday.to_date}")
    client = client or BackendClient(session)

    for holiday_id in holiday.holiday_ids:
        repo.delete(client, holiday_id)
    logger.info("[holiday] deleted %r (%s records)", holiday.holiday_name, len(holiday.holiday_ids))
    return list(holiday.holiday_ids)


def update_range(
    session: ConsoleSession,
    old: HolidayRange,
    data: Mapping[str, Any],
    *,
    client: Optional[BackendClient] = None,
) -> HolidayRange:
    """
    Delete every record of `old`, then create `data`.
    Not atomic: if creation fails after the delete, the old range is gone.
    """
    client = client or BackendClient(session)
    # validate trước khi xoá để lỗi form không làm mất dữ liệu
    build_range(session, data)
    delete_range(session, old, client=client)
    try:
        return create_range(session, data, client=client)
    except BackendError:
        logger.error(
            "[holiday] %r deleted but re-create failed; range %s..%s must be re-entered",
            old.holiday_name, old.from_date, old.to_date,
        )
        raise
