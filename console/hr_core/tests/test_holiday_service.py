# -*- coding: utf-8 -*-
from datetime import date

import pytest

from hr_core.exceptions import BackendError, RecordNotFound, ValidationError
from hr_core.models import ConsoleSession, HolidayRange, HolidayType
from hr_core.selectors.holiday_selector import list_ranges
from hr_core.services.holiday_service import (
    classify_holiday, create_range, delete_range, expand, group_consecutive, holiday_names, update_range,
)
from hr_core.tests.fakes import FakeClient


def _day(holiday_id, day, name, year=2025, recurring="N"):
    return {
        "holidayId": holiday_id, "holidayDate": day, "holidayName": name, "holidayYear": year,
        "isRecurring": recurring, "isActive": "Y", "isPaid": "Y",
    }


def _counter(start=1):
    ids = iter(range(start, start + 100))
    return lambda **kw: dict(kw["body"], holidayId=next(ids))


# ---------- grouping ----------
def test_consecutive_days_fold_into_one_range():
    ranges = group_consecutive([
        _day(4, "2025-09-23", "National Day", recurring="Y"),
        _day(2, "2025-03-31", "Eid Al-Fitr"),
        _day(1, "2025-03-30", "Eid Al-Fitr"),
        _day(3, "2025-04-01T00:00:00Z", "Eid Al-Fitr"),
    ])
    assert len(ranges) == 2
    eid, national = ranges
    assert (eid.from_date, eid.to_date, eid.number_of_days) == (date(2025, 3, 30), date(2025, 4, 1), 3)
    assert eid.holiday_ids == (1, 2, 3)
    assert eid.holiday_type == HolidayType.FITR
    assert (eid.serial_no, national.serial_no) == (1, 2)
    assert national.is_recurring
    assert national.hijri_year == 1446


def test_gap_or_name_change_starts_new_range():
    ranges = group_consecutive([
        _day(1, "2025-06-05", "Eid Al-Adha"),
        _day(2, "2025-06-07", "Eid Al-Adha"),
        _day(3, "2025-06-08", "Company Day"),
    ])
    assert [(r.from_date.day, r.to_date.day) for r in ranges] == [(5, 5), (7, 7), (8, 8)]


def test_same_name_different_year_not_folded():
    ranges = group_consecutive([
        _day(1, "2025-12-31", "Year End", year=2025),
        _day(2, "2026-01-01", "Year End", year=2026),
    ])
    assert len(ranges) == 2


@pytest.mark.parametrize("holiday", [
    HolidayRange(date(2025, 6, 5), date(2025, 6, 8), "Eid Al-Adha", 2025),
    HolidayRange(date(2025, 2, 22), date(2025, 2, 22), "يوم التأسيس", 2025, is_recurring=True),
    HolidayRange(date(2025, 12, 30), date(2026, 1, 2), "Winter break", 2025, is_paid=False),
])
def test_expand_then_group_restores_range(holiday):
    assert group_consecutive(expand(holiday)) == [holiday]


def test_expand_one_body_per_day():
    bodies = expand(HolidayRange(date(2025, 9, 23), date(2025, 9, 24), "National Day", 2025, is_recurring=True))
    assert bodies == [
        {"holidayDate": "2025-09-23", "holidayName": "National Day", "holidayYear": 2025,
         "isRecurring": "Y", "isActive": "Y", "isPaid": "Y"},
        {"holidayDate": "2025-09-24", "holidayName": "National Day", "holidayYear": 2025,
         "isRecurring": "Y", "isActive": "Y", "isPaid": "Y"},
    ]


def test_expand_reversed_range():
    with pytest.raises(ValidationError) as exc:
        expand(HolidayRange(date(2025, 6, 8), date(2025, 6, 5), "Eid Al-Adha", 2025))
    assert exc.value.field == "to_date"


@pytest.mark.parametrize("name,expected", [
    ("Eid Al-Fitr", HolidayType.FITR),
    ("عيد الأضحى المبارك", HolidayType.ADHA),
    ("Saudi National Day", HolidayType.NATIONAL),
    ("اليوم الوطني", HolidayType.NATIONAL),
    ("Foundation Day", HolidayType.FOUNDATION),
    ("Company Picnic", HolidayType.CUSTOM),
    (None, HolidayType.CUSTOM),
])
def test_classify_holiday(name, expected):
    assert classify_holiday(name) == expected


def test_holiday_names():
    assert holiday_names(HolidayType.FOUNDATION) == ("Foundation Day", "يوم التأسيس")
    assert holiday_names(HolidayType.NATIONAL) == ("National Holiday", "عيد وطني")
    assert holiday_names(HolidayType.NATIONAL)[0] == HolidayType.NATIONAL.label
    assert holiday_names(HolidayType.CUSTOM) == ("Custom Holiday", "إجازة مخصصة")


# ---------- commands ----------
def test_create_national_range_defaults_recurring(session):
    client = FakeClient({("POST", "/holidays"): _counter()})
    created = create_range(session, {"from_date": "2025-09-23", "to_date": "2025-09-24", "holiday_type": "NATIONAL"}, client=client)

    assert created.holiday_ids == (1, 2)
    bodies = [kw["body"] for _, kw in client.calls_of("POST")]
    assert [b["holidayDate"] for b in bodies] == ["2025-09-23", "2025-09-24"]
    assert {b["holidayName"] for b in bodies} == {"National Holiday"}
    assert {b["isRecurring"] for b in bodies} == {"Y"}


def test_create_uses_arabic_name_for_arabic_session():
    client = FakeClient({("POST", "/holidays"): _counter()})
    created = create_range(ConsoleSession(actor_id=1, language="ar"),
                           {"from_date": "2025-03-30", "to_date": "2025-04-01", "holiday_type": "FITR"}, client=client)
    assert created.holiday_name == "عيد الفطر"
    assert not created.is_recurring


def test_create_custom_requires_name(session, fake_client):
    with pytest.raises(ValidationError) as exc:
        create_range(session, {"from_date": "2025-05-01", "to_date": "2025-05-01", "holiday_type": "CUSTOM"}, client=fake_client)
    assert exc.value.field == "holiday_name"
    assert fake_client.calls == []


def test_delete_range_deletes_every_record(session, fake_client):
    holiday = HolidayRange(date(2025, 3, 30), date(2025, 4, 1), "Eid Al-Fitr", 2025, holiday_ids=(1, 2, 3))
    assert delete_range(session, holiday, client=fake_client) == [1, 2, 3]
    assert [p for p, _ in fake_client.calls_of("DELETE")] == ["/holidays/1", "/holidays/2", "/holidays/3"]


def test_delete_range_without_ids(session, fake_client):
    with pytest.raises(RecordNotFound):
        delete_range(session, HolidayRange(date(2025, 1, 1), date(2025, 1, 1), "X", 2025), client=fake_client)


def test_update_range_deletes_then_recreates(session):
    client = FakeClient({("POST", "/holidays"): _counter(10)})
    old = HolidayRange(date(2025, 6, 5), date(2025, 6, 6), "Eid Al-Adha", 2025, holiday_ids=(1, 2))
    new = update_range(session, old, {"from_date": "2025-06-05", "to_date": "2025-06-08", "holiday_type": "ADHA"}, client=client)

    assert [m for m, _, _ in client.calls] == ["DELETE", "DELETE", "POST", "POST", "POST", "POST"]
    assert new.holiday_ids == (10, 11, 12, 13)


def test_update_range_invalid_form_keeps_old_records(session, fake_client):
    old = HolidayRange(date(2025, 6, 5), date(2025, 6, 6), "Eid Al-Adha", 2025, holiday_ids=(1, 2))
    with pytest.raises(ValidationError):
        update_range(session, old, {"from_date": "2025-06-08", "to_date": "2025-06-05", "holiday_type": "ADHA"}, client=fake_client)
    assert fake_client.calls == []


def test_update_range_create_failure_is_not_rolled_back(session):
    client = FakeClient({("POST", "/holidays"): BackendError("down", 503)})
    old = HolidayRange(date(2025, 6, 5), date(2025, 6, 6), "Eid Al-Adha", 2025, holiday_ids=(1, 2))
    with pytest.raises(BackendError):
        update_range(session, old, {"from_date": "2025-06-05", "to_date": "2025-06-06", "holiday_type": "ADHA"}, client=client)
    assert len(client.calls_of("DELETE")) == 2


def test_list_ranges_queries_whole_year(session):
    client = FakeClient({("GET", "/holidays/range"): [_day(1, "2025-02-22", "Foundation Day", recurring="Y")]})
    ranges = list_ranges(session, 2025, client=client)

    assert ranges[0].holiday_type == HolidayType.FOUNDATION
    (path, kw), = client.calls_of("GET")
    assert kw["params"] == {"startDate": "2025-01-01", "endDate": "2025-12-31"}


def test_null_optional_fields_use_defaults():
    ranges = group_consecutive([
        {"holidayId": 1, "holidayDate": "2025-05-01", "holidayName": None, "holidayYear": 2025,
         "isRecurring": None, "isActive": "Y", "isPaid": "N"},
        {"holidayId": 2, "holidayDate": "2025-05-02", "holidayName": None, "holidayYear": 2025,
         "isRecurring": "N", "isActive": None, "isPaid": None},
    ])
    assert len(ranges) == 1
    (holiday,) = ranges
    assert holiday.holiday_ids == (1, 2)
    assert holiday.holiday_name == ""
    assert (holiday.is_recurring, holiday.is_active, holiday.is_paid) == (False, True, False)


def test_null_fields_on_separate_days_still_listed(session):
    client = FakeClient({("GET", "/holidays/range"): [
        {"holidayId": 5, "holidayDate": "2025-11-03", "holidayName": None, "holidayYear": 2025,
         "isRecurring": None, "isActive": None, "isPaid": None},
        {"holidayId": 6, "holidayDate": "2025-11-10", "holidayName": "Company Day", "holidayYear": None,
         "isRecurring": None, "isActive": None, "isPaid": None},
    ]})
    ranges = list_ranges(session, 2025, client=client)
    assert [r.holiday_ids for r in ranges] == [(5,), (6,)]
    assert ranges[1].year == 2025
    assert ranges[0].is_paid and ranges[0].is_active
