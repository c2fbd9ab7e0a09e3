from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from .enums import HolidayType

# approximate Gregorian -> Hijri year offset used for display
HIJRI_YEAR_OFFSET = 579

# (type, english keyword, arabic keyword)
_NAME_KEYWORDS = (
    (HolidayType.FITR, "fitr", "عيد الفطر"),
    (HolidayType.ADHA, "adha", "عيد الأضحى"),
    (HolidayType.FOUNDATION, "foundation", "يوم التأسيس"),
    (HolidayType.NATIONAL, "national", "وطني"),
)


def classify_holiday_name(name: Optional[str]) -> HolidayType:
    lowered = (name or "").lower()
    for htype, en, ar in _NAME_KEYWORDS:
        if en in lowered or ar in lowered:
            return htype
    return HolidayType.CUSTOM


@dataclass(frozen=True)
class HolidayRange:
    from_date: date
    to_date: date
    holiday_name: str
    year: int
    holiday_ids: Tuple[int, ...] = field(default=(), compare=False)
    is_paid: bool = True
    is_recurring: bool = False
    is_active: bool = True
    serial_no: Optional[int] = field(default=None, compare=False)

    @property
    def number_of_days(self) -> int:
        return (self.to_date - self.from_date).days + 1

    @property
    def hijri_year(self) -> int:
        return self.year - HIJRI_YEAR_OFFSET

    @property
    def holiday_type(self) -> HolidayType:
        return classify_holiday_name(self.holiday_name)
