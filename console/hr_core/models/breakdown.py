from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SalaryBreakdownRow:
    """One transaction type with its Saudi and foreign percentages (0-100 scale)."""
    transaction_code: int
    transaction_name: str = ""
    saudi_percentage: Optional[float] = 0.0
    non_saudi_percentage: Optional[float] = 0.0
    saudi_ser_no: Optional[int] = None
    foreign_ser_no: Optional[int] = None
    is_active: bool = True

    @property
    def record_id(self) -> int:
        return self.saudi_ser_no or self.foreign_ser_no or self.transaction_code

    @property
    def ser_nos(self) -> list:
        return [x for x in (self.saudi_ser_no, self.foreign_ser_no) if x]
