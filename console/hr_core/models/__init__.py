# Load tất cả domain type vào namespace hr_core.models
from .enums import (
    RequestKind, RequestStatus, TERMINAL_STATUSES, Decision, Priority,
    EmployeeCategory, AllowanceAmountType, HolidayType,
)
from .session import ConsoleSession
from .approval import (
    ApprovalRequest, LeavePayload, TransferPayload, AllowancePayload, PostponementPayload,
)
from .breakdown import SalaryBreakdownRow
from .holiday import HolidayRange, HIJRI_YEAR_OFFSET, classify_holiday_name

__all__ = [
    "RequestKind", "RequestStatus", "TERMINAL_STATUSES", "Decision", "Priority",
    "EmployeeCategory", "AllowanceAmountType", "HolidayType",
    "ConsoleSession",
    "ApprovalRequest", "LeavePayload", "TransferPayload", "AllowancePayload", "PostponementPayload",
    "SalaryBreakdownRow",
    "HolidayRange", "HIJRI_YEAR_OFFSET", "classify_holiday_name",
]
