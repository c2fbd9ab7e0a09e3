# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from .enums import RequestKind, RequestStatus, Priority, AllowanceAmountType, TERMINAL_STATUSES


@dataclass(frozen=True)
class LeavePayload:
    from_date: date
    to_date: date
    reason: str = ""

    @property
    def number_of_days(self) -> int:
        return (self.to_date - self.from_date).days + 1


@dataclass(frozen=True)
class TransferPayload:
    from_project_code: int
    to_project_code: int
    transfer_date: date
    reason: str = ""


@dataclass(frozen=True)
class AllowancePayload:
    type_code: int
    amount: Decimal
    transaction_date: date
    amount_type: str = AllowanceAmountType.AMOUNT
    reason: str = ""

    @property
    def is_percentage(self) -> bool:
        return self.amount_type == AllowanceAmountType.PERCENTAGE


@dataclass(frozen=True)
class PostponementPayload:
    loan_id: int
    installment_id: int
    original_due_date: date
    new_month: str  # YYYY-MM
    reason: str = ""

    @property
    def original_month(self) -> str:
        return f"{self.original_due_date.year:04d}-{self.original_due_date.month:02d}"

    @property
    def new_due_date(self) -> date:
        y, m = self.new_month.split("-")
        return date(int(y), int(m), 1)


RequestPayload = Union[LeavePayload, TransferPayload, AllowancePayload, PostponementPayload]


@dataclass(frozen=True)
class ApprovalRequest:
    request_id: int
    requester_id: int
    kind: RequestKind
    status: RequestStatus
    current_level: int = 1
    total_levels: Optional[int] = None
    next_approver_id: Optional[int] = None
    next_approver_name: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    request_date: Optional[date] = None
    requester_name: Optional[str] = None
    approved_by: Optional[int] = None
    approved_by_name: Optional[str] = None
    approval_date: Optional[date] = None
    notes: Optional[str] = None
    payload: Optional[RequestPayload] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def with_status(self, status: RequestStatus, level: Optional[int] = None) -> "ApprovalRequest":
        return replace(self, status=status, current_level=level if level is not None else self.current_level)
