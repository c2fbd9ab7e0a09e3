# -*- coding: utf-8 -*-
"""
Mapper giữa backend record (mỗi kind một shape riêng) và ApprovalRequest.
- to_request(): record → ApprovalRequest (status đi qua status_service)
- to_backend_body(): payload đã validate → body gửi lên backend
"""
from __future__ import annotations
import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from hr_core.models import (
    ApprovalRequest, RequestKind, AllowanceAmountType,
    LeavePayload, TransferPayload, AllowancePayload, PostponementPayload,
)
from hr_core.services.status_service import resolve_status, normalize_priority
from hr_core.utils.dates import as_date, as_date_or_none, format_month, to_iso

logger = logging.getLogger(__name__)


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        v = record.get(k)
        if v not in (None, ""):
            return v
    return None


def _int_or_none(v: Any) -> Optional[int]:
    try:
        return int(v) if v not in (None, "") else None
    except (TypeError, ValueError):
        return None


# per kind: id keys, requester-name keys, request-date keys, note keys
_KEYS = {
    RequestKind.LEAVE: {
        "id": ("leaveId", "requestId"),
        "name": ("employeeName",),
        "date": ("requestDate", "createdDate"),
        "notes": ("leaveReason", "rejectionReason"),
    },
    RequestKind.TRANSFER: {
        "id": ("transferNo", "requestId"),
        "name": ("requestedByName", "employeeName"),
        "date": ("requestDate", "transferDate"),
        "notes": ("transferReason", "remarks", "rejectionReason"),
    },
    RequestKind.ALLOWANCE: {
        "id": ("transactionNo", "transactionId", "requestId"),
        "name": ("employeeName",),
        "date": ("requestDate", "createdDate", "transactionDate"),
        "notes": ("notes", "rejectionReason"),
    },
    RequestKind.LOAN_POSTPONEMENT: {
        "id": ("requestId",),
        "name": ("employeeName",),
        "date": ("requestDate",),
        "notes": ("postponementReason", "rejectionReason"),
    },
}


# ============================
# Payload readers
# ============================
def _leave_payload(r: Mapping[str, Any]) -> LeavePayload:
    return LeavePayload(
        from_date=as_date(r.get("leaveFromDate")),
        to_date=as_date(r.get("leaveToDate")),
        reason=r.get("leaveReason") or "",
    )


def _transfer_payload(r: Mapping[str, Any]) -> TransferPayload:
    return TransferPayload(
        from_project_code=int(r.get("fromProjectCode")),
        to_project_code=int(r.get("toProjectCode")),
        transfer_date=as_date(r.get("transferDate")),
        reason=_first(r, "transferReason", "remarks") or "",
    )


def _allowance_payload(r: Mapping[str, Any]) -> AllowancePayload:
    return AllowancePayload(
        type_code=int(r.get("typeCode")),
        amount=Decimal(str(_first(r, "amount", "transactionAmount", "allowanceAmount"))),
        transaction_date=as_date(r.get("transactionDate")),
        amount_type=r.get("amountType") or AllowanceAmountType.AMOUNT,
        reason=r.get("notes") or "",
    )


def _postponement_payload(r: Mapping[str, Any]) -> PostponementPayload:
    new_month = r.get("newMonth") or format_month(as_date(r.get("newDueDate")))
    return PostponementPayload(
        loan_id=int(r.get("loanId")),
        installment_id=int(r.get("installmentId")),
        original_due_date=as_date(r.get("currentDueDate")),
        new_month=new_month,
        reason=r.get("postponementReason") or "",
    )


_PAYLOAD_READERS = {
    RequestKind.LEAVE: _leave_payload,
    RequestKind.TRANSFER: _transfer_payload,
    RequestKind.ALLOWANCE: _allowance_payload,
    RequestKind.LOAN_POSTPONEMENT: _postponement_payload,
}


def read_payload(record: Mapping[str, Any], kind: str):
    try:
        return _PAYLOAD_READERS[RequestKind(kind)](record)
    except (TypeError, ValueError, ArithmeticError) as ex:
        logger.warning("[approval] cannot read %s payload: %s", kind, ex)
        return None


# ============================
# Record → domain
# ============================
def to_request(record: Mapping[str, Any], kind: str, *, strict: bool = False) -> ApprovalRequest:
    kind = RequestKind(kind)
    keys = _KEYS[kind]
    return ApprovalRequest(
        request_id=_int_or_none(_first(record, *keys["id"])) or 0,
        requester_id=_int_or_none(_first(record, "employeeNo", "employeeId", "requestedBy")) or 0,
        kind=kind,
        status=resolve_status(record, kind, strict=strict),
        current_level=_int_or_none(_first(record, "nextAppLevel", "nextLevel")) or 1,
        total_levels=_int_or_none(_first(record, "totalLevels", "approvalLevels")),
        next_approver_id=_int_or_none(record.get("nextApproval")),
        next_approver_name=_first(record, "nextApproverName", "nextApprovalName", "nextAppLevelName"),
        priority=normalize_priority(_first(record, "priority", "requestPriority")),
        request_date=as_date_or_none(_first(record, *keys["date"])),
        requester_name=_first(record, *keys["name"]),
        approved_by=_int_or_none(record.get("approvedBy")),
        approved_by_name=_first(record, "approvedByName", "approverName"),
        approval_date=as_date_or_none(_first(record, "approvedDate", "approvalDate")),
        notes=_first(record, *keys["notes"]),
        payload=read_payload(record, kind),
        raw=dict(record),
    )


# ============================
# Domain → backend body
# ============================
def to_backend_body(kind: str, payload, requester_id: int) -> Dict[str, Any]:
    kind = RequestKind(kind)
    if kind == RequestKind.LEAVE:
        return {
            "employeeNo": requester_id,
            "leaveFromDate": to_iso(payload.from_date),
            "leaveToDate": to_iso(payload.to_date),
            "leaveReason": payload.reason,
        }
    if kind == RequestKind.TRANSFER:
        return {
            "employeeNo": requester_id,
            "fromProjectCode": payload.from_project_code,
            "toProjectCode": payload.to_project_code,
            "transferDate": to_iso(payload.transfer_date),
            "transferReason": payload.reason,
        }
    if kind == RequestKind.ALLOWANCE:
        return {
            "employeeNo": requester_id,
            "typeCode": payload.type_code,
            "transactionDate": to_iso(payload.transaction_date),
            "amount": float(payload.amount),
            "amountType": str(payload.amount_type),
            "notes": payload.reason,
        }
    return {
        "employeeNo": requester_id,
        "loanId": payload.loan_id,
        "installmentId": payload.installment_id,
        "newDueDate": to_iso(payload.new_due_date),
        "postponementReason": payload.reason,
    }
