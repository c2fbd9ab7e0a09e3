# -*- coding: utf-8 -*-
"""
Status Normalizer: lớp dịch duy nhất giữa từ vựng trạng thái của backend và RequestStatus.
- Write path: normalize() → raise UnrecognizedStatus nếu mã lạ
- Read/display path: normalize_for_display() → mặc định NEW + log warning
Downstream KHÔNG được so sánh trực tiếp với chuỗi status thô.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

from hr_core.exceptions import UnrecognizedStatus
from hr_core.models import RequestKind, RequestStatus, Priority

logger = logging.getLogger(__name__)

STATUS_MAP: Dict[str, RequestStatus] = {
    "N": RequestStatus.NEW,
    "NEW": RequestStatus.NEW,
    "PENDING": RequestStatus.NEW,
    "P": RequestStatus.IN_PROCESS,
    "INPROCESS": RequestStatus.IN_PROCESS,
    "A": RequestStatus.APPROVED,
    "APPROVED": RequestStatus.APPROVED,
    "R": RequestStatus.REJECTED,
    "REJECTED": RequestStatus.REJECTED,
}

PRIORITY_MAP: Dict[str, Priority] = {
    "H": Priority.HIGH, "HIGH": Priority.HIGH,
    "M": Priority.MEDIUM, "MEDIUM": Priority.MEDIUM,
    "L": Priority.LOW, "LOW": Priority.LOW,
}

# record fields carrying the status, in lookup order
STATUS_FIELDS = ("transStatus", "status")


def normalize(raw: Any, kind: Optional[str] = None) -> RequestStatus:
    if isinstance(raw, str) and raw in STATUS_MAP:
        return STATUS_MAP[raw]
    raise UnrecognizedStatus(raw, kind)


def normalize_for_display(raw: Any, kind: Optional[str] = None) -> RequestStatus:
    try:
        return normalize(raw, kind)
    except UnrecognizedStatus:
        logger.warning("[status] unrecognized status %r for %s; showing as NEW", raw, kind or "-")
        return RequestStatus.NEW


def normalize_priority(raw: Any) -> Priority:
    return PRIORITY_MAP.get(str(raw).strip().upper(), Priority.MEDIUM) if raw else Priority.MEDIUM


def raw_status_of(record: Mapping[str, Any]) -> Any:
    for f in STATUS_FIELDS:
        value = record.get(f)
        if value not in (None, ""):
            return value
    return None


def _has_recorded_approval(record: Mapping[str, Any], kind: str) -> bool:
    if kind == RequestKind.LOAN_POSTPONEMENT:
        return record.get("nextApproval") is not None
    try:
        return int(record.get("nextAppLevel") or record.get("nextLevel") or 1) > 1
    except (TypeError, ValueError):
        return False


def resolve_status(record: Mapping[str, Any], kind: str, *, strict: bool = False) -> RequestStatus:
    """
    Canonical status of a backend record.
    NEW is promoted to IN_PROCESS once the record shows an approval already recorded.
    strict=True on write paths (unknown codes raise), False on read paths.
    """
    raw = raw_status_of(record)
    if raw is None:
        if strict:
            raise UnrecognizedStatus(raw, kind)
        status = RequestStatus.NEW
    else:
        status = normalize(raw, kind) if strict else normalize_for_display(raw, kind)
    if status == RequestStatus.NEW and _has_recorded_approval(record, kind):
        return RequestStatus.IN_PROCESS
    return status
