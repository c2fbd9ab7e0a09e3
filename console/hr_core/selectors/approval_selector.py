# -*- coding: utf-8 -*-
"""
Selector cho approval requests (read path):
- Inbox gộp pending của cả 4 kind; kind nào lỗi → log + bỏ qua, không làm hỏng inbox
- Status đi qua normalize_for_display (không raise)
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.exceptions import BackendError, RecordNotFound
from hr_core.mappers.approval_mapper import to_request
from hr_core.models import ApprovalRequest, ConsoleSession, RequestKind
from hr_core.repositories import approval_repository as repo

logger = logging.getLogger(__name__)


def _by_date_desc(items: List[ApprovalRequest]) -> List[ApprovalRequest]:
    return sorted(items, key=lambda r: r.request_date or date.min, reverse=True)


def list_pending_of_kind(client: BackendClient, kind: str, approver_id: int) -> List[ApprovalRequest]:
    records = repo.list_pending(client, kind, approver_id)
    return [r for r in (to_request(rec, kind) for rec in records) if not r.is_terminal]


def list_pending(session: ConsoleSession, *, client: Optional[BackendClient] = None) -> List[ApprovalRequest]:
    client = client or BackendClient(session)
    out: List[ApprovalRequest] = []
    for kind in RequestKind:
        try:
            out.extend(list_pending_of_kind(client, kind, session.actor_id))
        except BackendError as e:
            logger.warning("[approval] pending %s unavailable (status=%s): %s", kind, e.status, e.message)
    return _by_date_desc(out)


def list_history(
    session: ConsoleSession,
    kind: Optional[str] = None,
    *,
    params: Optional[Dict[str, Any]] = None,
    client: Optional[BackendClient] = None,
) -> List[ApprovalRequest]:
    client = client or BackendClient(session)
    kinds = [RequestKind(kind)] if kind else list(RequestKind)
    out: List[ApprovalRequest] = []
    for k in kinds:
        out.extend(to_request(rec, k) for rec in repo.list_all(client, k, params))
    return _by_date_desc(out)


def get_request(
    session: ConsoleSession,
    kind: str,
    request_id: int,
    *,
    client: Optional[BackendClient] = None,
) -> ApprovalRequest:
    client = client or BackendClient(session)
    record = repo.get_by_id(client, kind, request_id)
    if not isinstance(record, dict):
        raise RecordNotFound(f"{kind} request #{request_id} not found")
    return to_request(record, kind)
