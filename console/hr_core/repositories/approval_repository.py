# -*- coding: utf-8 -*-
"""
Repository cho approval requests (thuần I/O qua BackendClient):
- Bảng route theo từng kind
- KHÔNG chứa rule nghiệp vụ, service quyết định.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from django.conf import settings

from hr_core.clients.backend_client import BackendClient
from hr_core.models import RequestKind
from hr_core.utils.pagination import unwrap_list

# kind -> endpoint paths; "{id}" is the backend request id
ROUTES: Dict[str, Dict[str, str]] = {
    RequestKind.LEAVE: {
        "submit": "/leaves/submit",
        "detail": "/leaves/{id}",
        "approve": "/leaves/{id}/approve",
        "reject": "/leaves/{id}/reject",
        "list": "/leaves/list",
        "pending": "/leaves/pending-approvals",
    },
    RequestKind.TRANSFER: {
        "submit": "/transfers",
        "detail": "/transfers/{id}",
        "approve": "/transfers/{id}/approve",
        "reject": "/transfers/{id}/reject",
        "list": "/transfers",
        "pending": "/transfers/pending",
    },
    RequestKind.ALLOWANCE: {
        "submit": "/allowances",
        "detail": "/allowances/{id}",
        "approve": "/allowances/{id}/approve",
        "reject": "/allowances/{id}/reject",
        "list": "/allowances/list",
        "pending": "/allowances/pending",
    },
    RequestKind.LOAN_POSTPONEMENT: {
        "submit": "/loans/postponement/submit",
        "detail": "/loans/postponement/{id}",
        "approve": "/loans/postponement/{id}/approve",
        "reject": "/loans/postponement/{id}/reject",
        "list": "/loans/postponement/list",
        "pending": "/loans/postponement/list",
    },
}


def _path(kind: str, action: str, request_id: Optional[int] = None) -> str:
    path = ROUTES[RequestKind(kind)][action]
    return path.format(id=request_id) if request_id is not None else path


# ============================
# Reads
# ============================
def get_by_id(client: BackendClient, kind: str, request_id: int) -> Optional[Dict[str, Any]]:
    return client.get(_path(kind, "detail", request_id))


def list_all(client: BackendClient, kind: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    query = {"size": getattr(settings, "HR_BACKEND_LIST_SIZE", 1000)}
    query.update(params or {})
    return unwrap_list(client.get(_path(kind, "list"), params=query))


def list_pending(client: BackendClient, kind: str, approver_id: Optional[int] = None) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {}
    if kind == RequestKind.ALLOWANCE:
        params["approverId"] = approver_id
    elif kind == RequestKind.LOAN_POSTPONEMENT:
        params.update({"transStatus": "N", "size": getattr(settings, "HR_BACKEND_LIST_SIZE", 1000)})
    return unwrap_list(client.get(_path(kind, "pending"), params=params or None))


# ============================
# Mutations
# ============================
def submit(client: BackendClient, kind: str, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return client.post(_path(kind, "submit"), body)


def approve(client: BackendClient, kind: str, request_id: int, approver_id: int, note: Optional[str] = None) -> Optional[Dict[str, Any]]:
    body: Dict[str, Any] = {"approverNo": approver_id}
    if note:
        body["notes"] = note
    return client.post(_path(kind, "approve", request_id), body)


def reject(client: BackendClient, kind: str, request_id: int, approver_id: int, reason: Optional[str] = None) -> Optional[Dict[str, Any]]:
    body: Dict[str, Any] = {"approverNo": approver_id, "rejectionReason": reason or ""}
    if kind == RequestKind.TRANSFER:
        body["reason"] = reason or ""
    return client.post(_path(kind, "reject", request_id), body)
