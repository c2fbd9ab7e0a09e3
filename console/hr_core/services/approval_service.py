# -*- coding: utf-8 -*-
"""
Service cho approval workflow (LEAVE / TRANSFER / ALLOWANCE / LOAN_POSTPONEMENT):
- Validate payload theo kind trước khi gọi backend
- submit(): tạo request ở trạng thái NEW
- decide(): approve / reject, kiểm tra terminal + người duyệt
- Không có cancel: request đã gửi chỉ có thể approve hoặc reject
- Không cập nhật state lạc quan; caller luôn re-fetch sau mutation
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.exceptions import (
    AlreadyFinal, BackendError, NotAuthorized, RecordNotFound,
)
from hr_core.mappers.approval_mapper import to_backend_body, to_request
from hr_core.models import ApprovalRequest, ConsoleSession, Decision, RequestKind
from hr_core.repositories import approval_repository as repo
from hr_core.serializers.approval_serializer import (
    LeaveSubmitSerializer,
    TransferSubmitSerializer,
    AllowanceSubmitSerializer,
    PostponementSubmitSerializer,
)
from hr_core.services.workflow import can_transition, is_terminal, next_state
from hr_core.utils.validation import first_error

logger = logging.getLogger(__name__)

SUBMIT_SERIALIZERS = {
    RequestKind.LEAVE: LeaveSubmitSerializer,
    RequestKind.TRANSFER: TransferSubmitSerializer,
    RequestKind.ALLOWANCE: AllowanceSubmitSerializer,
    RequestKind.LOAN_POSTPONEMENT: PostponementSubmitSerializer,
}


# ====== Validation ======
def validate_payload(kind: str, data: Dict[str, Any]):
    ser = SUBMIT_SERIALIZERS[RequestKind(kind)](data=data)
    if not ser.is_valid():
        raise first_error(ser.errors)
    return ser.to_payload()


# ====== Permissions (UI hint, backend enforces) ======
def authorization_error(req: ApprovalRequest, actor_id: int) -> Optional[str]:
    if req.requester_id and actor_id == req.requester_id:
        return "requester cannot decide their own request"
    if req.next_approver_id is not None and actor_id != req.next_approver_id:
        return f"designated approver is #{req.next_approver_id}"
    return None


def can_decide(req: ApprovalRequest, actor_id: int) -> bool:
    """Whether approve/reject buttons should be enabled for this actor."""
    return not is_terminal(req.status) and authorization_error(req, actor_id) is None


# ====== Commands ======
def submit(
    session: ConsoleSession,
    kind: str,
    data: Dict[str, Any],
    *,
    requester_id: Optional[int] = None,
    client: Optional[BackendClient] = None,
) -> ApprovalRequest:
    payload = validate_payload(kind, data)
    requester = requester_id or session.actor_id
    client = client or BackendClient(session)

    body = to_backend_body(kind, payload, requester)
    resp = repo.submit(client, kind, body)
    if not isinstance(resp, dict):
        raise BackendError(f"Backend returned no record for submitted {kind} request", 0)

    req = to_request(resp, kind, strict=True)
    logger.info("[approval] %s #%s submitted by #%s", kind, req.request_id, requester)
    return req


def decide(
    session: ConsoleSession,
    kind: str,
    request_id: int,
    decision: str,
    note: Optional[str] = None,
    *,
    client: Optional[BackendClient] = None,
) -> ApprovalRequest:
    decision = Decision(decision)
    client = client or BackendClient(session)
    actor_id = session.actor_id

    record = repo.get_by_id(client, kind, request_id)
    if not isinstance(record, dict):
        raise RecordNotFound(f"{kind} request #{request_id} not found")
    current = to_request(record, kind, strict=True)

    # raises AlreadyFinal for APPROVED / REJECTED
    expected, _level = next_state(current, decision)

    reason = authorization_error(current, actor_id)
    if reason:
        raise NotAuthorized(request_id, actor_id, reason)

    try:
        if decision == Decision.APPROVE:
            resp = repo.approve(client, kind, request_id, actor_id, note)
        else:
            resp = repo.reject(client, kind, request_id, actor_id, note)
    except BackendError as e:
        # không retry; lỗi quyền / xung đột là kết thúc cho lần thao tác này
        if e.status == 403:
            raise NotAuthorized(request_id, actor_id, e.message) from e
        if e.status == 409:
            raise AlreadyFinal(request_id, current.status) from e
        raise

    if not isinstance(resp, dict):
        resp = repo.get_by_id(client, kind, request_id)
        if not isinstance(resp, dict):
            raise RecordNotFound(f"{kind} request #{request_id} not found after decision")
    result = to_request(resp, kind, strict=True)

    if result.status != current.status and not can_transition(current.status, result.status):
        logger.warning(
            "[approval] backend moved %s #%s %s -> %s", kind, request_id, current.status, result.status,
        )
    if decision == Decision.REJECT and result.status != expected:
        logger.warning("[approval] %s #%s rejected but backend reports %s", kind, request_id, result.status)

    logger.info(
        "[approval] %s #%s %s by #%s: %s -> %s",
        kind, request_id, decision, actor_id, current.status, result.status,
    )
    return result
