from __future__ import annotations
from typing import Tuple

from hr_core.exceptions import AlreadyFinal
from hr_core.models import ApprovalRequest, Decision, RequestStatus, TERMINAL_STATUSES

VALID_STATUS_TRANSITIONS = {
    RequestStatus.NEW: {RequestStatus.IN_PROCESS, RequestStatus.APPROVED, RequestStatus.REJECTED},
    RequestStatus.IN_PROCESS: {RequestStatus.IN_PROCESS, RequestStatus.APPROVED, RequestStatus.REJECTED},
    RequestStatus.APPROVED: set(),
    RequestStatus.REJECTED: set(),
}


def can_transition(current, target) -> bool:
    return target in VALID_STATUS_TRANSITIONS.get(current, set())


def is_terminal(status) -> bool:
    return status in TERMINAL_STATUSES


def levels_remaining(req: ApprovalRequest) -> int:
    """Approval levels still needed after the current one; 0 when the chain length is unknown."""
    if not req.total_levels:
        return 0
    return max(req.total_levels - req.current_level, 0)


def next_state(req: ApprovalRequest, decision: str) -> Tuple[RequestStatus, int]:
    """
    (status, level) after `decision` at the request's current level.
    REJECT is final at any level; APPROVE advances while levels remain.
    """
    if is_terminal(req.status):
        raise AlreadyFinal(req.request_id, req.status)
    decision = Decision(decision)
    if decision == Decision.REJECT:
        return RequestStatus.REJECTED, req.current_level
    if levels_remaining(req) > 0:
        return RequestStatus.IN_PROCESS, req.current_level + 1
    return RequestStatus.APPROVED, req.current_level


def apply_decision(req: ApprovalRequest, decision: str) -> ApprovalRequest:
    status, level = next_state(req, decision)
    return req.with_status(status, level)
