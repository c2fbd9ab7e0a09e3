import pytest

from hr_core.exceptions import AlreadyFinal
from hr_core.models import ApprovalRequest, Decision, RequestKind, RequestStatus
from hr_core.services.workflow import apply_decision, can_transition, next_state

ORDER = {
    RequestStatus.NEW: 0,
    RequestStatus.IN_PROCESS: 1,
    RequestStatus.APPROVED: 2,
    RequestStatus.REJECTED: 2,
}


def _req(status=RequestStatus.NEW, level=1, total=None):
    return ApprovalRequest(
        request_id=1, requester_id=100, kind=RequestKind.LEAVE,
        status=status, current_level=level, total_levels=total,
    )


def test_two_level_chain_needs_both_approvals():
    req = _req(total=2)
    after_first = apply_decision(req, Decision.APPROVE)
    assert after_first.status == RequestStatus.IN_PROCESS
    assert after_first.current_level == 2

    after_second = apply_decision(after_first, Decision.APPROVE)
    assert after_second.status == RequestStatus.APPROVED
    # request gốc không bị đổi
    assert req.status == RequestStatus.NEW


def test_reject_is_final_at_any_level():
    assert next_state(_req(total=3), Decision.REJECT) == (RequestStatus.REJECTED, 1)
    assert next_state(_req(RequestStatus.IN_PROCESS, 2, 3), Decision.REJECT) == (RequestStatus.REJECTED, 2)


def test_unknown_chain_length_approves_directly():
    assert next_state(_req(), Decision.APPROVE) == (RequestStatus.APPROVED, 1)


@pytest.mark.parametrize("status", [RequestStatus.APPROVED, RequestStatus.REJECTED])
@pytest.mark.parametrize("decision", [Decision.APPROVE, Decision.REJECT])
def test_terminal_requests_cannot_be_decided(status, decision):
    with pytest.raises(AlreadyFinal):
        next_state(_req(status), decision)


def test_status_never_moves_backwards():
    req = _req(total=3)
    seen = [req.status]
    for decision in (Decision.APPROVE, Decision.APPROVE, Decision.APPROVE):
        req = apply_decision(req, decision)
        seen.append(req.status)
    assert [ORDER[s] for s in seen] == sorted(ORDER[s] for s in seen)
    assert seen[-1] == RequestStatus.APPROVED


def test_transition_table():
    assert can_transition(RequestStatus.NEW, RequestStatus.IN_PROCESS)
    assert can_transition(RequestStatus.IN_PROCESS, RequestStatus.APPROVED)
    assert not can_transition(RequestStatus.APPROVED, RequestStatus.REJECTED)
    assert not can_transition(RequestStatus.IN_PROCESS, RequestStatus.NEW)
