import logging
from datetime import date

import pytest

from hr_core.exceptions import BackendError, RecordNotFound
from hr_core.models import RequestKind, RequestStatus
from hr_core.selectors.approval_selector import get_request, list_history, list_pending
from hr_core.tests.fakes import FakeClient


def test_pending_inbox_merges_kinds_and_survives_failures(session, leave_record, caplog):
    client = FakeClient({
        ("GET", "/leaves/pending-approvals"): [leave_record],
        ("GET", "/transfers/pending"): BackendError("boom", 500),
        ("GET", "/allowances/pending"): {
            "content": [{
                "transactionNo": 31, "employeeNo": 101, "typeCode": 2, "amount": 250,
                "transactionDate": "2025-06-02", "requestDate": "2025-06-02", "transStatus": "N",
            }],
            "totalElements": 1, "totalPages": 1,
        },
        ("GET", "/loans/postponement/list"): [],
    })
    with caplog.at_level(logging.WARNING, logger="hr_core"):
        items = list_pending(session, client=client)

    assert [(r.kind, r.request_id) for r in items] == [
        (RequestKind.ALLOWANCE, 31),
        (RequestKind.LEAVE, 11),
    ]
    assert "pending TRANSFER unavailable" in caplog.text


def test_pending_sends_approver_and_postponement_filters(session):
    client = FakeClient()
    list_pending(session, client=client)
    params = {path: kw["params"] for path, kw in client.calls_of("GET")}
    assert params["/allowances/pending"] == {"approverId": 200}
    assert params["/loans/postponement/list"]["transStatus"] == "N"


def test_pending_drops_records_already_final(session, leave_record):
    client = FakeClient({("GET", "/leaves/pending-approvals"): [leave_record, dict(leave_record, leaveId=12, transStatus="A")]})
    items = list_pending(session, client=client)
    assert [r.request_id for r in items] == [11]


def test_history_shows_unknown_status_as_new(session, leave_record):
    client = FakeClient({("GET", "/leaves/list"): {"content": [dict(leave_record, transStatus="Z")]}})
    items = list_history(session, RequestKind.LEAVE, client=client)
    assert items[0].status == RequestStatus.NEW
    assert items[0].request_date == date(2025, 5, 20)


def test_get_request(session, leave_record):
    client = FakeClient({("GET", "/leaves/11"): leave_record})
    req = get_request(session, RequestKind.LEAVE, 11, client=client)
    assert req.payload.number_of_days == 3

    with pytest.raises(RecordNotFound):
        get_request(session, RequestKind.LEAVE, 12, client=client)
