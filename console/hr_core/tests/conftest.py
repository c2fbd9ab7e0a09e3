import pytest

from hr_core.models import ConsoleSession
from hr_core.tests.fakes import FakeClient


@pytest.fixture
def session():
    return ConsoleSession(actor_id=200, role="MANAGER", language="en", access_token=" eyJhbGci.payload.sig \n")


@pytest.fixture
def requester_session():
    return ConsoleSession(actor_id=100, role="EMPLOYEE", language="en", access_token="tok")


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def leave_record():
    # đơn nghỉ phép vừa gửi, chờ manager #200 duyệt cấp 1
    return {
        "leaveId": 11,
        "employeeNo": 100,
        "employeeName": "Ahmed Ali",
        "leaveFromDate": "2025-06-01",
        "leaveToDate": "2025-06-03",
        "leaveReason": "family",
        "transStatus": "N",
        "nextAppLevel": 1,
        "nextApproval": 200,
        "requestDate": "2025-05-20T08:00:00Z",
    }
