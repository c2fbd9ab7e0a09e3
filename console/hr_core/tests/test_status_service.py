import logging

import pytest

from hr_core.exceptions import UnrecognizedStatus
from hr_core.models import Priority, RequestKind, RequestStatus
from hr_core.services.status_service import (
    normalize, normalize_for_display, normalize_priority, resolve_status,
)


@pytest.mark.parametrize("raw,expected", [
    ("N", RequestStatus.NEW),
    ("NEW", RequestStatus.NEW),
    ("PENDING", RequestStatus.NEW),
    ("P", RequestStatus.IN_PROCESS),
    ("INPROCESS", RequestStatus.IN_PROCESS),
    ("A", RequestStatus.APPROVED),
    ("APPROVED", RequestStatus.APPROVED),
    ("R", RequestStatus.REJECTED),
    ("REJECTED", RequestStatus.REJECTED),
])
def test_normalize_known_codes(raw, expected):
    assert normalize(raw, RequestKind.LEAVE) == expected


@pytest.mark.parametrize("raw", ["approved", "X", "", None, 1])
def test_normalize_unknown_raises(raw):
    with pytest.raises(UnrecognizedStatus):
        normalize(raw)


def test_display_path_defaults_to_new_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="hr_core"):
        assert normalize_for_display("Q", RequestKind.TRANSFER) == RequestStatus.NEW
    assert "unrecognized status 'Q'" in caplog.text


def test_resolve_status_reads_trans_status_then_status():
    assert resolve_status({"transStatus": "A", "status": "R"}, RequestKind.LEAVE) == RequestStatus.APPROVED
    assert resolve_status({"status": "R"}, RequestKind.LEAVE) == RequestStatus.REJECTED


def test_resolve_status_promotes_new_after_first_approval():
    rec = {"transStatus": "N", "nextAppLevel": 2}
    assert resolve_status(rec, RequestKind.ALLOWANCE) == RequestStatus.IN_PROCESS
    assert resolve_status({"transStatus": "N", "nextAppLevel": 1}, RequestKind.ALLOWANCE) == RequestStatus.NEW


def test_resolve_status_postponement_uses_next_approval():
    assert resolve_status({"transStatus": "N", "nextApproval": 300}, RequestKind.LOAN_POSTPONEMENT) == RequestStatus.IN_PROCESS
    assert resolve_status({"transStatus": "N", "nextApproval": None}, RequestKind.LOAN_POSTPONEMENT) == RequestStatus.NEW


def test_resolve_status_strict_missing_status():
    with pytest.raises(UnrecognizedStatus):
        resolve_status({}, RequestKind.LEAVE, strict=True)
    assert resolve_status({}, RequestKind.LEAVE) == RequestStatus.NEW


def test_terminal_status_never_promoted():
    assert resolve_status({"transStatus": "R", "nextAppLevel": 3}, RequestKind.LEAVE) == RequestStatus.REJECTED


@pytest.mark.parametrize("raw,expected", [
    ("H", Priority.HIGH), ("high", Priority.HIGH), ("L", Priority.LOW),
    ("M", Priority.MEDIUM), (None, Priority.MEDIUM), ("??", Priority.MEDIUM),
])
def test_normalize_priority(raw, expected):
    assert normalize_priority(raw) == expected
