# -*- coding: utf-8 -*-
"""
Error taxonomy của core:
- ValidationError: input sai, bắt trước khi gọi backend (luôn có field)
- UnrecognizedStatus: backend trả về mã trạng thái lạ
- AlreadyFinal / NotAuthorized: vi phạm quy tắc workflow
- DuplicateTransactionType: guard phía UI khi tạo breakdown trùng mã
- RecordNotFound: không resolve được id backend khi xoá
- BackendError: lỗi transport / HTTP từ backend
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional


class HrCoreError(Exception):
    """Base class for every error raised by hr_core."""


class ValidationError(HrCoreError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class UnrecognizedStatus(HrCoreError):
    def __init__(self, raw: Any, kind: Optional[str] = None):
        super().__init__(f"Unrecognized status {raw!r}" + (f" for {kind}" if kind else ""))
        self.raw = raw
        self.kind = kind


class AlreadyFinal(HrCoreError):
    def __init__(self, request_id: Any, status: str):
        super().__init__(f"Request #{request_id} is already {status}")
        self.request_id = request_id
        self.status = status


class NotAuthorized(HrCoreError):
    def __init__(self, request_id: Any, actor_id: Any, reason: str = ""):
        msg = f"Actor #{actor_id} may not act on request #{request_id}"
        super().__init__(f"{msg}: {reason}" if reason else msg)
        self.request_id = request_id
        self.actor_id = actor_id
        self.reason = reason


class DuplicateTransactionType(HrCoreError):
    def __init__(self, transaction_code: int):
        super().__init__(f"Transaction type {transaction_code} already exists; use edit instead")
        self.transaction_code = transaction_code


class RecordNotFound(HrCoreError):
    pass


class BackendError(HrCoreError):
    """HTTP or network failure talking to the HR backend. status=0 means no response."""

    def __init__(
        self,
        message: str,
        status: int = 0,
        errors: Optional[Dict[str, List[str]]] = None,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors or {}
        self.data = data
