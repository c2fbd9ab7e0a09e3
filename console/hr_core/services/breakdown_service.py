# -*- coding: utf-8 -*-
"""
Breakdown Consolidation Engine:
- Backend lưu 1 record / (transTypeCode, employeeCategory), salaryPercentage dạng 0-1
- Màn hình làm việc với 1 row / transTypeCode, có cả % Saudi và % foreign (thang 0-100)
- Tổng % Saudi của các row active không được vượt 100 (+epsilon); % foreign không giới hạn
"""
from __future__ import annotations
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from django.conf import settings

from hr_core.clients.backend_client import BackendClient
from hr_core.exceptions import DuplicateTransactionType, RecordNotFound, ValidationError
from hr_core.models import ConsoleSession, EmployeeCategory, SalaryBreakdownRow
from hr_core.repositories import breakdown_repository as repo
from hr_core.serializers.breakdown_serializer import BreakdownRecordSerializer, BreakdownRowSerializer
from hr_core.utils.validation import first_error

logger = logging.getLogger(__name__)

SAUDI = EmployeeCategory.SAUDI.value
FOREIGN = EmployeeCategory.FOREIGN.value

RowLike = Union[SalaryBreakdownRow, Mapping[str, Any]]


def _ceiling() -> float:
    return float(getattr(settings, "SAUDI_PERCENTAGE_CEILING", 100.01))


def to_percent(fraction: float) -> float:
    return round(float(fraction) * 100, 2)


def to_fraction(percent: float) -> float:
    return round(float(percent) / 100, 4)


def _as_mapping(row: RowLike) -> Mapping[str, Any]:
    return asdict(row) if is_dataclass(row) else row


# ============================
# merge / split
# ============================
def _clean_records(records: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    out = []
    for r in records or []:
        ser = BreakdownRecordSerializer(data=r)
        if ser.is_valid():
            data = dict(ser.validated_data)
            data["isDeleted"] = data.get("isDeleted") or "N"
            out.append(data)
        else:
            logger.warning("[breakdown] skip malformed record %r: %s", r, dict(ser.errors))
    return out


def merge(records: Iterable[Mapping[str, Any]]) -> List[SalaryBreakdownRow]:
    """One row per transTypeCode, in order of first appearance."""
    groups: Dict[int, Dict[str, Any]] = {}
    for rec in _clean_records(records):
        code = rec["transTypeCode"]
        g = groups.setdefault(code, {"S": None, "F": None, "name": None, "active": False})
        if not g["name"] and rec.get("transTypeName"):
            g["name"] = rec["transTypeName"]
        if rec.get("isDeleted") == "Y":
            continue
        g["active"] = True
        g[rec["employeeCategory"]] = rec

    rows = []
    for code, g in groups.items():
        saudi, foreign = g[SAUDI], g[FOREIGN]
        rows.append(SalaryBreakdownRow(
            transaction_code=code,
            transaction_name=g["name"] or f"Transaction {code}",
            saudi_percentage=to_percent(saudi["salaryPercentage"]) if saudi else 0.0,
            non_saudi_percentage=to_percent(foreign["salaryPercentage"]) if foreign else 0.0,
            saudi_ser_no=saudi.get("serNo") if saudi else None,
            foreign_ser_no=foreign.get("serNo") if foreign else None,
            is_active=g["active"],
        ))
    return rows


def split(row: RowLike) -> List[Dict[str, Any]]:
    """
    Row → up to two backend bodies (S then F).
    A category is left out when its percentage is None; 0 is a real value and is sent.
    """
    data = _as_mapping(row)
    code = data.get("transaction_code")
    if code is None:
        raise ValidationError("transaction_code", "Transaction code is required.")

    bodies = []
    for category, key in ((SAUDI, "saudi_percentage"), (FOREIGN, "non_saudi_percentage")):
        pct = data.get(key)
        if pct is None:
            continue
        bodies.append({
            "employeeCategory": category,
            "transTypeCode": code,
            "salaryPercentage": to_fraction(pct),
        })
    return bodies


# ============================
# saudi ceiling
# ============================
def validate_saudi_total(
    candidate: RowLike,
    existing_rows: Iterable[SalaryBreakdownRow],
    exclude_code: Optional[int] = None,
) -> Optional[ValidationError]:
    current = sum(
        (r.saudi_percentage or 0.0)
        for r in existing_rows
        if r.is_active and (exclude_code is None or r.transaction_code != exclude_code)
    )
    total = current + float(_as_mapping(candidate).get("saudi_percentage") or 0.0)
    if total > _ceiling():
        return ValidationError(
            "saudi_percentage",
            f"Saudi percentage total exceeds 100%. Current total: {total:.2f}%",
        )
    return None


def _validated_row(data: RowLike) -> Dict[str, Any]:
    ser = BreakdownRowSerializer(data=dict(_as_mapping(data)))
    if not ser.is_valid():
        raise first_error(ser.errors)
    return dict(ser.validated_data)


def _rows_or_fetch(client: BackendClient, existing_rows: Optional[List[SalaryBreakdownRow]]) -> List[SalaryBreakdownRow]:
    return existing_rows if existing_rows is not None else merge(repo.list_all(client))


# ============================
# commands
# ============================
def _post_all(client: BackendClient, bodies: List[Dict[str, Any]]) -> List[Optional[Dict[str, Any]]]:
    # không rollback: nếu body thứ 2 lỗi thì body 1 đã được lưu, caller re-fetch để đối soát
    return [repo.upsert(client, body) for body in bodies]


def create_row(
    session: ConsoleSession,
    data: RowLike,
    *,
    existing_rows: Optional[List[SalaryBreakdownRow]] = None,
    client: Optional[BackendClient] = None,
) -> List[Optional[Dict[str, Any]]]:
    client = client or BackendClient(session)
    row = _validated_row(data)
    rows = _rows_or_fetch(client, existing_rows)

    if any(r.transaction_code == row["transaction_code"] for r in rows):
        raise DuplicateTransactionType(row["transaction_code"])
    err = validate_saudi_total(row, rows)
    if err:
        raise err

    results = _post_all(client, split(row))
    logger.info("[breakdown] created transaction type %s", row["transaction_code"])
    return results


def update_row(
    session: ConsoleSession,
    data: RowLike,
    *,
    existing_rows: Optional[List[SalaryBreakdownRow]] = None,
    client: Optional[BackendClient] = None,
) -> List[Optional[Dict[str, Any]]]:
    client = client or BackendClient(session)
    row = _validated_row(data)
    rows = _rows_or_fetch(client, existing_rows)

    err = validate_saudi_total(row, rows, exclude_code=row["transaction_code"])
    if err:
        raise err

    results = _post_all(client, split(row))
    logger.info("[breakdown] updated transaction type %s", row["transaction_code"])
    return results


def resolve_ser_nos(
    row: SalaryBreakdownRow,
    records: Iterable[Mapping[str, Any]],
    year: Optional[int] = None,
) -> List[int]:
    found = {SAUDI: row.saudi_ser_no, FOREIGN: row.foreign_ser_no}
    missing = [c for c, v in found.items() if not v]
    if missing:
        for rec in _clean_records(records):
            cat = rec["employeeCategory"]
            if cat not in missing or found[cat] or rec.get("isDeleted") == "Y":
                continue
            if rec["transTypeCode"] != row.transaction_code:
                continue
            if year is not None and rec.get("year") is not None and rec["year"] != year:
                continue
            found[cat] = rec.get("serNo")
    return [v for v in found.values() if v]


def delete_row(
    session: ConsoleSession,
    row: SalaryBreakdownRow,
    year: Optional[int] = None,
    *,
    client: Optional[BackendClient] = None,
) -> List[int]:
    """Deletes both category records of a row; returns the deleted serNos."""
    client = client or BackendClient(session)
    ser_nos = row.ser_nos
    if len(ser_nos) < 2:
        ser_nos = resolve_ser_nos(row, repo.list_all(client), year=year)
    if not ser_nos:
        raise RecordNotFound(f"No salary breakdown records for transaction type {row.transaction_code}")

    for ser_no in ser_nos:
        repo.delete(client, ser_no)
    logger.info("[breakdown] deleted transaction type %s (serNo %s)", row.transaction_code, ser_nos)
    return ser_nos
