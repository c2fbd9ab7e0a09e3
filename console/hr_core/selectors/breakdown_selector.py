# -*- coding: utf-8 -*-
"""Selector cho salary breakdown: fetch toàn bộ record rồi merge thành row."""
from __future__ import annotations
from typing import List, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.models import ConsoleSession, SalaryBreakdownRow
from hr_core.repositories import breakdown_repository as repo
from hr_core.services.breakdown_service import merge


def list_rows(session: ConsoleSession, *, client: Optional[BackendClient] = None) -> List[SalaryBreakdownRow]:
    client = client or BackendClient(session)
    return merge(repo.list_all(client))


def active_saudi_total(rows: List[SalaryBreakdownRow]) -> float:
    return round(sum(r.saudi_percentage or 0.0 for r in rows if r.is_active), 2)
