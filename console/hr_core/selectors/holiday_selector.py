# -*- coding: utf-8 -*-
"""Selector cho holidays: 1 năm dương lịch → danh sách range."""
from __future__ import annotations
from typing import List, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.models import ConsoleSession, HolidayRange
from hr_core.repositories import holiday_repository as repo
from hr_core.services.holiday_service import group_consecutive
from hr_core.utils.dates import year_bounds


def list_ranges(session: ConsoleSession, year: int, *, client: Optional[BackendClient] = None) -> List[HolidayRange]:
    client = client or BackendClient(session)
    start, end = year_bounds(int(year))
    return group_consecutive(repo.list_range(client, start, end))
