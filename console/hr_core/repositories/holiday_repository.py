from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.utils.pagination import unwrap_list


def list_range(client: BackendClient, start: date, end: date) -> List[Dict[str, Any]]:
    return unwrap_list(client.get(
        "/holidays/range",
        params={"startDate": start.isoformat(), "endDate": end.isoformat()},
    ))


def create(client: BackendClient, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return client.post("/holidays", body)


def delete(client: BackendClient, holiday_id: int) -> None:
    client.delete(f"/holidays/{holiday_id}")
