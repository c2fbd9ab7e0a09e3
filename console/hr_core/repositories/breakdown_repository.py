from __future__ import annotations
from typing import Any, Dict, List, Optional

from hr_core.clients.backend_client import BackendClient
from hr_core.utils.pagination import unwrap_list

BASE_PATH = "/salary-structure"


def list_all(client: BackendClient) -> List[Dict[str, Any]]:
    return unwrap_list(client.get(BASE_PATH))


def upsert(client: BackendClient, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    # backend upserts on (transTypeCode, employeeCategory)
    return client.post(BASE_PATH, body)


def delete(client: BackendClient, ser_no: int) -> None:
    client.delete(f"{BASE_PATH}/{ser_no}")
