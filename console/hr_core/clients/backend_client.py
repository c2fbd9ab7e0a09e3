# ============================================
# hr_core/clients/backend_client.py
# ============================================
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from hr_core.exceptions import BackendError
from hr_core.models import ConsoleSession

logger = logging.getLogger(__name__)


class BackendClient:
    """Client to communicate with the HR backend REST API"""

    def __init__(
        self,
        session: Optional[ConsoleSession] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[requests.Session] = None,
    ):
        self.session = session
        self.base_url = (base_url or getattr(settings, "HR_BACKEND_URL", "http://localhost:8080/api")).rstrip("/")
        self.timeout = timeout or getattr(settings, "HR_BACKEND_TIMEOUT", 10)
        self.http = http or requests.Session()

    # ---------- public verbs ----------
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Optional[Dict[str, Any]] = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("POST", path, json=body, params=params)

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("DELETE", path, params=params)

    # ---------- internals ----------
    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json; charset=UTF-8",
            "Accept": "application/json; charset=UTF-8",
        }
        token = self.session.bearer if self.session else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            logger.warning("[backend] no access token for request")
        if self.session and self.session.language:
            headers["Accept-Language"] = self.session.language
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        params = kwargs.get("params")
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        try:
            response = self.http.request(method, url, headers=self._headers(), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("[backend] %s %s failed: %s", method, url, e)
            raise BackendError(f"Failed to connect to backend at {self.base_url}", 0) from e

        data = self._decode(response, method, url)

        if not response.ok:
            raise self._error_from(response, data)

        # ApiResponse wrapper {success, data}
        if isinstance(data, dict) and "success" in data:
            return data.get("data")
        return data

    @staticmethod
    def _decode(response: requests.Response, method: str, url: str) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("Content-Type", "")
        if "application/json" not in content_type:
            logger.error("[backend] non-JSON response from %s %s: %s", method, url, response.text[:200])
            raise BackendError(
                f"Non-JSON response from backend. Status: {response.status_code} {response.reason}",
                response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                f"Invalid JSON from backend. Status: {response.status_code} {response.reason}",
                response.status_code,
            ) from e

    @staticmethod
    def _error_from(response: requests.Response, data: Any) -> BackendError:
        body = data if isinstance(data, dict) else {}
        message = body.get("message") or f"HTTP {response.status_code}: {response.reason}"
        errors: Dict[str, List[str]] = {}
        if isinstance(body.get("errors"), dict):
            errors = {k: v if isinstance(v, list) else [str(v)] for k, v in body["errors"].items()}
        elif isinstance(body.get("data"), dict):
            # validation errors as Map<String, String> in `data`
            errors = {k: [str(v)] for k, v in body["data"].items()}
        return BackendError(message, response.status_code, errors, body.get("data"))
