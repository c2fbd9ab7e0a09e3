from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConsoleSession:
    """
    Who is acting, passed explicitly to clients and services.
    Nothing in hr_core reads login state from a global.
    """
    actor_id: int
    role: str = ""
    language: str = "ar"
    access_token: Optional[str] = None

    @property
    def bearer(self) -> Optional[str]:
        if not self.access_token:
            return None
        # JWT không được chứa khoảng trắng
        return "".join(self.access_token.split())
