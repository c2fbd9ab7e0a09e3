# -*- coding: utf-8 -*-
"""
Backend list endpoints trả về 1 trong 2 dạng:
- mảng phẳng: [...]
- page envelope: {"content": [...], "totalElements": n, "totalPages": p}
Thiếu content / không phải mảng → coi như rỗng, không raise.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Page:
    content: List[Dict[str, Any]] = field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0


def unwrap_list(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        content = data.get("content")
        if isinstance(content, list):
            return content
    return []


def unwrap_page(data: Any) -> Page:
    items = unwrap_list(data)
    if isinstance(data, dict):
        total = data.get("totalElements")
        pages = data.get("totalPages")
        return Page(
            content=items,
            total_elements=int(total) if total is not None else len(items),
            total_pages=int(pages) if pages is not None else (1 if items else 0),
        )
    return Page(content=items, total_elements=len(items), total_pages=1 if items else 0)
