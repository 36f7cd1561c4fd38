# src/console/listing.py
from __future__ import annotations

import math
import re
from typing import Any, List, Mapping, Sequence, Tuple

SEARCH_KEYS: Tuple[str, ...] = ("name", "empId", "designation", "division")
DEFAULT_PAGE_SIZE = 5

Record = Mapping[str, Any]


def matches(record: Record, term: str, keys: Sequence[str] = SEARCH_KEYS) -> bool:
    needle = (term or "").lower()
    if not needle:
        return True
    for key in keys:
        value = record.get(key)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_records(records: Sequence[Record], term: str, keys: Sequence[str] = SEARCH_KEYS) -> List[Record]:
    """Case-insensitive substring search over ``keys``; order is preserved."""
    return [r for r in records if matches(r, term, keys)]


def highlight(text: Any, term: str) -> List[Tuple[str, bool]]:
    """
    Split ``text`` into ``(segment, matched)`` pieces so a renderer can mark
    every case-insensitive occurrence of ``term``.
    """
    text = "" if text is None else str(text)
    if not term or not text:
        return [(text, False)] if text else []
    pattern = re.compile(f"({re.escape(term)})", re.IGNORECASE)
    pieces: List[Tuple[str, bool]] = []
    for i, part in enumerate(pattern.split(text)):
        if part:
            # split() with one capture group puts the matches at odd indexes
            pieces.append((part, i % 2 == 1))
    return pieces


def page_count(total: int, size: int = DEFAULT_PAGE_SIZE) -> int:
    if total <= 0:
        return 1
    return math.ceil(total / size)


def clamp_page(page: int, total: int, size: int = DEFAULT_PAGE_SIZE) -> int:
    return max(1, min(page, page_count(total, size)))


def paginate(records: Sequence[Record], page: int, size: int = DEFAULT_PAGE_SIZE) -> List[Record]:
    """
    Slice one page out of ``records``. The page is not clamped here: a page
    past the end yields an empty list.
    """
    start = (page - 1) * size
    return list(records[start:start + size])
