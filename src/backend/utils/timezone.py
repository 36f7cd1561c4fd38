# src/backend/utils/timezone.py
from __future__ import annotations

import logging
from datetime import datetime

import pytz

from src.backend.config import settings

# -----------------------------------------------------------------------------
# Configure local timezone with fallback
# -----------------------------------------------------------------------------
try:
    LOCAL_TZ = pytz.timezone(settings.TIMEZONE)
except pytz.UnknownTimeZoneError as exc:
    logging.getLogger(__name__).warning(
        "Invalid TIMEZONE '%s' in environment; falling back to Asia/Dhaka. Error: %s",
        settings.TIMEZONE,
        exc,
    )
    LOCAL_TZ = pytz.timezone("Asia/Dhaka")


def now_local() -> datetime:
    """
    Return the current time as a timezone-aware datetime in the configured local timezone.
    """
    return datetime.now(LOCAL_TZ)  # 2025-10-04 13:40:15+06:00


def now_naive() -> datetime:
    """Local wall-clock time without tzinfo, for DateTime(timezone=False) columns."""
    return now_local().replace(tzinfo=None)

