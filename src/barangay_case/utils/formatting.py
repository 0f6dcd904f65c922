"""Date formatting helpers for report text.

Reports are read by barangay officials, so every timestamp is shown in
Philippine Standard Time using US-style numerals, e.g. ``5/1/2024, 8:00:00 PM``.
Naive datetimes are taken to already be local (Manila) time, which is how the
intake form records them.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

MANILA_TZ = ZoneInfo("Asia/Manila")

DateTimeLike = Union[datetime, str, None]


def parse_datetime(value: DateTimeLike) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass through a datetime). Returns None if unusable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable datetime value: {value!r}")
        return None


def to_manila(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=MANILA_TZ)
    return dt.astimezone(MANILA_TZ)


def format_date(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        value = to_manila(value)
    return f"{value.month}/{value.day}/{value.year}"


def format_datetime(value: DateTimeLike) -> str:
    """Format as ``M/D/YYYY, h:mm:ss AM``; empty string when value is missing or unparseable."""
    dt = parse_datetime(value)
    if dt is None:
        return ""
    dt = to_manila(dt)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{format_date(dt)}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def now_manila() -> datetime:
    return datetime.now(MANILA_TZ)
