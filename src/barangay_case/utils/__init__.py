"""Utility modules for the barangay case analyzer."""

from barangay_case.utils.formatting import (
    MANILA_TZ,
    format_date,
    format_datetime,
    now_manila,
    parse_datetime,
    to_manila,
)

__all__ = [
    "MANILA_TZ",
    "format_date",
    "format_datetime",
    "now_manila",
    "parse_datetime",
    "to_manila",
]
