"""
Helper Functions

This module contains utility functions used throughout the application.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as dtparser

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_ts(x: Any) -> Optional[datetime]:
    """Parse a strict ISO-8601 timestamp, normalized to UTC"""
    if not x:
        return None
    try:
        dt = dtparser.isoparse(str(x))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def parse_int(x: Optional[str]) -> Optional[int]:
    """Optional sign followed by ASCII digits; anything else is None"""
    if x is None or not _INT_RE.fullmatch(x):
        return None
    return int(x)


def format_utc(dt: datetime) -> str:
    """Render as e.g. 2024-01-15T10:23:45.123Z"""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
