from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Iterator, Optional

import pandas as pd

from ..core.constants import PLACEHOLDER
from ..core.exceptions import ValidationError

_DURATION_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")
_MONTH_DAY_YEAR_RE = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{2,4})")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD")


def parse_clock_duration(text: Optional[str]) -> float:
    """Convert ``H:MM`` / ``H:MM:SS`` into decimal hours.

    Any other shape, including the ``-`` placeholder, counts as zero hours.
    """
    value = (text or "").strip()
    if not _DURATION_RE.match(value):
        return 0.0
    parts = [int(p) for p in value.split(":")]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) > 2 else 0
    return hours + minutes / 60 + seconds / 3600


def parse_observed_date(text: Optional[str]) -> Optional[date]:
    """Best-effort date parser for the first column of a clock export.

    Returns None when nothing sensible can be read; callers skip the row.
    """
    value = (text or "").strip()
    if not value or value == PLACEHOLDER:
        return None

    parsed = pd.to_datetime(value, errors="coerce")
    if pd.notna(parsed):
        return parsed.date()

    match = _MONTH_DAY_YEAR_RE.search(value)
    if not match:
        return None
    month, day, year = (int(g) for g in match.groups())
    if year < 100:
        year += 2000
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_duration(hours: float) -> str:
    """Render decimal hours as ``HH:MM``, rounded to the nearest minute."""
    if hours is None or math.isnan(hours) or hours < 0:
        return "0:00"
    total_minutes = int(math.floor(hours * 60 + 0.5))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both included."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
