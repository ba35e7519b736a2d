"""Turn a time-clock CSV export into raw attendance days per employee.

The export is a sequence of employee blocks. A block usually starts with a
header row such as ``Dolly (21 : All Users )`` followed by a column header
row and one data row per observed day::

    Dolly (21 : All Users ),,,,
    Date,Name,In Time,Out Time,Total Hours
    2025-01-02,Dolly,09:00,18:00,9:00

Header rows are sometimes missing; a data row naming somebody else starts a
new block on its own.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

from ..common.datetime_utils import parse_clock_duration, parse_observed_date
from ..core.constants import DATE_COLUMN_HEADER, PLACEHOLDER, ROSTER_MARKER
from ..core.exceptions import CsvStructureError
from .model import AttendanceDay

logger = logging.getLogger(__name__)

_HEADER_NAME_RE = re.compile(r"^(.*?)\s*\(")
_DATA_COLUMNS = 5


@dataclass(frozen=True)
class RowOutcome:
    """Result of reading one row with the employee cursor in effect before it."""

    cursor: str
    started: Optional[str] = None
    day: Optional[AttendanceDay] = None


def read_rows(text: str) -> list[list[str]]:
    """Split CSV text into rows, dropping blank lines."""
    reader = csv.reader(io.StringIO(text), strict=True)
    try:
        return [row for row in reader if any(field.strip() for field in row)]
    except csv.Error as e:
        raise CsvStructureError(f"CSV parsing error on line {reader.line_num}: {e}") from e


def _clean(value: str) -> Optional[str]:
    value = (value or "").strip()
    if not value or value == PLACEHOLDER:
        return None
    return value


def _header_name(first_field: str) -> Optional[str]:
    if "(" not in first_field or ROSTER_MARKER not in first_field:
        return None
    match = _HEADER_NAME_RE.match(first_field)
    if not match:
        return None
    return match.group(1).strip() or None


def read_row(cursor: str, row: Sequence[str]) -> RowOutcome:
    """One fold step: (cursor, row) -> outcome carrying the next cursor."""
    first = row[0] if row else ""

    employee = _header_name(first)
    if employee:
        return RowOutcome(cursor=employee, started=employee)

    if first.strip().lower() == DATE_COLUMN_HEADER or not cursor:
        return RowOutcome(cursor=cursor)

    date_text, name, in_time, out_time, total_hours = (list(row) + [""] * _DATA_COLUMNS)[:_DATA_COLUMNS]

    started = None
    name = (name or "").strip()
    if name.lower() != cursor.lower():
        if not name:
            return RowOutcome(cursor=cursor)
        cursor = started = name

    work_date = parse_observed_date(date_text)
    if work_date is None:
        return RowOutcome(cursor=cursor, started=started)

    day = AttendanceDay(
        employee_name=cursor,
        work_date=work_date,
        in_time=_clean(in_time),
        out_time=_clean(out_time),
        total_hours=_clean(total_hours),
        work_hours=parse_clock_duration(total_hours),
    )
    return RowOutcome(cursor=cursor, started=started, day=day)


def scan(rows: Iterable[Sequence[str]]) -> Iterator[RowOutcome]:
    cursor = ""
    for row in rows:
        outcome = read_row(cursor, row)
        cursor = outcome.cursor
        yield outcome


def extract_records(text: str) -> dict[str, list[AttendanceDay]]:
    """Raw (unclassified) days per employee, in order of first appearance.

    Malformed rows are skipped; only a structurally broken file raises.
    When the same employee/date shows up twice the later row wins.
    """
    by_employee: dict[str, dict[date, AttendanceDay]] = {}
    skipped = 0

    for outcome in scan(read_rows(text)):
        if outcome.started is not None:
            by_employee.setdefault(outcome.started, {})
        if outcome.day is None:
            if outcome.started is None:
                skipped += 1
            continue
        by_employee.setdefault(outcome.day.employee_name, {})[outcome.day.work_date] = outcome.day

    if skipped:
        logger.debug("Skipped %d rows without attendance data", skipped)

    return {name: list(days.values()) for name, days in by_employee.items()}
