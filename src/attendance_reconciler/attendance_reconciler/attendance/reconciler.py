from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import iter_days
from .classifier import classify_day
from .model import AttendanceDay, DateRange, EmployeeAttendance, WorkCalendar


def date_span(employees: Mapping[str, Iterable[AttendanceDay]]) -> Optional[DateRange]:
    """Global first/last date over every employee's days."""
    dates = [d.work_date for days in employees.values() for d in days]
    if not dates:
        return None
    return DateRange(start=min(dates), end=max(dates))


def reconcile(
    employees: Mapping[str, Iterable[AttendanceDay]],
    calendar: WorkCalendar,
) -> dict[str, EmployeeAttendance]:
    """Densify and classify.

    Every employee gets one day per date of the shared span, observed days
    are kept as they are (hours, reason and notes included) and missing ones
    are filled with empty days. Inputs are never mutated.
    """
    employees = {name: list(days) for name, days in employees.items()}
    span = date_span(employees)
    if span is None:
        return {name: EmployeeAttendance(employee_name=name) for name in employees}

    result: dict[str, EmployeeAttendance] = {}
    for name, days in employees.items():
        known: dict[date, AttendanceDay] = {d.work_date: d for d in days}
        filled = [
            classify_day(known.get(day) or AttendanceDay.empty(name, day), calendar)
            for day in iter_days(span.start, span.end)
        ]
        filled.sort(key=lambda d: d.work_date)
        result[name] = EmployeeAttendance(employee_name=name, days=tuple(filled))
    return result
