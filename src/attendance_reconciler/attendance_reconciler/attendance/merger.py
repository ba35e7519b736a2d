"""Apply user corrections and holiday changes to reconciled days."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from ..common.datetime_utils import format_duration
from ..core.enums import ReasonCode
from .classifier import classify_day
from .model import AttendanceDay, EmployeeAttendance, WorkCalendar
from .reconciler import reconcile


def apply_edit(
    day: AttendanceDay,
    reason: str,
    credited_hours: Optional[float] = None,
    *,
    reason_code: Optional[ReasonCode] = None,
    calendar: WorkCalendar,
) -> AttendanceDay:
    """Return the corrected day.

    The reason always replaces the old one and the day stops being AI
    enhanced. Hours (and therefore status) change only when credited hours
    are given, either explicitly or through a crediting reason code.
    """
    if credited_hours is None and reason_code is not None:
        credited_hours = reason_code.credit_hours

    reason = (reason or "").strip()
    if not reason and reason_code is not None:
        reason = reason_code.value

    updated = replace(day, reason=reason, reason_code=reason_code, is_ai_enhanced=False)
    if credited_hours is None:
        return updated

    updated = replace(updated, work_hours=float(credited_hours), total_hours=format_duration(credited_hours))
    return classify_day(updated, calendar)


def apply_holiday_change(
    employees: Mapping[str, EmployeeAttendance],
    calendar: WorkCalendar,
) -> dict[str, EmployeeAttendance]:
    """Re-run reconciliation on the current (possibly edited) days."""
    return reconcile({name: emp.days for name, emp in employees.items()}, calendar)
