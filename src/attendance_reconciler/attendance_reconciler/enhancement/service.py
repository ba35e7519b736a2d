from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..attendance.model import AttendanceDay, EmployeeAttendance
from ..attendance.service import AttendanceService
from ..core.enums import FLAGGED_STATUSES
from ..core.exceptions import RecordNotFoundError
from .client import SuggestionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnhancementResult:
    updated_days: int
    employees: dict[str, EmployeeAttendance]


def flagged_records(days) -> list[dict]:
    """Payload sent to the collaborator: only days worth explaining."""
    return [
        {"date": d.work_date.isoformat(), "status": d.status.value, "workHours": f"{d.work_hours:.2f}"}
        for d in days
        if d.status in FLAGGED_STATUSES
    ]


class EnhancementService:
    """Merge AI suggested reasons into flagged days.

    Purely additive: on any collaborator error nothing is written and the
    current dataset stays as it is.
    """

    def __init__(self, attendance: AttendanceService, client: SuggestionClient):
        self._attendance = attendance
        self._client = client

    def enhance(self) -> EnhancementResult:
        employees = self._attendance.snapshot()
        if not employees:
            raise RecordNotFoundError("No attendance file has been loaded")

        merged: dict[str, EmployeeAttendance] = {}
        updated = 0
        for name, employee in employees.items():
            records = flagged_records(employee.days)
            if not records:
                merged[name] = employee
                continue

            suggestions = {s.date: s for s in self._client.suggest(employee_name=name, records=records)}
            flagged_dates = {r["date"] for r in records}

            days: list[AttendanceDay] = []
            for day in employee.days:
                key = day.work_date.isoformat()
                suggestion = suggestions.get(key)
                if suggestion and key in flagged_dates:
                    day = replace(day, reason=suggestion.suggested_reason, is_ai_enhanced=True)
                    updated += 1
                days.append(day)
            merged[name] = replace(employee, days=tuple(days))

        self._attendance.replace_days(merged)
        logger.info("AI suggestions merged into %d days", updated)
        return EnhancementResult(updated_days=updated, employees=merged)
