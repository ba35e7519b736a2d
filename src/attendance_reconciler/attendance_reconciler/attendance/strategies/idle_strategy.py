from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceDay, WorkCalendar
from .base import ClassificationStrategy, StatusDecision


class IdleDayStrategy(ClassificationStrategy):
    """No hours on the clock."""

    def decide(self, *, day: AttendanceDay, calendar: WorkCalendar) -> StatusDecision:
        if calendar.is_holiday(day.work_date):
            return StatusDecision(status=AttendanceStatus.HOLIDAY)
        if calendar.is_weekend(day.work_date):
            return StatusDecision(status=AttendanceStatus.WEEKEND)
        return StatusDecision(status=AttendanceStatus.ABSENT)
