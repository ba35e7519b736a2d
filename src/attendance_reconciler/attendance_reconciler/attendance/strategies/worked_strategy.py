from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceDay, WorkCalendar
from .base import ClassificationStrategy, StatusDecision


class WorkedDayStrategy(ClassificationStrategy):
    """Clocked hours > 0. Holiday beats weekend, then hour thresholds."""

    def decide(self, *, day: AttendanceDay, calendar: WorkCalendar) -> StatusDecision:
        if calendar.is_holiday(day.work_date):
            return StatusDecision(status=AttendanceStatus.WORK_ON_HOLIDAY)
        if calendar.is_weekend(day.work_date):
            return StatusDecision(status=AttendanceStatus.WORK_ON_WEEKEND)
        if day.work_hours >= calendar.full_day_hours:
            return StatusDecision(status=AttendanceStatus.PRESENT)
        if day.work_hours >= calendar.half_day_hours:
            return StatusDecision(status=AttendanceStatus.SHORT_HOURS)
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
