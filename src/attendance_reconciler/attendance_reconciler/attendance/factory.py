from __future__ import annotations

from dataclasses import dataclass

from .model import AttendanceDay, WorkCalendar
from .strategies.base import ClassificationStrategy
from .strategies.idle_strategy import IdleDayStrategy
from .strategies.worked_strategy import WorkedDayStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(self, *, day: AttendanceDay, calendar: WorkCalendar) -> ClassificationStrategy:
        if day.work_hours > 0:
            return WorkedDayStrategy()
        return IdleDayStrategy()
