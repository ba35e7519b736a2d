"""Single entry point for deciding a day's attendance status.

Every caller (initial reconciliation, edits, holiday changes) goes through
:func:`classify`; the rule itself lives in the strategies picked by
:class:`ClassificationStrategyFactory`.
"""

from __future__ import annotations

from dataclasses import replace

from ..core.enums import AttendanceStatus
from .factory import ClassificationStrategyFactory
from .model import AttendanceDay, WorkCalendar

_factory = ClassificationStrategyFactory()


def classify(day: AttendanceDay, calendar: WorkCalendar) -> AttendanceStatus:
    strategy = _factory.for_day(day=day, calendar=calendar)
    return strategy.decide(day=day, calendar=calendar).status


def classify_day(day: AttendanceDay, calendar: WorkCalendar) -> AttendanceDay:
    """Return the day with its status recomputed (same object when unchanged)."""
    status = classify(day, calendar)
    if status == day.status:
        return day
    return replace(day, status=status)
