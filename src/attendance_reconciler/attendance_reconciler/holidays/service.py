from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import RecordNotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    """Manage the process-wide holiday list.

    Dates are unique: at most one holiday per day. Every change goes through
    :meth:`AttendanceService.replace_holidays` so the loaded dataset is
    reclassified together with the new list.
    """

    def __init__(self, holidays: HolidayRepository, attendance: AttendanceService):
        self._holidays = holidays
        self._attendance = attendance

    def list_holidays(self, *, start: Optional[date] = None, end: Optional[date] = None) -> list[Holiday]:
        items = [
            h
            for h in self._holidays.list_all()
            if (start is None or h.holiday_date >= start) and (end is None or h.holiday_date <= end)
        ]
        return sorted(items, key=lambda h: h.holiday_date)

    @staticmethod
    def from_payload(items: Iterable[dict]) -> list[Holiday]:
        """Build holidays from ``{"date": "YYYY-MM-DD", "name": ...}`` items."""
        holidays = []
        for item in items:
            if not isinstance(item, dict):
                raise ValidationError("Each holiday must be an object with date and name")
            holidays.append(
                Holiday(
                    holiday_date=parse_iso_date(str(item.get("date") or "")),
                    name=require_non_empty(str(item.get("name") or ""), "Holiday name"),
                )
            )
        return holidays

    def replace_all(self, holidays: list[Holiday]) -> list[Holiday]:
        seen: set[date] = set()
        for h in holidays:
            if h.holiday_date in seen:
                raise ValidationError(f"Duplicate holiday on {h.holiday_date.isoformat()}")
            seen.add(h.holiday_date)

        self._attendance.replace_holidays(holidays)
        return self.list_holidays()

    def add(self, *, holiday_date: date, name: str) -> list[Holiday]:
        name = require_non_empty(name, "Holiday name")
        current = list(self._holidays.list_all())
        if any(h.holiday_date == holiday_date for h in current):
            raise ValidationError(f"A holiday already exists on {holiday_date.isoformat()}")
        return self.replace_all(current + [Holiday(holiday_date=holiday_date, name=name)])

    def remove(self, *, holiday_date: date) -> list[Holiday]:
        current = list(self._holidays.list_all())
        remaining = [h for h in current if h.holiday_date != holiday_date]
        if len(remaining) == len(current):
            raise RecordNotFoundError(f"No holiday on {holiday_date.isoformat()}")
        return self.replace_all(remaining)
