from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.constants import DEFAULT_WEEKEND_DAYS, FULL_DAY_HOURS, HALF_DAY_HOURS
from ..core.enums import AttendanceStatus, ReasonCode


@dataclass(frozen=True)
class AttendanceDay:
    """One employee's record for one calendar date, observed or synthesized."""

    employee_name: str
    work_date: date
    in_time: Optional[str] = None
    out_time: Optional[str] = None
    total_hours: Optional[str] = None
    work_hours: float = 0.0
    status: AttendanceStatus = AttendanceStatus.UNKNOWN
    reason: str = ""
    reason_code: Optional[ReasonCode] = None
    is_ai_enhanced: bool = False

    @property
    def record_id(self) -> str:
        return f"{self.employee_name}-{self.work_date.isoformat()}"

    @classmethod
    def empty(cls, employee_name: str, work_date: date) -> "AttendanceDay":
        """Gap-filling day: no clock times, zero hours."""
        return cls(employee_name=employee_name, work_date=work_date)


@dataclass(frozen=True)
class EmployeeAttendance:
    employee_name: str
    days: tuple[AttendanceDay, ...] = ()

    def get_day(self, work_date: date) -> Optional[AttendanceDay]:
        for day in self.days:
            if day.work_date == work_date:
                return day
        return None

    def between(self, start: Optional[date] = None, end: Optional[date] = None) -> list[AttendanceDay]:
        return [
            d
            for d in self.days
            if (start is None or d.work_date >= start) and (end is None or d.work_date <= end)
        ]


@dataclass(frozen=True)
class WorkCalendar:
    """Holiday dates, weekend weekdays and hour thresholds used to classify a day."""

    holiday_dates: frozenset[date] = frozenset()
    weekend_days: frozenset[int] = DEFAULT_WEEKEND_DAYS
    full_day_hours: float = FULL_DAY_HOURS
    half_day_hours: float = HALF_DAY_HOURS

    @classmethod
    def build(
        cls,
        holiday_dates: Iterable[date],
        weekend_days: Optional[Iterable[int]] = None,
        *,
        full_day_hours: float = FULL_DAY_HOURS,
        half_day_hours: float = HALF_DAY_HOURS,
    ) -> "WorkCalendar":
        weekend = frozenset(weekend_days) if weekend_days is not None else DEFAULT_WEEKEND_DAYS
        return cls(
            holiday_dates=frozenset(holiday_dates),
            weekend_days=weekend,
            full_day_hours=float(full_day_hours),
            half_day_hours=float(half_day_hours),
        )

    def is_holiday(self, day: date) -> bool:
        return day in self.holiday_dates

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.weekend_days


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date
