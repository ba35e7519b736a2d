from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..attendance.model import AttendanceDay, EmployeeAttendance
from ..common.datetime_utils import format_duration
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class SummaryStats:
    workable_days: int
    present_days: int
    absent_days: int
    short_hours_days: int
    half_days: int
    work_on_holiday_days: int
    total_worked_hours: float

    @property
    def total_worked_hours_text(self) -> str:
        return format_duration(self.total_worked_hours)

    def to_dict(self) -> dict:
        return {
            "workableDays": self.workable_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "shortHoursDays": self.short_hours_days,
            "halfDays": self.half_days,
            "workOnHolidayDays": self.work_on_holiday_days,
            "totalWorkedHours": round(self.total_worked_hours, 4),
            "totalWorkedHoursText": self.total_worked_hours_text,
        }


def summarize(days: Iterable[AttendanceDay]) -> SummaryStats:
    days = list(days)
    counts = Counter(d.status for d in days)

    holidays = counts[AttendanceStatus.HOLIDAY] + counts[AttendanceStatus.WORK_ON_HOLIDAY]
    weekends = counts[AttendanceStatus.WEEKEND] + counts[AttendanceStatus.WORK_ON_WEEKEND]

    return SummaryStats(
        workable_days=len(days) - holidays - weekends,
        present_days=counts[AttendanceStatus.PRESENT],
        absent_days=counts[AttendanceStatus.ABSENT],
        short_hours_days=counts[AttendanceStatus.SHORT_HOURS],
        half_days=counts[AttendanceStatus.HALF_DAY],
        work_on_holiday_days=counts[AttendanceStatus.WORK_ON_HOLIDAY],
        total_worked_hours=sum(d.work_hours for d in days),
    )


def summarize_all(employees: Mapping[str, EmployeeAttendance]) -> list[tuple[str, SummaryStats]]:
    """One summary per employee, most worked hours first."""
    rows = [(name, summarize(emp.days)) for name, emp in employees.items()]
    rows.sort(key=lambda row: row[1].total_worked_hours, reverse=True)
    return rows
