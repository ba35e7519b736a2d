from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.validators import require_hours
from ..core.constants import FULL_DAY_HOURS, HALF_DAY_HOURS
from ..core.enums import ReasonCode
from ..core.exceptions import RecordNotFoundError, ValidationError
from ..holidays.model import Holiday
from ..holidays.repository import HolidayRepository
from .extractor import extract_records
from .merger import apply_edit, apply_holiday_change
from .model import AttendanceDay, DateRange, EmployeeAttendance, WorkCalendar
from .reconciler import date_span, reconcile
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases around the loaded attendance dataset."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        *,
        weekend_days: Optional[Iterable[int]] = None,
        full_day_hours: float = FULL_DAY_HOURS,
        half_day_hours: float = HALF_DAY_HOURS,
    ):
        self._attendance = attendance
        self._holidays = holidays
        self._weekend_days = frozenset(weekend_days) if weekend_days is not None else None
        self._full_day_hours = float(full_day_hours)
        self._half_day_hours = float(half_day_hours)

    def calendar(self, holidays: Optional[Iterable[Holiday]] = None) -> WorkCalendar:
        if holidays is None:
            holidays = self._holidays.list_all()
        return WorkCalendar.build(
            (h.holiday_date for h in holidays),
            self._weekend_days,
            full_day_hours=self._full_day_hours,
            half_day_hours=self._half_day_hours,
        )

    def load_csv(self, text: str) -> dict[str, EmployeeAttendance]:
        raw = extract_records(text)
        if not raw or not any(raw.values()):
            raise ValidationError("No employee data could be parsed from the file. Please check the format.")

        employees = reconcile(raw, self.calendar())
        self._attendance.replace_all(employees)

        span = self.date_range()
        logger.info(
            "Loaded %d employees, %d observed days (%s .. %s)",
            len(employees),
            sum(len(days) for days in raw.values()),
            span.start if span else "-",
            span.end if span else "-",
        )
        return employees

    def list_employees(self) -> list[str]:
        return list(self._attendance.get_all())

    def date_range(self) -> Optional[DateRange]:
        return date_span({name: emp.days for name, emp in self._attendance.get_all().items()})

    def get_employee(self, employee_name: str) -> EmployeeAttendance:
        employee = self._attendance.get_employee(employee_name)
        if not employee:
            raise RecordNotFoundError(f"Employee '{employee_name}' is not in the loaded file")
        return employee

    def get_days(
        self,
        *,
        employee_name: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        work_date: Optional[date] = None,
    ) -> list[AttendanceDay]:
        """Days of one employee, or of everybody ordered by date then name."""
        if start and end and start > end:
            raise ValidationError("Start date must not be after end date")

        if employee_name:
            days = self.get_employee(employee_name).between(start, end)
        else:
            days = [d for emp in self._attendance.get_all().values() for d in emp.between(start, end)]
            days.sort(key=lambda d: (d.work_date, d.employee_name.lower()))

        if work_date is not None:
            days = [d for d in days if d.work_date == work_date]
        return days

    def edit_day(
        self,
        *,
        employee_name: str,
        work_date: date,
        reason: str,
        credited_hours=None,
        reason_code: Optional[ReasonCode] = None,
    ) -> AttendanceDay:
        hours = require_hours(credited_hours, "Credited hours")
        employee = self.get_employee(employee_name)
        day = employee.get_day(work_date)
        if not day:
            raise RecordNotFoundError(f"No record for {employee.employee_name} on {work_date.isoformat()}")

        updated = apply_edit(day, reason, hours, reason_code=reason_code, calendar=self.calendar())
        days = tuple(updated if d.work_date == work_date else d for d in employee.days)
        self._attendance.save_employee(replace(employee, days=days))

        logger.info(
            "Edited %s: reason=%r hours=%.2f status=%s",
            updated.record_id,
            updated.reason,
            updated.work_hours,
            updated.status.value,
        )
        return updated

    def replace_holidays(self, holidays: Sequence[Holiday]) -> dict[str, EmployeeAttendance]:
        """Swap the holiday set and reclassify, keeping every manual edit."""
        recomputed = apply_holiday_change(self._attendance.get_all(), self.calendar(holidays))

        self._attendance.replace_all(recomputed)
        self._holidays.replace_all(holidays)
        logger.info("Holiday set replaced (%d holidays), %d employees reclassified", len(holidays), len(recomputed))
        return recomputed

    def replace_days(self, employees: dict[str, EmployeeAttendance]) -> None:
        self._attendance.replace_all(employees)

    def snapshot(self) -> dict[str, EmployeeAttendance]:
        return self._attendance.get_all()

    def reset(self) -> None:
        self._attendance.clear()
