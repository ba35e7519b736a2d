from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceDay, DateRange
from ..attendance.service import AttendanceService
from ..core.exceptions import RecordNotFoundError
from .excel_exporter import ExcelReportExporter
from .summary import SummaryStats, summarize, summarize_all


@dataclass(frozen=True)
class ReportData:
    employee_name: str
    date_range: DateRange
    days: list[AttendanceDay]
    rows: list[dict]
    summary: SummaryStats


def to_row(day: AttendanceDay) -> dict:
    return {
        "id": day.record_id,
        "name": day.employee_name,
        "date": day.work_date.isoformat(),
        "day": day.work_date.strftime("%A"),
        "inTime": day.in_time,
        "outTime": day.out_time,
        "totalHours": day.total_hours,
        "workHours": round(day.work_hours, 4),
        "status": day.status.value,
        "reason": day.reason,
        "reasonCode": day.reason_code.value if day.reason_code else None,
        "isAiEnhanced": day.is_ai_enhanced,
    }


class ReportService:
    def __init__(self, attendance: AttendanceService, *, exporter: Optional[ExcelReportExporter] = None):
        self._attendance = attendance
        self._exporter = exporter or ExcelReportExporter()

    def _resolve_range(self, start: Optional[date], end: Optional[date]) -> DateRange:
        span = self._attendance.date_range()
        if span is None:
            raise RecordNotFoundError("No attendance file has been loaded")
        return DateRange(start=start or span.start, end=end or span.end)

    def build_employee_report(
        self,
        *,
        employee_name: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> ReportData:
        period = self._resolve_range(start, end)
        employee = self._attendance.get_employee(employee_name)
        days = self._attendance.get_days(employee_name=employee.employee_name, start=period.start, end=period.end)

        return ReportData(
            employee_name=employee.employee_name,
            date_range=period,
            days=days,
            rows=[to_row(d) for d in days],
            summary=summarize(days),
        )

    def build_overview(self, *, start: Optional[date] = None, end: Optional[date] = None) -> list[dict]:
        """All-employees summary table."""
        period = self._resolve_range(start, end)
        employees = self._attendance.snapshot()
        filtered = {
            name: replace(emp, days=tuple(emp.between(period.start, period.end)))
            for name, emp in employees.items()
        }
        return [{"name": name, **stats.to_dict()} for name, stats in summarize_all(filtered)]

    def export_excel(
        self,
        *,
        employee_name: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
        today: Optional[date] = None,
    ) -> tuple[str, bytes]:
        report = self.build_employee_report(employee_name=employee_name, start=start, end=end)
        today = today or date.today()
        filename = f"Attendance_Report_{report.employee_name.replace(' ', '_')}_{today.isoformat()}.xlsx"
        return filename, self._exporter.render(report)
