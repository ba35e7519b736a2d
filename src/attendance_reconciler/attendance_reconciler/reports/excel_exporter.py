from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from ..core.enums import AttendanceStatus

if TYPE_CHECKING:
    from .service import ReportData


STATUS_FILLS = {
    AttendanceStatus.PRESENT: "DCFCE7",
    AttendanceStatus.ABSENT: "FECACA",
    AttendanceStatus.HALF_DAY: "FEF08A",
    AttendanceStatus.SHORT_HOURS: "FED7AA",
    AttendanceStatus.WEEKEND: "E2E8F0",
    AttendanceStatus.HOLIDAY: "BFDBFE",
    AttendanceStatus.WORK_ON_HOLIDAY: "DDD6FE",
    AttendanceStatus.WORK_ON_WEEKEND: "C7D2FE",
    AttendanceStatus.UNKNOWN: "F3F4F6",
}

DETAIL_COLUMNS = ["Date", "Day", "In Time", "Out Time", "Total Hours", "Status", "Reason / Note"]
DETAIL_WIDTHS = [12, 12, 10, 10, 12, 18, 50]


class ExcelReportExporter:
    """Two-sheet workbook: Summary + Detailed Report, rows coloured by status."""

    summary_sheet = "Summary"
    detail_sheet = "Detailed Report"

    def _summary_frame(self, report: "ReportData") -> pd.DataFrame:
        s = report.summary
        period = f"{report.date_range.start.strftime('%m/%d/%Y')} - {report.date_range.end.strftime('%m/%d/%Y')}"
        return pd.DataFrame(
            [
                ["Employee Attendance Summary", ""],
                ["", ""],
                ["Employee Name:", report.employee_name],
                ["Period:", period],
                ["", ""],
                ["Metric", "Value"],
                ["Total Workable Days", s.workable_days],
                ["Present Days", s.present_days],
                ["Absent Days", s.absent_days],
                ["Short/Half Days", f"{s.short_hours_days}/{s.half_days}"],
                ["Work on Holiday", s.work_on_holiday_days],
                ["Total Hours Worked", s.total_worked_hours_text],
            ]
        )

    def _detail_frame(self, report: "ReportData") -> pd.DataFrame:
        return pd.DataFrame(
            [
                [
                    d.work_date.strftime("%m/%d/%Y"),
                    d.work_date.strftime("%A"),
                    d.in_time or "-",
                    d.out_time or "-",
                    d.total_hours or "0:00",
                    d.status.value,
                    d.reason or "-",
                ]
                for d in report.days
            ],
            columns=DETAIL_COLUMNS,
        )

    def render(self, report: "ReportData") -> bytes:
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            self._summary_frame(report).to_excel(writer, sheet_name=self.summary_sheet, index=False, header=False)
            self._detail_frame(report).to_excel(writer, sheet_name=self.detail_sheet, index=False)
            self._style_summary(writer.sheets[self.summary_sheet])
            self._style_detail(writer.sheets[self.detail_sheet], report)
        return output.getvalue()

    @staticmethod
    def _style_summary(ws) -> None:
        ws.column_dimensions["A"].width = 25
        ws.column_dimensions["B"].width = 15
        ws.merge_cells("A1:B1")
        ws["A1"].font = Font(bold=True, size=16)
        ws["A1"].alignment = Alignment(horizontal="center")
        ws["A6"].font = Font(bold=True)
        ws["B6"].font = Font(bold=True)

    @staticmethod
    def _style_detail(ws, report: "ReportData") -> None:
        letters = "ABCDEFG"
        for letter, width in zip(letters, DETAIL_WIDTHS):
            ws.column_dimensions[letter].width = width

        dark = Side(style="thin", color="000000")
        header_fill = PatternFill(fill_type="solid", fgColor="9CA3AF")
        for cell in ws[1]:
            cell.font = Font(bold=True, color="000000")
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")
            cell.border = Border(top=dark, bottom=dark, left=dark, right=dark)

        light = Side(style="thin", color="D1D5DB")
        for row_idx, day in enumerate(report.days, start=2):
            fill = PatternFill(fill_type="solid", fgColor=STATUS_FILLS[day.status])
            for cell in ws[row_idx]:
                cell.fill = fill
                cell.alignment = Alignment(horizontal="left", vertical="center")
                cell.border = Border(top=light, bottom=light, left=light, right=light)
