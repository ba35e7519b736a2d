from __future__ import annotations

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from src.attendance_reconciler.attendance_reconciler.core.exceptions import RecordNotFoundError
from src.attendance_reconciler.attendance_reconciler.reports.service import ReportService


def test_employee_report_defaults_to_full_span(loaded_service):
    report = ReportService(loaded_service).build_employee_report(employee_name="dolly")

    assert report.employee_name == "Dolly"
    assert (report.date_range.start, report.date_range.end) == (date(2025, 1, 1), date(2025, 1, 6))
    assert len(report.rows) == 6
    assert report.rows[1]["status"] == "Present"
    assert report.rows[1]["day"] == "Thursday"
    assert report.summary.workable_days == 3
    assert report.summary.present_days == 1
    assert report.summary.absent_days == 2


def test_employee_report_filtered_range(loaded_service):
    report = ReportService(loaded_service).build_employee_report(
        employee_name="Sam", start=date(2025, 1, 2), end=date(2025, 1, 3)
    )
    assert [r["date"] for r in report.rows] == ["2025-01-02", "2025-01-03"]
    assert report.summary.short_hours_days == 1


def test_overview_lists_every_employee(loaded_service):
    rows = ReportService(loaded_service).build_overview()

    assert [r["name"] for r in rows] == ["Dolly", "Sam"]
    assert rows[0]["totalWorkedHoursText"] == "09:00"
    assert rows[1]["workOnHolidayDays"] == 1


def test_reports_need_a_loaded_file(attendance_service):
    with pytest.raises(RecordNotFoundError):
        ReportService(attendance_service).build_overview()


def test_excel_export_has_summary_and_details(loaded_service):
    loaded_service.edit_day(employee_name="Dolly", work_date=date(2025, 1, 3), reason="Doctor", credited_hours=8)

    filename, content = ReportService(loaded_service).export_excel(employee_name="Dolly", today=date(2025, 2, 1))

    assert filename == "Attendance_Report_Dolly_2025-02-01.xlsx"
    wb = load_workbook(io.BytesIO(content))
    assert wb.sheetnames == ["Summary", "Detailed Report"]

    summary = wb["Summary"]
    assert summary["A1"].value == "Employee Attendance Summary"
    assert summary["B3"].value == "Dolly"
    assert summary["A7"].value == "Total Workable Days"
    assert summary["B8"].value == 2

    detail = wb["Detailed Report"]
    header = [c.value for c in detail[1]]
    assert header == ["Date", "Day", "In Time", "Out Time", "Total Hours", "Status", "Reason / Note"]
    jan3 = [c.value for c in detail[4]]
    assert jan3 == ["01/03/2025", "Friday", "-", "-", "08:00", "Present", "Doctor"]
    assert detail["A4"].fill.fgColor.rgb.endswith("DCFCE7")
