"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the reconciliation logic lives in the services.
"""

from datetime import date

from src.attendance_reconciler.attendance_reconciler.container import build_container

SAMPLE = """Dolly (21 : All Users ),,,,
Date,Name,In Time,Out Time,Total Hours
2025-01-02,Dolly,09:00,18:00,9:00
2025-01-06,Dolly,09:10,13:40,4:30
"""


def main():
    container = build_container(settings={"WEEKEND_DAYS": (4, 5)})
    container.attendance_service.load_csv(SAMPLE)
    container.attendance_service.edit_day(
        employee_name="Dolly", work_date=date(2025, 1, 6), reason="Doctor", credited_hours=8
    )
    report = container.report_service.build_employee_report(employee_name="Dolly")
    for row in report.rows:
        print(row["date"], row["status"], row["reason"])
    print(report.summary.to_dict())


if __name__ == "__main__":
    main()
