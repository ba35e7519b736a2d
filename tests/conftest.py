from __future__ import annotations

from datetime import date

import pytest

from src.attendance_reconciler.attendance_reconciler.attendance.memory_repository import InMemoryAttendanceRepository
from src.attendance_reconciler.attendance_reconciler.attendance.model import WorkCalendar
from src.attendance_reconciler.attendance_reconciler.attendance.service import AttendanceService
from src.attendance_reconciler.attendance_reconciler.holidays.memory_repository import InMemoryHolidayRepository
from src.attendance_reconciler.attendance_reconciler.holidays.model import Holiday

# 2025-01-01 is a Wednesday; Jan 4/5 are Saturday/Sunday.
SAMPLE_CSV = """Dolly (21 : All Users ),,,,
Date,Name,In Time,Out Time,Total Hours
2025-01-02,Dolly,09:00,18:00,9:00
Sam (22 : All Users ),,,,
Date,Name,In Time,Out Time,Total Hours
2025-01-01,Sam,10:00,12:00,2:00
01-03-25,Sam,09:00,14:00,5:00
2025-01-06,Sam,-,-,-
"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def new_year() -> Holiday:
    return Holiday(holiday_date=date(2025, 1, 1), name="New Year's Day")


@pytest.fixture
def calendar(new_year) -> WorkCalendar:
    return WorkCalendar.build([new_year.holiday_date])


@pytest.fixture
def holidays_repo(new_year) -> InMemoryHolidayRepository:
    return InMemoryHolidayRepository([new_year])


@pytest.fixture
def attendance_service(holidays_repo) -> AttendanceService:
    return AttendanceService(InMemoryAttendanceRepository(), holidays_repo)


@pytest.fixture
def loaded_service(attendance_service, sample_csv) -> AttendanceService:
    attendance_service.load_csv(sample_csv)
    return attendance_service


@pytest.fixture
def app():
    from src.attendance_reconciler.attendance_reconciler.main import create_app

    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def loaded_client(client, sample_csv):
    resp = client.post("/api/upload", data=sample_csv.encode("utf-8"), content_type="text/csv")
    assert resp.status_code == 200
    return client
