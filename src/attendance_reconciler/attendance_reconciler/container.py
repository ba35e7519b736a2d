from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_GEMINI_MODEL, DEFAULT_GEMINI_TIMEOUT, DEFAULT_WEEKEND_DAYS, FULL_DAY_HOURS, HALF_DAY_HOURS
from .enhancement.client import GeminiSuggestionClient, SuggestionClient
from .enhancement.service import EnhancementService
from .holidays.defaults import INITIAL_HOLIDAYS
from .holidays.memory_repository import InMemoryHolidayRepository
from .holidays.service import HolidayService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: InMemoryAttendanceRepository
    holidays_repo: InMemoryHolidayRepository

    attendance_service: AttendanceService
    holiday_service: HolidayService
    report_service: ReportService
    enhancement_service: EnhancementService


def build_container(*, settings: dict, suggestion_client: Optional[SuggestionClient] = None) -> Container:
    full_day = float(settings.get("FULL_DAY_HOURS", FULL_DAY_HOURS))
    half_day = float(settings.get("HALF_DAY_HOURS", HALF_DAY_HOURS))

    attendance_repo = InMemoryAttendanceRepository()
    holidays_repo = InMemoryHolidayRepository(settings.get("HOLIDAYS", INITIAL_HOLIDAYS))

    attendance_service = AttendanceService(
        attendance_repo,
        holidays_repo,
        weekend_days=settings.get("WEEKEND_DAYS", DEFAULT_WEEKEND_DAYS),
        full_day_hours=full_day,
        half_day_hours=half_day,
    )
    holiday_service = HolidayService(holidays_repo, attendance_service)
    report_service = ReportService(attendance_service)

    client = suggestion_client or GeminiSuggestionClient(
        settings.get("GEMINI_API_KEY"),
        model=settings.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        timeout=int(settings.get("GEMINI_TIMEOUT", DEFAULT_GEMINI_TIMEOUT)),
        full_day_hours=full_day,
        half_day_hours=half_day,
    )
    enhancement_service = EnhancementService(attendance_service, client)

    return Container(
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        attendance_service=attendance_service,
        holiday_service=holiday_service,
        report_service=report_service,
        enhancement_service=enhancement_service,
    )
