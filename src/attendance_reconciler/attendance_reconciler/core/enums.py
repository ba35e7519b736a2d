from __future__ import annotations

from enum import Enum
from typing import Optional

from .constants import FULL_DAY_HOURS


class AttendanceStatus(str, Enum):
    """Daily attendance status; exactly one applies to each day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half-day"
    SHORT_HOURS = "Short Hours"
    WEEKEND = "Weekend"
    HOLIDAY = "Public Holiday"
    WORK_ON_HOLIDAY = "Work on Holiday"
    WORK_ON_WEEKEND = "Work on Weekend"
    UNKNOWN = "Unknown"


class ReasonCode(str, Enum):
    """Quick reasons offered when correcting a day."""

    OUT_OF_OFFICE = "Out of Office"
    SICK_LEAVE = "Sick Leave"
    APPROVED_LEAVE = "Approved Leave"
    CLIENT_MEETING = "Client Meeting"
    FORGOT_TO_PUNCH_OUT = "Forgot to Punch Out"
    OTHER = "Other"

    @property
    def credit_hours(self) -> Optional[float]:
        if self in _CREDITED_REASONS:
            return FULL_DAY_HOURS
        return None


_CREDITED_REASONS = frozenset(
    {
        ReasonCode.OUT_OF_OFFICE,
        ReasonCode.SICK_LEAVE,
        ReasonCode.APPROVED_LEAVE,
        ReasonCode.CLIENT_MEETING,
    }
)


# Statuses the suggestion collaborator is asked about.
FLAGGED_STATUSES = frozenset(
    {AttendanceStatus.ABSENT, AttendanceStatus.HALF_DAY, AttendanceStatus.SHORT_HOURS}
)
