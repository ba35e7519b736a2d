from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import AttendanceStatus
from ..model import AttendanceDay, WorkCalendar


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, *, day: AttendanceDay, calendar: WorkCalendar) -> StatusDecision:
        raise NotImplementedError
