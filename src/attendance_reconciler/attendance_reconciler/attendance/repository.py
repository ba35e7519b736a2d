from __future__ import annotations

from typing import Mapping, Optional, Protocol

from .model import EmployeeAttendance


class AttendanceRepository(Protocol):
    def get_all(self) -> dict[str, EmployeeAttendance]:
        raise NotImplementedError

    def get_employee(self, employee_name: str) -> Optional[EmployeeAttendance]:
        raise NotImplementedError

    def replace_all(self, employees: Mapping[str, EmployeeAttendance]) -> None:
        """Swap the whole dataset in one step."""

        raise NotImplementedError

    def save_employee(self, employee: EmployeeAttendance) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
