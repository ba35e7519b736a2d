from __future__ import annotations

from typing import Mapping, Optional

from .model import EmployeeAttendance


class InMemoryAttendanceRepository:
    """Holds the dataset of the current analysis pass (one per process)."""

    def __init__(self):
        self._employees: dict[str, EmployeeAttendance] = {}

    def get_all(self) -> dict[str, EmployeeAttendance]:
        return dict(self._employees)

    def get_employee(self, employee_name: str) -> Optional[EmployeeAttendance]:
        found = self._employees.get(employee_name)
        if found:
            return found
        wanted = (employee_name or "").strip().lower()
        for name, employee in self._employees.items():
            if name.lower() == wanted:
                return employee
        return None

    def replace_all(self, employees: Mapping[str, EmployeeAttendance]) -> None:
        self._employees = dict(employees)

    def save_employee(self, employee: EmployeeAttendance) -> None:
        self._employees[employee.employee_name] = employee

    def clear(self) -> None:
        self._employees = {}
