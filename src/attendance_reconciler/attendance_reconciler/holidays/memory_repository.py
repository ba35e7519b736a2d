from __future__ import annotations

from typing import Iterable, Sequence

from .model import Holiday


class InMemoryHolidayRepository:
    def __init__(self, holidays: Iterable[Holiday] = ()):
        self._holidays: tuple[Holiday, ...] = tuple(holidays)

    def list_all(self) -> Sequence[Holiday]:
        return self._holidays

    def replace_all(self, holidays: Sequence[Holiday]) -> None:
        self._holidays = tuple(holidays)
