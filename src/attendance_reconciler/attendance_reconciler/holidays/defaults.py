from __future__ import annotations

from datetime import date

from .model import Holiday

# UAE public holidays 2025; users edit the list at runtime.
INITIAL_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(date(2025, 1, 1), "New Year's Day"),
    Holiday(date(2025, 3, 30), "Eid al-Fitr 1"),
    Holiday(date(2025, 3, 31), "Eid al-Fitr 2"),
    Holiday(date(2025, 4, 1), "Eid al-Fitr 3"),
    Holiday(date(2025, 6, 5), "Arafat Day"),
    Holiday(date(2025, 6, 6), "Eid al-Adha 1"),
    Holiday(date(2025, 6, 7), "Eid al-Adha 2"),
    Holiday(date(2025, 6, 8), "Eid al-Adha 3"),
    Holiday(date(2025, 6, 26), "Islamic New Year"),
    Holiday(date(2025, 9, 4), "Prophet Muhammad's Birthday"),
    Holiday(date(2025, 12, 2), "UAE National Day 1"),
    Holiday(date(2025, 12, 3), "UAE National Day 2"),
)
