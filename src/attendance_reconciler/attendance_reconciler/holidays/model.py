from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str

    def to_dict(self) -> dict:
        return {"date": self.holiday_date.isoformat(), "name": self.name}
