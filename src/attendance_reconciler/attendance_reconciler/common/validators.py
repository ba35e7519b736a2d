from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_hours(value, field_name: str) -> Optional[float]:
    """Credited hours: None passes through, anything else must be a number of hours in a day."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if math.isnan(hours) or hours < 0 or hours > 24:
        raise ValidationError(f"{field_name} must be between 0 and 24")
    return hours
