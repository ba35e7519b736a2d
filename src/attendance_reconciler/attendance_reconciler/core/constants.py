"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FULL_DAY_HOURS = 8.0
HALF_DAY_HOURS = 4.0

# date.weekday(): Monday == 0 ... Sunday == 6
DEFAULT_WEEKEND_DAYS = frozenset({5, 6})

PLACEHOLDER = "-"
ROSTER_MARKER = "All Users"
DATE_COLUMN_HEADER = "date"

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_TIMEOUT = 30
