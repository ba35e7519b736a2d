import os


def _weekend_days(raw: str) -> tuple:
    # "5,6" -> (5, 6); date.weekday() numbering, Monday == 0
    return tuple(sorted({int(p) for p in raw.split(",") if p.strip()}))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Work calendar
    WEEKEND_DAYS = _weekend_days(os.environ.get("WEEKEND_DAYS", "5,6"))
    FULL_DAY_HOURS = float(os.environ.get("FULL_DAY_HOURS", "8"))
    HALF_DAY_HOURS = float(os.environ.get("HALF_DAY_HOURS", "4"))

    # Optional AI suggestions; empty key disables them
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", os.environ.get("API_KEY", ""))
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_TIMEOUT = int(os.environ.get("GEMINI_TIMEOUT", "30"))

    MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "5"))
