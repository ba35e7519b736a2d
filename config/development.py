import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

WEEKEND_DAYS = Config.WEEKEND_DAYS
FULL_DAY_HOURS = Config.FULL_DAY_HOURS
HALF_DAY_HOURS = Config.HALF_DAY_HOURS

GEMINI_API_KEY = Config.GEMINI_API_KEY
GEMINI_MODEL = Config.GEMINI_MODEL
GEMINI_TIMEOUT = Config.GEMINI_TIMEOUT

MAX_UPLOAD_MB = Config.MAX_UPLOAD_MB
