import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

WEEKEND_DAYS = Config.WEEKEND_DAYS
FULL_DAY_HOURS = Config.FULL_DAY_HOURS
HALF_DAY_HOURS = Config.HALF_DAY_HOURS

GEMINI_API_KEY = Config.GEMINI_API_KEY
GEMINI_MODEL = Config.GEMINI_MODEL
GEMINI_TIMEOUT = Config.GEMINI_TIMEOUT

MAX_UPLOAD_MB = Config.MAX_UPLOAD_MB
