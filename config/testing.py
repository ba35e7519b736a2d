SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

WEEKEND_DAYS = (5, 6)
FULL_DAY_HOURS = 8.0
HALF_DAY_HOURS = 4.0

# Never call the real AI service from tests
GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_TIMEOUT = 5

MAX_UPLOAD_MB = 5
