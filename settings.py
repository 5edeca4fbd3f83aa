import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)

ENVIRONMENT = os.getenv("PLATFORM_ENVIRONMENT", "local")


def is_production():
    return ENVIRONMENT == "production"


def is_test():
    return ENVIRONMENT == "test"


APPLICATION_NAME = "RAPID_JOBS"
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1")
API_PORT = int(os.getenv("API_PORT", 5000))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "logs/logs.log")

# Email provider (Resend)
RESEND_API_KEY = os.getenv("RESEND_API_KEY", None)
RESEND_API_BASE_URL = os.getenv("RESEND_API_BASE_URL", "https://api.resend.com")

# Sender used for both the confirmation and the operator notification
FROM_EMAIL = os.getenv("FROM_EMAIL", "Rapid Jobs <no-reply@emails.rapidjobs.app>")
# Every successful signup is forwarded here when set
OWNER_EMAIL = os.getenv("OWNER_EMAIL", None)

# Landing page
SUPPORTED_LOCALES = ["en", "es"]
DEFAULT_LOCALE = "en"
LOCALE_COOKIE_NAME = "locale"
LOCALE_COOKIE_MAX_AGE_SECONDS = 365 * 24 * 60 * 60
APP_STORE_URL = os.getenv("APP_STORE_URL", "#")
PLAY_STORE_URL = os.getenv("PLAY_STORE_URL", "#")

# if prometheus py client will be used in multiprocessing mode, needs to point to an existing dir
PROMETHEUS_MULTIPROC_DIR = os.getenv("PROMETHEUS_MULTIPROC_DIR", None)
