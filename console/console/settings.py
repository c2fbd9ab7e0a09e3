"""
Django settings for the HR console core.

Only the pieces the core needs are configured here: installed apps,
the external HR backend location and logging. There is no database;
persistence belongs to the backend.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-secret-not-for-production")
DEBUG = os.getenv("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "hr_core",
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "Asia/Riyadh"
# core messages are English; ConsoleSession.language only drives the backend Accept-Language
LANGUAGE_CODE = "en-us"

# ====== External HR backend ======
HR_BACKEND_URL = os.getenv("HR_BACKEND_URL", "http://localhost:8080/api")
HR_BACKEND_TIMEOUT = float(os.getenv("HR_BACKEND_TIMEOUT", "10"))
# page size used when a list screen asks for "everything"
HR_BACKEND_LIST_SIZE = int(os.getenv("HR_BACKEND_LIST_SIZE", "1000"))

# ====== Business rules ======
SAUDI_PERCENTAGE_CEILING = 100.01

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "hr_core": {
            "handlers": ["console"],
            "level": os.getenv("HR_CORE_LOG_LEVEL", "INFO"),
        },
    },
}
