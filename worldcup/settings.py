"""
Django settings for the worldcup project.

The scoreboard keeps everything in memory, so there is no database and no
web surface; Django provides configuration, logging and management commands.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("WORLDCUP_SECRET_KEY", "worldcup-scoreboard-dev-key")

DEBUG = os.environ.get("WORLDCUP_DEBUG", "") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "worldcup.scoreboard_core",
    "worldcup.scoreboard",
]

DATABASES = {}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(levelname)s %(asctime)s %(module)s %(message)s"
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "worldcup": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else "INFO",
            "propagate": True,
        },
    },
}

TIME_ZONE = "UTC"

USE_TZ = True

# Scoreboard settings
SCOREBOARD_MAX_SIMULATED_SCORE = 10
SCOREBOARD_FAKER_LOCALE = "en_US"
