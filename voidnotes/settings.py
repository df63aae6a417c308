"""
Django settings for the voidnotes project.

Only the pieces the Markdown rendering app needs are configured here; the
host note application layers its own database, auth and URL settings on top.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "voidnotes-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost").split(",")

INSTALLED_APPS = [
    "notes",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

USE_TZ = True

# Markdown rendering
MARKDOWN_RENDERER = {
    # Pass raw HTML from note bodies through to the sanitizer instead of
    # rendering it as literal text.
    "ALLOW_RAW_HTML": os.environ.get("MARKDOWN_ALLOW_RAW_HTML", "false").lower() == "true",
    # Guess a language for fenced code blocks without an info string.
    "DETECT_LANGUAGE": True,
    "PANDOC_EXTRA_ARGS": [],
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "notes.markdown": {
            "handlers": ["console"],
            "level": os.environ.get("MARKDOWN_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
