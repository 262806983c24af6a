"""Django settings for the DevEvent API.

Every deployment-specific value comes from a ``DEVEVENT_*`` environment
variable. The defaults give a local SQLite setup.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("DEVEVENT_SECRET_KEY", "devevent-insecure-development-key")
DEBUG = _env_bool("DEVEVENT_DEBUG")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DEVEVENT_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "events",
    "bookings",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "devevent.urls"
WSGI_APPLICATION = "devevent.wsgi.application"
APPEND_SLASH = False

if os.environ.get("DEVEVENT_DB_ENGINE", "sqlite").strip().lower() == "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ.get("DEVEVENT_DB_NAME", "devevent"),
            "USER": os.environ.get("DEVEVENT_DB_USER", "devevent"),
            "PASSWORD": os.environ.get("DEVEVENT_DB_PASSWORD", ""),
            "HOST": os.environ.get("DEVEVENT_DB_HOST", "localhost"),
            "PORT": os.environ.get("DEVEVENT_DB_PORT", "5432"),
            "CONN_MAX_AGE": 60,
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.environ.get("DEVEVENT_DB_NAME", str(BASE_DIR / "devevent.sqlite3")),
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "events.handlers.errors.domain_exception_handler",
}

# Event catalog
EVENTS_MAX_SLUG_ATTEMPTS = int(os.environ.get("DEVEVENT_MAX_SLUG_ATTEMPTS", "3"))
EVENTS_SIMILAR_LIMIT = int(os.environ.get("DEVEVENT_SIMILAR_LIMIT", "3"))

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.environ.get("DEVEVENT_LOG_LEVEL", "INFO").upper(),
    },
    "loggers": {
        "django.db.backends": {
            "level": "WARNING",
        },
    },
}
