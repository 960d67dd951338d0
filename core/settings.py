"""
Django settings for the navmenu development and test project.

Reads configuration from environment variables (with sensible defaults for
local development).  Values can also be placed in a `.env` file in the
project root.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables from .env file in project root
from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")


# ==============================================================================
# ENVIRONMENT HELPERS
# ==============================================================================


def _env(key, default=""):
    """Return an environment variable or *default*."""
    return os.environ.get(key, default)


def _env_bool(key, default=False):
    """Return an environment variable as a boolean."""
    return _env(key, str(default)).lower() in ("true", "1", "yes")


def _env_list(key, default="", sep=","):
    """Return an environment variable as a list of strings."""
    raw = _env(key, default)
    return [item.strip() for item in raw.split(sep) if item.strip()]


# ==============================================================================
# SECURITY
# ==============================================================================

DEBUG = _env_bool("DEBUG", False)

SECRET_KEY = _env("SECRET_KEY") or "insecure-secret-key-do-NOT-use-in-prod"

ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")


# ==============================================================================
# APPLICATIONS
# ==============================================================================

INSTALLED_APPS = [
    "navmenu",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "navmenu.middleware.MenuMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "navmenu.context_processors.menus",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True


# ==============================================================================
# MENUS
# ==============================================================================

# Project-wide defaults for every menu (see navmenu.options.MenuOptions).
NAVMENU = {
    "active_class": _env("NAVMENU_ACTIVE_CLASS", "active"),
    "restful": _env_bool("NAVMENU_RESTFUL", False),
}

# Menus built for every request by navmenu.middleware.MenuMiddleware.
NAVMENU_MENUS = {
    "main": "core.menus.build_main",
    "footer": "core.menus.build_footer",
}


# ==============================================================================
# LOGGING
# ==============================================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
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
        "django": {
            "handlers": ["console"],
            "level": _env("DJANGO_LOG_LEVEL", "INFO"),
        },
        "navmenu": {
            "handlers": ["console"],
            "level": _env("APP_LOG_LEVEL", "INFO"),
        },
    },
}
