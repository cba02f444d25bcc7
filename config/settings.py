"""
Notifier – Django Settings (Infrastructure Only)
=================================================
Django hosts the notifier: it supplies configuration and the
per-request page context. The notifier core does not import Django.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("NOTIFIER_SECRET_KEY", "notifier-dev-key")

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "adapters.django_notifier.apps.NotifierConfig",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "adapters.django_notifier.middleware.PageContextMiddleware",
]

# ── Database ──────────────────────────────────────────────────
# The notifier keeps no database state.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ── Notifier ──────────────────────────────────────────────────
# Off | var_export | print_r | true | false
NOTIFIER_TRACE = os.environ.get("NOTIFIER_TRACE", "")

# Trace file directory; unset sends trace lines to the
# "notifier.trace" logger instead.
NOTIFIER_LOG_DIR = os.environ.get("NOTIFIER_LOG_DIR") or None

NOTIFIER_ADMIN_PREFIX = "/admin/"

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "notifier": {
            "handlers": ["console"],
            "level": os.environ.get("NOTIFIER_LOG_LEVEL", "INFO"),
        },
    },
}
