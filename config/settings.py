"""
Picker – Django Settings (Infrastructure Only)
==============================================
Django serves as the framework container for the picker core:
translation catalogs for month names, time zone activation, and
the thin HTTP adapter. Picker logic does not depend on a database.
"""

from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
# TODO: Move to environment variable before any deployment
SECRET_KEY = "picker-dev-key-replace-before-deployment"

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "picker",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL ───────────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Internationalization ──────────────────────────────────────
# TIME_ZONE is the zone FORCE_SYSTEM_TIME_ZONE reinterprets into
# unless a request activates another one.
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ── Picker Defaults ───────────────────────────────────────────
# PICKER_LOCALE falls back to LANGUAGE_CODE when unset.
PICKER_LOCALE = None
PICKER_USE_24_HOUR_FORMAT = False
PICKER_TIME_ZONE_OPTION = "KEEP_UNCHANGED"
PICKER_SPECIFIC_TIME_ZONE = None
