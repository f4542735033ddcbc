"""Django settings for the cinema tickets service.

Everything environment-specific comes from environment variables.
There is no persistence; the database entry only satisfies contrib apps.
"""

import os


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-secret-change-in-production")
DEBUG = _env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "tickets.apps.TicketsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True
APPEND_SLASH = False
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
}

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON = _env_bool("LOG_JSON")
LOGGING_CONFIG = None

# Third-party gateways
TICKETS_PAYMENT_PROCESSOR = os.environ.get(
    "TICKETS_PAYMENT_PROCESSOR",
    "tickets.gateways.stub_gateways.LoggingPaymentProcessor",
)
TICKETS_SEAT_ALLOCATOR = os.environ.get(
    "TICKETS_SEAT_ALLOCATOR",
    "tickets.gateways.stub_gateways.LoggingSeatAllocator",
)
