"""
Configuración de Django para el proyecto paint_site.

Solo se usa la app `paint`; no hay base de datos porque los trazos
viven en memoria y lo único que se guarda es el PNG exportado.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("PAINT_SECRET_KEY", "django-insecure-paint-dev-key")
DEBUG = os.environ.get("PAINT_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.environ.get("PAINT_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "paint",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "paint_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "paint_site.wsgi.application"

DATABASES = {}

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Lienzo de exportación y carpeta destino
PAINT_EXPORT_WIDTH = 1080
PAINT_EXPORT_HEIGHT = 1920
PAINT_EXPORT_DIR = os.environ.get("PAINT_EXPORT_DIR", str(BASE_DIR / "media" / "exports"))

LOG_LEVEL = os.environ.get("PAINT_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "paint": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
    },
}
