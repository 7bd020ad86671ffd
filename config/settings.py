import os
from pathlib import Path

from dotenv import load_dotenv
from django.utils.translation import gettext_lazy as _

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def env_list(name, default=""):
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = os.getenv("DEBUG", "False").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = env_list("ALLOWED_HOSTS", "localhost,127.0.0.1")


# Application definition

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_filters",
    # Project apps
    "school.apps.SchoolConfig",
    "accounts.apps.AccountsConfig",
    "core.apps.CoreConfig",
    "course.apps.CourseConfig",
    "result.apps.ResultConfig",
    "accounting.apps.AccountingConfig",
    "sms.apps.SmsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "accounts.middleware.IdentityMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "school.context_processors.school_context",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"


# Database

DB_ENGINE = os.getenv("DB_ENGINE", "django.db.backends.sqlite3")

if DB_ENGINE.endswith("sqlite3"):
    DATABASES = {
        "default": {
            "ENGINE": DB_ENGINE,
            "NAME": os.getenv("DB_NAME", str(BASE_DIR / "db.sqlite3")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": DB_ENGINE,
            "NAME": os.getenv("DB_NAME", "schoolhub"),
            "USER": os.getenv("DB_USER", ""),
            "PASSWORD": os.getenv("DB_PASSWORD", ""),
            "HOST": os.getenv("DB_HOST", "localhost"),
            "PORT": os.getenv("DB_PORT", "5432"),
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = os.getenv("TIME_ZONE", "Africa/Accra")

USE_I18N = True

USE_TZ = True


# Static files

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"


# Identity provider
# Session tokens are JWTs issued by the hosted provider. With a JWKS URL the
# signing key is fetched from the provider, otherwise SECRET_KEY is used.

IDENTITY_PROVIDER = {
    "JWKS_URL": os.getenv("IDENTITY_JWKS_URL", ""),
    "ISSUER": os.getenv("IDENTITY_ISSUER", ""),
    "SECRET_KEY": os.getenv("IDENTITY_SECRET_KEY", ""),
    "ALGORITHMS": env_list("IDENTITY_ALGORITHMS", "RS256"),
    "AUTHORIZED_PARTIES": env_list("IDENTITY_AUTHORIZED_PARTIES"),
    "LEEWAY": int(os.getenv("IDENTITY_LEEWAY", "5")),
    "SESSION_COOKIE": os.getenv("IDENTITY_SESSION_COOKIE", "__session"),
    "HOSTED_SIGN_IN_URL": os.getenv("IDENTITY_SIGN_IN_URL", ""),
}

SIGN_IN_URL = "/sign-in"


# Remote images

IMAGES_REMOTE_HOSTS = [
    "images.pexels.com",
    "res.cloudinary.com",
    "marketplace.canva.com",
]

IMAGE_FETCH_TIMEOUT = float(os.getenv("IMAGE_FETCH_TIMEOUT", "10"))


# SMS (Hubtel)

HUBTEL_CLIENT_ID = os.getenv("HUBTEL_CLIENT_ID", "")
HUBTEL_CLIENT_SECRET = os.getenv("HUBTEL_CLIENT_SECRET", "")
HUBTEL_SMS_FROM = os.getenv("HUBTEL_SMS_FROM", "SchoolApp")
SMS_TIMEOUT = float(os.getenv("SMS_TIMEOUT", "15"))


# Site

SITE_NAME = os.getenv("SITE_NAME", "SchoolHub")
SITE_DESCRIPTION = "School Management System"
CURRENCY = "GHS"
ITEMS_PER_PAGE = 10


# Terms

FIRST_TERM = "FIRST"
SECOND_TERM = "SECOND"
THIRD_TERM = "THIRD"
FINAL_TERM = "FINAL"

TERM_CHOICES = (
    (FIRST_TERM, _("First Term")),
    (SECOND_TERM, _("Second Term")),
    (THIRD_TERM, _("Third Term")),
    (FINAL_TERM, _("Final Term")),
)


# Logging

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
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
