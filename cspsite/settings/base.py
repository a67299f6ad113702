from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# --- режим ---
DEBUG = True  # <<< В проде поставите False

SECRET_KEY = "CHANGE_ME_IN_PROD"
ALLOWED_HOSTS: list[str] = ["localhost", "127.0.0.1", "testserver"]

LANGUAGE_CODE = "en"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "app_csp.apps.AppCspConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",

    # CSP последней, чтобы видеть финальный ответ
    "app_csp.middleware.ContentSecurityPolicyMiddleware",
]

ROOT_URLCONF = "cspsite.urls"
WSGI_APPLICATION = "cspsite.wsgi.application"

TEMPLATES = [{
    "BACKEND": "django.template.backends.django.DjangoTemplates",
    "DIRS": [BASE_DIR / "cspsite" / "templates"],
    "APP_DIRS": True,
    "OPTIONS": {
        "context_processors": [
            "django.template.context_processors.debug",
            "django.template.context_processors.request",
            "django.template.context_processors.static",
        ],
    },
}]

# SQLite по умолчанию (плагину БД не нужна)
DATABASES = {
    "default": {"ENGINE": "django.db.backends.sqlite3", "NAME": BASE_DIR / "db.sqlite3"}
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

STATIC_URL = "/static/"

# --- CSP ---
# обычные ответы (HttpResponse) это "plain", шаблонные (TemplateResponse) это "view"
CSP_PLUGIN = {
    "varieties_to_include": ["view"],
    "fetch_directives": {
        # сообщаем о картинках не по https
        "img-src": "https:",
        # куда браузер шлёт отчёт
        "report-uri": "http://localhost:8000/csp_reports",
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "csp_tags": {"()": "app_csp.logging_filters.LogTagsFilter"},
    },
    "formatters": {
        "csp": {"format": "%(asctime)s %(levelname)s %(name)s %(tags_label)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
        "csp_console": {"class": "logging.StreamHandler", "filters": ["csp_tags"], "formatter": "csp"},
    },
    "loggers": {
        "app_csp.views_security": {"handlers": ["csp_console"], "level": "INFO", "propagate": False},
        "app_csp.interceptor": {"handlers": ["console"], "level": "INFO"},
    },
}
