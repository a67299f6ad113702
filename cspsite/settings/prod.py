"""
Django settings — PROD.
Импортируем всё из dev-настроек и ПЕРЕОПРЕДЕЛЯЕМ критичное для прода:
- DEBUG=False, ALLOWED_HOSTS
- CSP-заголовки только на https (за прокси — по X-Forwarded-Proto)
- CSP-отчёты в файл + консоль
"""

from .dev import *  # noqa: F401,F403
from pathlib import Path

# ───────────────────────────────────────────────────────────────────────────────
# Общие
# ───────────────────────────────────────────────────────────────────────────────
DEBUG = False
ALLOWED_HOSTS = ["csp.example.com"]
SECRET_KEY = "PUT-A-STRONG-SECRET-KEY-HERE"

# Мини-страховка от человеческого фактора:
assert DEBUG is False, "DEBUG must be False in production"
assert ALLOWED_HOSTS and ALLOWED_HOSTS != ["*"], "ALLOWED_HOSTS must be set explicitly"

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# ───────────────────────────────────────────────────────────────────────────────
# CSP
# ───────────────────────────────────────────────────────────────────────────────
CSP_PLUGIN = {
    "https_only": True,
    "varieties_to_include": ["view", "plain"],
    "fetch_directives": {
        "default-src": ["https:", "unsafe-inline", "unsafe-eval"],
        "report-uri": "https://csp.example.com/csp_reports",
    },
}

# ───────────────────────────────────────────────────────────────────────────────
# Логи (CSP-отчёты в файл + консоль)
# ───────────────────────────────────────────────────────────────────────────────
LOG_DIR = Path(BASE_DIR, "logs")
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "csp_tags": {"()": "app_csp.logging_filters.LogTagsFilter"},
    },
    "formatters": {
        "csp": {"format": "%(asctime)s %(levelname)s %(tags_label)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "filters": ["csp_tags"], "formatter": "csp"},
        "csp_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(LOG_DIR / "csp.log"),
            "maxBytes": 1_048_576,  # 1 MB
            "backupCount": 3,
            "encoding": "utf-8",
            "filters": ["csp_tags"],
            "formatter": "csp",
        },
    },
    "loggers": {
        # отчёты CSP — и в файл, и в stdout (чтобы ловил supervisor/systemd)
        "app_csp.views_security": {"handlers": ["csp_file", "console"], "level": "INFO", "propagate": False},
    },
}
