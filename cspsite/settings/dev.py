"""
Django settings — DEV.
Всё из base; CSP в report-only режиме, отчёты в консоль.
"""

from .base import *  # noqa: F401,F403

DEBUG = True
ALLOWED_HOSTS = ["*"]  # dev: удобно *, в prod — список доменов

LOGGING["loggers"]["app_csp.interceptor"]["level"] = "DEBUG"
