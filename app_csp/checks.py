from django.conf import settings
from django.core.checks import Error, Warning
from django.core.exceptions import ImproperlyConfigured

from .conf import get_options
from .views_security import resolve_route_handler

MIDDLEWARE_PATH = "app_csp.middleware.ContentSecurityPolicyMiddleware"


def check_csp_plugin(app_configs=None, **kwargs):
    messages = []
    if MIDDLEWARE_PATH not in getattr(settings, "MIDDLEWARE", []):
        messages.append(Warning(
            "CSP middleware is not installed, headers will not be added.",
            hint=f"Add '{MIDDLEWARE_PATH}' to MIDDLEWARE.",
            id="app_csp.W001",
        ))
    try:
        resolve_route_handler(get_options())
    except ImproperlyConfigured as exc:
        messages.append(Error(str(exc), id="app_csp.E001"))
    return messages
