import pytest
from django.http import HttpResponse

from app_csp.middleware import ContentSecurityPolicyMiddleware


# --- middleware с нужным CSP_PLUGIN; ответ по умолчанию: обычный HttpResponse ("plain") ---
@pytest.fixture
def make_middleware(settings):
    def _make(response=None, **options):
        settings.CSP_PLUGIN = options
        return ContentSecurityPolicyMiddleware(
            lambda request: response if response is not None else HttpResponse("good")
        )
    return _make

