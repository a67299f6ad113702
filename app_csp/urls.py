from django.urls import path

from .conf import get_options, report_path
from .views_security import make_report_view

# Маршрут для отчётов браузера, только если в fetch_directives есть report-uri.
# Подключать без префикса: path("", include("app_csp.urls")).
_options = get_options()
_report_path = report_path(_options)

urlpatterns = []
if _report_path:
    urlpatterns.append(
        path(_report_path.lstrip("/"), make_report_view(_options), name="csp_report"),
    )
