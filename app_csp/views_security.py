import json
import logging
from functools import partial

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpRequest, HttpResponse
from django.utils.module_loading import import_string
from django.views.decorators.csrf import csrf_exempt

from .conf import CSPOptions

logger = logging.getLogger(__name__)


def parse_report(body: bytes):
    """JSON, если тело парсится; иначе сырой текст как есть."""
    text = body.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def log_report(payload, tags) -> None:
    logger.warning("CSP report: %s", payload, extra={"tags": list(tags), "report": payload})


def csp_report(request: HttpRequest, *args, log_tags=CSPOptions.log_tags, **kwargs):
    """
    Обработчик по умолчанию: логируем отчёт, отвечаем 200 без тела.
    Content-Type не проверяем: любой отчёт (csp-report, json, html, мусор) даёт 200.
    """
    log_report(parse_report(request.body), log_tags)
    return HttpResponse(status=200)


def resolve_route_handler(options: CSPOptions):
    handler = options.route_handler
    if handler is None:
        # теги фиксируются при загрузке, как и вся остальная конфигурация
        return partial(csp_report, log_tags=options.log_tags)
    if isinstance(handler, str):
        try:
            handler = import_string(handler)
        except ImportError as exc:
            raise ImproperlyConfigured(f"CSP_PLUGIN['route_handler']: {exc}") from exc
    if not callable(handler):
        raise ImproperlyConfigured("CSP_PLUGIN['route_handler'] должен быть вызываемым")
    return handler


def make_report_view(options: CSPOptions):
    """View для report-uri: любой метод, без CSRF, тело не парсим заранее."""
    handler = resolve_route_handler(options)

    @csrf_exempt
    def report_view(request: HttpRequest, *args, **kwargs):
        return handler(request, *args, **kwargs)

    return report_view
