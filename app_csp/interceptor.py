"""
Решение «ставить ли CSP-заголовки на ответ» без привязки к Django.

Middleware заворачивает запрос в RequestInfo, а ответ в NormalResponse
или ErrorResponse; всё остальное делает ResponseInterceptor.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import MutableMapping, Protocol

from .conf import CSPOptions
from .policy import render_policy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestInfo:
    path: str
    secure: bool = False
    forwarded_proto: str | None = None
    force_header: bool = False

    def get_path(self) -> str:
        return self.path

    def is_https(self) -> bool:
        if self.secure:
            return True
        if not self.forwarded_proto:
            return False
        # за цепочкой прокси значение бывает списком: "https, http"
        first = self.forwarded_proto.split(",")[0].strip().lower()
        return first == "https"


class ResponseCapability(Protocol):
    def get_variety(self) -> str | None: ...

    def set_header(self, key: str, value: str) -> None: ...

    def is_error(self) -> bool: ...


@dataclass
class NormalResponse:
    headers: MutableMapping[str, str]
    variety: str | None = None

    def get_variety(self) -> str | None:
        return self.variety

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def is_error(self) -> bool:
        return False


@dataclass
class ErrorResponse:
    headers: MutableMapping[str, str]
    variety: str | None = None
    status_code: int = 500

    def get_variety(self) -> str | None:
        return self.variety

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def is_error(self) -> bool:
        return True


class ResponseInterceptor:
    """
    Политика рендерится один раз в __init__ и дальше только читается.
    Порядок проверок:
      1) сам report-uri не помечаем;
      2) тип ответа должен быть в varieties_to_include (если роут не форсит заголовок);
      3) при https_only только https (или доверенный X-Forwarded-Proto: https);
      4) ставим Report-Only и/или upgrade-insecure-requests.
    """

    def __init__(self, options: CSPOptions):
        self.options = options
        self.policy = render_policy(options.fetch_directives)
        self.report_path = options.report_path

    def should_attach(self, request: RequestInfo, response: ResponseCapability) -> bool:
        if self.report_path is not None and request.get_path() == self.report_path:
            logger.debug("CSP skip %s: report endpoint", request.get_path())
            return False

        if not request.force_header and response.get_variety() not in self.options.varieties_to_include:
            logger.debug("CSP skip %s: variety %r", request.get_path(), response.get_variety())
            return False

        if self.options.https_only and not request.is_https():
            logger.debug("CSP skip %s: not https", request.get_path())
            return False

        return True

    def intercept(self, request: RequestInfo, response: ResponseCapability) -> bool:
        if not self.should_attach(request, response):
            return False

        attached = False
        if self.options.report_errors:
            response.set_header(self.options.header_key, self.policy)
            attached = True
        if self.options.upgrade_insecure_requests:
            response.set_header(self.options.policy_header_key, self.options.policy_header)
            attached = True
        return attached
