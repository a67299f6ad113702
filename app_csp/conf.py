from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple
from urllib.parse import urlparse

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver

SETTINGS_NAME = "CSP_PLUGIN"

DEFAULT_FETCH_DIRECTIVES = MappingProxyType({
    "default-src": ("https:",),
    "report-uri": "http://localhost/csp_reports",
})


@dataclass(frozen=True)
class CSPOptions:
    """
    Неизменяемые настройки плагина.
    Собираются один раз из дефолтов + settings.CSP_PLUGIN (fetch_directives сливается
    по ключам поверх дефолтных; None или [] у ключа убирает дефолтную директиву).
    """
    https_only: bool = False
    log_tags: Tuple[str, ...] = ("content-security-policy-report",)
    varieties_to_include: Tuple[str, ...] = ("view",)
    fetch_directives: Mapping[str, Any] = field(default_factory=lambda: DEFAULT_FETCH_DIRECTIVES)
    report_errors: bool = True
    upgrade_insecure_requests: bool = True
    header_key: str = "Content-Security-Policy-Report-Only"
    policy_header_key: str = "Content-Security-Policy"
    policy_header: str = "upgrade-insecure-requests;"
    route_handler: Callable | str | None = None
    forwarded_proto_header: str | None = "X-Forwarded-Proto"

    @classmethod
    def merge(cls, overrides: Mapping[str, Any] | None = None) -> "CSPOptions":
        overrides = dict(overrides or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ImproperlyConfigured(
                f"{SETTINGS_NAME}: неизвестные ключи {', '.join(unknown)}"
            )

        if "fetch_directives" in overrides:
            overrides["fetch_directives"] = _freeze_directives(overrides["fetch_directives"], base=DEFAULT_FETCH_DIRECTIVES)
        for name in ("log_tags", "varieties_to_include"):
            if name in overrides:
                overrides[name] = _as_tuple(overrides[name])
        return cls(**overrides)

    @property
    def report_uri(self) -> str | None:
        value = self.fetch_directives.get("report-uri")
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        return value or None

    @property
    def report_path(self) -> str | None:
        """Путь из report-uri (без схемы/хоста/query): 'http://h/csp' -> '/csp'."""
        uri = self.report_uri
        if not uri:
            return None
        path = urlparse(uri).path or "/"
        if not path.startswith("/"):
            path = "/" + path
        return path


def _as_tuple(value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _freeze_directives(value, base: Mapping[str, Any] = MappingProxyType({})) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ImproperlyConfigured(f"{SETTINGS_NAME}['fetch_directives'] должен быть словарём")
    frozen = dict(base)
    for name, tokens in value.items():
        # списки -> кортежи, чтобы политика не менялась после загрузки
        frozen[name] = tuple(tokens) if isinstance(tokens, list) else tokens
    return MappingProxyType(frozen)


def report_path(options: CSPOptions) -> str | None:
    return options.report_path


@lru_cache(maxsize=None)
def get_options() -> CSPOptions:
    """Настройки из settings.CSP_PLUGIN; кэш сбрасывается при override_settings."""
    raw = getattr(settings, SETTINGS_NAME, None) or {}
    if not isinstance(raw, Mapping):
        raise ImproperlyConfigured(f"{SETTINGS_NAME} должен быть словарём")
    return CSPOptions.merge(raw)


@receiver(setting_changed)
def _reset_options(*, setting, **kwargs):
    if setting == SETTINGS_NAME:
        get_options.cache_clear()
