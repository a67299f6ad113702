from __future__ import annotations

from typing import Any, Iterable, Mapping

from csp.constants import NONE, SELF, UNSAFE_EVAL, UNSAFE_INLINE

# ключевые слова CSP пишутся в кавычках, URL и схемы без кавычек
KEYWORDS = frozenset(token.strip("'") for token in (NONE, SELF, UNSAFE_INLINE, UNSAFE_EVAL))


def quotify(token: str) -> str:
    if token in KEYWORDS:
        return f"'{token}'"
    return token


def render_directive(name: str, value: Any) -> str | None:
    """
    Одна директива политики:
      - строка -> "name token";
      - список/кортеж -> "name t1 t2 ...", пустой список директиву выкидывает;
      - "" -> просто "name" (директивы без значения, напр. upgrade-insecure-requests);
      - None -> выкидываем.
    """
    if value is None:
        return None
    if isinstance(value, str):
        tokens: Iterable[str] = [value] if value else []
    elif isinstance(value, (list, tuple)):
        if not value:
            return None
        tokens = [str(item) for item in value]
    else:
        tokens = [str(value)]
    rendered = " ".join(quotify(t) for t in tokens)
    return f"{name} {rendered}" if rendered else name


def render_policy(directives: Mapping[str, Any]) -> str:
    """
    Строка заголовка из словаря директив, порядок ключей сохраняется:
    {"default-src": ["https:", "unsafe-inline"], "report-uri": "/r"}
      -> "default-src https: 'unsafe-inline';report-uri /r"
    """
    parts = []
    for name, value in directives.items():
        part = render_directive(name, value)
        if part is not None:
            parts.append(part)
    return ";".join(parts)
