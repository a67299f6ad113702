from functools import wraps


def csp_force_header(view_func):
    """
    Ставить CSP-заголовки на этот роут независимо от varieties_to_include.
    https_only при этом продолжает действовать.
    """
    @wraps(view_func)
    def _wrapped(*args, **kwargs):
        return view_func(*args, **kwargs)

    _wrapped.csp_force_header = True
    return _wrapped


def csp_variety(variety):
    """
    Задать тип ответа для varieties_to_include.
    Нужен для view на render(): без него ответ считается "plain".
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(*args, **kwargs):
            response = view_func(*args, **kwargs)
            response.csp_variety = variety
            return response
        return _wrapped
    return decorator
