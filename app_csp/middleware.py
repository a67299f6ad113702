from django.http import FileResponse, StreamingHttpResponse
from django.template.response import SimpleTemplateResponse
from django.utils.deprecation import MiddlewareMixin

from .conf import get_options
from .interceptor import ErrorResponse, NormalResponse, RequestInfo, ResponseInterceptor


def response_variety(response) -> str:
    """
    Тип ответа в терминах varieties_to_include:
      view: шаблонный ответ, file: FileResponse, stream: прочий стриминг, plain: всё остальное.
    Явный атрибут response.csp_variety важнее.
    render() отдаёт обычный HttpResponse, то есть "plain"; для таких view есть
    @csp_variety("view") из app_csp.decorators.
    """
    explicit = getattr(response, "csp_variety", None)
    if explicit:
        return explicit
    if isinstance(response, SimpleTemplateResponse):
        return "view"
    if isinstance(response, FileResponse):
        return "file"
    if isinstance(response, StreamingHttpResponse):
        return "stream"
    return "plain"


class ContentSecurityPolicyMiddleware(MiddlewareMixin):
    """
    Ставит Content-Security-Policy-Report-Only и Content-Security-Policy
    (upgrade-insecure-requests) по правилам ResponseInterceptor.
    Политика считается один раз при загрузке middleware.
    """

    def __init__(self, get_response):
        super().__init__(get_response)
        self.options = get_options()
        self.interceptor = ResponseInterceptor(self.options)

    def process_view(self, request, view_func, view_args, view_kwargs):
        # флаг с роута (@csp_force_header) живёт на самой view-функции
        if getattr(view_func, "csp_force_header", False):
            request.csp_force_header = True
        return None

    def _request_info(self, request) -> RequestInfo:
        forwarded = None
        if self.options.forwarded_proto_header:
            forwarded = request.headers.get(self.options.forwarded_proto_header)
        return RequestInfo(
            path=request.path_info,
            secure=request.is_secure(),
            forwarded_proto=forwarded,
            force_header=bool(getattr(request, "csp_force_header", False)),
        )

    def _wrap(self, response):
        variety = response_variety(response)
        if response.status_code >= 400:
            return ErrorResponse(response.headers, variety, response.status_code)
        return NormalResponse(response.headers, variety)

    def process_response(self, request, response):
        self.interceptor.intercept(self._request_info(request), self._wrap(response))
        return response
