from django.http import HttpResponse
from django.shortcuts import render
from django.template.response import TemplateResponse

from app_csp.decorators import csp_force_header, csp_variety


def home(request):
    """Страница со смесью http/https картинок: браузер пришлёт отчёт по img-src."""
    return TemplateResponse(request, "cspsite/index.html", {
        "images": ["http://localhost:8000/a.jpg", "https://localhost:8000/b.jpg"],
    })


def plain(request):
    return HttpResponse("good")


@csp_force_header
def forced(request):
    return HttpResponse("good")


@csp_variety("view")
def rendered(request):
    # render() возвращает обычный HttpResponse, тип задаём явно
    return render(request, "cspsite/index.html", {"images": ["https://localhost:8000/b.jpg"]})
