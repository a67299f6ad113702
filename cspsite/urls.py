from django.urls import include, path

from . import views

urlpatterns = [
    # report-uri плагина (путь берётся из CSP_PLUGIN["fetch_directives"]["report-uri"])
    path("", include("app_csp.urls")),

    path("", views.home, name="home"),
    path("plain/", views.plain, name="plain"),
    path("forced/", views.forced, name="forced"),
    path("rendered/", views.rendered, name="rendered"),
]
