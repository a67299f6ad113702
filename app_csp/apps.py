from django.apps import AppConfig
from django.core import checks


class AppCspConfig(AppConfig):
    name = "app_csp"
    verbose_name = "Content-Security-Policy"

    def ready(self):
        # проверки конфигурации через `manage.py check`, без обращения к БД
        from .checks import check_csp_plugin

        checks.register(check_csp_plugin, checks.Tags.security)
