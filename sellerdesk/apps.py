from django.apps import AppConfig


class SellerdeskConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sellerdesk'

    def ready(self):
        from . import signals  # noqa: F401
