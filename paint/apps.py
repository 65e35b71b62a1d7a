from django.apps import AppConfig


class PaintConfig(AppConfig):
    name = "paint"
    verbose_name = "Paint"
