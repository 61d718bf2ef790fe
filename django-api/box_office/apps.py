from django.apps import AppConfig


class BoxOfficeConfig(AppConfig):
    name = "box_office"
    verbose_name = "Box office"

    def ready(self) -> None:
        from box_office import signals  # noqa: F401
