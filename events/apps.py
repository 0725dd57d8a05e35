from django.apps import AppConfig

from events.connection import DatabaseConnection


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"

    def ready(self) -> None:
        self.database = DatabaseConnection()
