from django.apps import AppConfig
from django.conf import settings

from tickets.core.logging import setup_logging


class TicketsConfig(AppConfig):
    name = "tickets"

    def ready(self) -> None:
        setup_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
