from __future__ import annotations

import logging
import socket

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

logger = logging.getLogger(__name__)


class RealtimeServer(uvicorn.Server):
    """uvicorn server that announces itself once its sockets are bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("listening on *:%s", self.config.port)


class Command(BaseCommand):
    help = "Serve the page and the Socket.IO namespaces on one listener"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--host",
            dest="host",
            default=settings.REALTIME_HOST,
            help="Interface to bind (default: all interfaces)",
        )
        parser.add_argument(
            "--port",
            dest="port",
            type=int,
            default=settings.REALTIME_PORT,
            help="TCP port to listen on",
        )

    def handle(self, *args, **options) -> None:
        config = uvicorn.Config(
            "config.asgi:application",
            host=options["host"],
            port=options["port"],
            # Logging is configured by Django's LOGGING setting.
            log_config=None,
        )
        RealtimeServer(config).run()
