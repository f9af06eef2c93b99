"""Socket.IO server for the browser page served at `/`.

The page uses `socket.io-client` with:
- server URL: http://<host>:3000
- namespace: /hello
- default Engine.IO path: /socket.io/

Nothing here is module-level state: `build_server()` returns a fresh server
with its namespaces registered, and handlers reach it through `self.server`.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio
from django.conf import settings

from realtime_sandbox.realtime.events.greetings import send_greeting

logger = logging.getLogger(__name__)


class HelloNamespace(socketio.AsyncNamespace):
    """Greets every client once and logs its `world` events."""

    def __init__(self, namespace: str, *, ack_timeout: float) -> None:
        super().__init__(namespace)
        self.ack_timeout = ack_timeout

    async def on_connect(self, sid: str, environ: dict[str, Any], auth: Any = None):
        # The handshake only completes after this handler returns, so the
        # greeting (which waits on the client's ack) runs as its own task.
        self.server.start_background_task(
            send_greeting,
            self.server,
            sid,
            namespace=self.namespace,
            timeout=self.ack_timeout,
        )

    async def on_disconnect(self, sid: str, reason: Any = None):
        # Rooms/session are cleaned up automatically.
        logger.debug("Client %s left %s (%s)", sid, self.namespace, reason)

    async def on_world(self, sid: str, data: Any = None, *_: Any):
        # Only the first argument is logged; extra ones are dropped.
        logger.info("world %s", data)


def build_server() -> socketio.AsyncServer:
    """Create the Socket.IO server with every namespace registered."""

    server = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=settings.SOCKETIO_CORS_ALLOWED_ORIGINS,
        logger=False,
        engineio_logger=False,
    )
    server.register_namespace(
        HelloNamespace(
            settings.REALTIME_NAMESPACE,
            ack_timeout=settings.REALTIME_ACK_TIMEOUT,
        ),
    )
    return server
