from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from socketio.exceptions import TimeoutError as AckTimeoutError

if TYPE_CHECKING:  # import for type checking only
    import socketio

logger = logging.getLogger(__name__)

GREETING_EVENT = "hello"
GREETING_PAYLOAD = "hi"


async def send_greeting(
    server: socketio.AsyncServer,
    sid: str,
    *,
    namespace: str,
    timeout: float,
) -> Any:
    """Send the greeting to one client and wait for its acknowledgement.

    Returns whatever the client passed to its ack, or ``None`` when no ack
    arrived in time (the client left or never answered).
    """

    try:
        ack = await server.call(
            GREETING_EVENT,
            GREETING_PAYLOAD,
            to=sid,
            namespace=namespace,
            timeout=timeout,
        )
    except AckTimeoutError:
        logger.warning("Greeting to %s was not acknowledged within %ss", sid, timeout)
        return None

    logger.info("received")
    return ack
