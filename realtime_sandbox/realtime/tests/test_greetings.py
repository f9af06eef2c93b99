import logging
from unittest import mock

from asgiref.sync import async_to_sync
from socketio.exceptions import TimeoutError as AckTimeoutError

from realtime_sandbox.realtime.events.greetings import send_greeting

LOGGER = "realtime_sandbox.realtime.events.greetings"


def _received(caplog):
    return [
        r for r in caplog.records if r.name == LOGGER and r.getMessage() == "received"
    ]


def test_send_greeting_logs_ack(caplog):
    server = mock.Mock()
    server.call = mock.AsyncMock(return_value=None)

    with caplog.at_level(logging.INFO, logger=LOGGER):
        result = async_to_sync(send_greeting)(
            server,
            "sid-1",
            namespace="/hello",
            timeout=5,
        )

    assert result is None
    server.call.assert_awaited_once_with(
        "hello",
        "hi",
        to="sid-1",
        namespace="/hello",
        timeout=5,
    )
    assert len(_received(caplog)) == 1


def test_send_greeting_returns_ack_payload():
    server = mock.Mock()
    server.call = mock.AsyncMock(return_value="thanks")

    result = async_to_sync(send_greeting)(server, "sid-1", namespace="/hello", timeout=5)

    assert result == "thanks"


def test_each_ack_logs_once(caplog):
    server = mock.Mock()
    server.call = mock.AsyncMock(return_value=None)

    with caplog.at_level(logging.INFO, logger=LOGGER):
        async_to_sync(send_greeting)(server, "sid-a", namespace="/hello", timeout=5)
        async_to_sync(send_greeting)(server, "sid-b", namespace="/hello", timeout=5)

    assert len(_received(caplog)) == 2  # noqa: PLR2004
    assert [c.kwargs["to"] for c in server.call.await_args_list] == ["sid-a", "sid-b"]


def test_send_greeting_without_ack_logs_warning(caplog):
    server = mock.Mock()
    server.call = mock.AsyncMock(side_effect=AckTimeoutError())

    with caplog.at_level(logging.INFO, logger=LOGGER):
        result = async_to_sync(send_greeting)(
            server,
            "sid-1",
            namespace="/hello",
            timeout=1,
        )

    assert result is None
    assert _received(caplog) == []
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "sid-1" in warnings[0].getMessage()
