"""Tests for the website (socket.io) feed."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest
from socketio.exceptions import ConnectionError as SocketIOConnectionError

from waxpeer.config.settings import WebsiteSocketConfig
from waxpeer.ws.events import ConnectionState, SiteEvent, WebsiteSubscription
from waxpeer.ws.website import WebsiteWebsocket

from tests.helpers import wait_until


@pytest.fixture
def sio():
    """Mocked socket.io client."""
    client = Mock()
    client.connect = AsyncMock()
    client.emit = AsyncMock()
    client.disconnect = AsyncMock()
    return client


def registered_handlers(sio) -> dict:
    return {c.args[0]: c.args[1] for c in sio.on.call_args_list}


class TestWebsiteWebsocket:

    def test_registers_lifecycle_and_feed_handlers(self, sio):
        WebsiteWebsocket("key", client=sio, auto_connect=False)

        assert set(registered_handlers(sio)) == {
            'connect', 'disconnect', 'connect_error',
            'handshake', 'add_item', 'update_item', 'updated_item', 'remove', 'change_user',
        }

    def test_rejects_unknown_subscription(self, sio):
        with pytest.raises(ValueError):
            WebsiteWebsocket("key", ["not_a_feed"], client=sio, auto_connect=False)

    @pytest.mark.asyncio
    async def test_connect_uses_authorization_header(self, sio):
        config = WebsiteSocketConfig(url="wss://example.test", socketio_path="/socket.io/")
        socket = WebsiteWebsocket("key", client=sio, config=config)

        await wait_until(lambda: sio.connect.await_count == 1)

        sio.connect.assert_awaited_once_with(
            "wss://example.test",
            headers={'authorization': "key"},
            transports=["websocket"],
            socketio_path="/socket.io/",
        )
        await socket.dispose()
        sio.disconnect.assert_awaited()

    @pytest.mark.asyncio
    async def test_subscribes_on_every_connect(self, sio):
        socket = WebsiteWebsocket("key", [WebsiteSubscription.ADD_ITEM, "remove"], client=sio, auto_connect=False)

        await socket._on_connect()

        assert socket.is_open()
        assert [c.args for c in sio.emit.await_args_list] == [
            ("event", {"name": "add_item", "value": True}),
            ("event", {"name": "remove", "value": True}),
        ]

    @pytest.mark.asyncio
    async def test_remove_frame_republished_as_remove_item(self, sio):
        socket = WebsiteWebsocket("key", client=sio, auto_connect=False)
        received = []
        socket.on(SiteEvent.REMOVE_ITEM, received.append)

        await registered_handlers(sio)['remove']({'item_id': 42})

        assert received == [{'item_id': 42}]
        assert socket.stats['events_emitted'] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("frame_name", ['handshake', 'add_item', 'update_item', 'updated_item', 'change_user'])
    async def test_frames_forwarded_verbatim(self, sio, frame_name):
        socket = WebsiteWebsocket("key", client=sio, auto_connect=False)
        listener = Mock()
        socket.on(frame_name, listener)

        await registered_handlers(sio)[frame_name]({'name': 'AK-47', 'price': 1000})

        listener.assert_called_once_with({'name': 'AK-47', 'price': 1000})

    @pytest.mark.asyncio
    async def test_connect_error_marks_closed(self, sio):
        socket = WebsiteWebsocket("key", client=sio, auto_connect=False)
        await socket._on_connect()

        await socket._on_connect_error("unauthorized")

        assert not socket.is_open()
        assert socket.state is ConnectionState.CLOSED
        assert socket.stats['connect_errors'] == 1

    @pytest.mark.asyncio
    async def test_disconnect_marks_closed(self, sio):
        socket = WebsiteWebsocket("key", client=sio, auto_connect=False)
        await socket._on_connect()

        await registered_handlers(sio)['disconnect']("transport close")

        assert not socket.is_open()
        assert socket.health_check()['status'] == "unhealthy"

    @pytest.mark.asyncio
    async def test_initial_connect_retried_with_backoff(self, sio):
        failures = [SocketIOConnectionError("refused"), SocketIOConnectionError("refused")]

        async def dial(*args, **kwargs):
            if failures:
                # socket.io fires connect_error before raising
                await registered_handlers(sio)['connect_error']("refused")
                raise failures.pop(0)

        sio.connect.side_effect = dial
        socket = WebsiteWebsocket("key", client=sio, config=WebsiteSocketConfig(reconnect_step_seconds=0.01))

        await wait_until(lambda: sio.connect.await_count == 3)

        assert socket.backoff.attempts == 2
        assert socket.stats['connection_attempts'] == 3
        # one failure per failed dial
        assert socket.stats['connect_errors'] == 2
        await socket.dispose()

    @pytest.mark.asyncio
    async def test_dispose_stops_retries(self, sio):
        sio.connect.side_effect = SocketIOConnectionError("refused")
        socket = WebsiteWebsocket("key", client=sio, config=WebsiteSocketConfig(reconnect_step_seconds=10.0))
        await wait_until(lambda: sio.connect.await_count == 1)

        await socket.dispose()
        await asyncio.sleep(0.05)

        assert sio.connect.await_count == 1
        assert socket._connection_task is None
        assert not socket.is_open()
