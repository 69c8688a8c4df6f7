"""
Trade websocket.

Keeps an authenticated connection to the Waxpeer trade endpoint and
publishes trade events (``send-trade``, ``cancelTrade``,
``accept_withdraw``) to listeners.

Usage:
    async def main():
        socket = TradeWebsocket(api_key, steam_id, trade_url)
        socket.on(TradeEvent.SEND_TRADE, handle_trade)
        ...
        await socket.dispose()
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import websockets
from websockets.exceptions import ConnectionClosed

from ..config.settings import TradeSocketConfig
from ..utils.logging import log_with_context
from ..utils.retry import LinearBackoff
from .emitter import EventEmitter
from .events import ConnectionState, TradeEvent, route_trade_frame

logger = logging.getLogger(__name__)


class TradeWebsocket(EventEmitter):
    """
    Reconnecting push connection for trade events.

    Lifecycle: CONNECTING -> OPEN -> CLOSED -> CONNECTING -> ...

    Every close bumps the retry counter and, when both api key and steam
    id are present, schedules the next attempt ``tries * step`` seconds
    later. The heartbeat runs only while the socket is OPEN. Transport and
    parse errors never reach the caller.
    """

    def __init__(self, api_key: str, steam_id: str, trade_url: str,
                 config: Optional[TradeSocketConfig] = None,
                 auto_connect: bool = True):
        super().__init__(TradeEvent)
        self.api_key = api_key
        self.steam_id = steam_id
        self.trade_url = trade_url
        self.config = config or TradeSocketConfig()
        self.backoff = LinearBackoff(self.config.reconnect_step_seconds)

        self.state = ConnectionState.CLOSED
        self.websocket = None
        self._connection_task: Optional[asyncio.Task] = None
        self._heartbeat_task: Optional[asyncio.Task] = None
        self._reconnect_handle: Optional[asyncio.TimerHandle] = None
        self._disposed = False

        # Statistics
        self.stats = {
            'connection_attempts': 0,
            'connections': 0,
            'disconnects': 0,
            'transport_errors': 0,
            'frames_received': 0,
            'malformed_frames': 0,
            'ignored_frames': 0,
            'pongs_received': 0,
            'pings_sent': 0,
            'events_emitted': 0,
        }

        if auto_connect:
            self.connect()

    @property
    def tries(self) -> int:
        """Consecutive closes counted by the backoff policy."""
        return self.backoff.attempts

    @property
    def socket_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.steam_id)

    def connect(self) -> None:
        """Start a new connection attempt, dropping the current socket if there is one."""
        if self._disposed:
            logger.warning("TradeWebsocket already disposed, not connecting")
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError("TradeWebsocket must be connected from within a running event loop") from None

        self._cancel_reconnect()
        self._stop_heartbeat()

        previous = self._connection_task
        self.state = ConnectionState.CONNECTING
        self._connection_task = loop.create_task(self._run_connection(previous))

    async def dispose(self) -> None:
        """Stop for good: cancel timers, close the socket, never reconnect."""
        self._disposed = True
        self._cancel_reconnect()
        self._stop_heartbeat()

        task = self._connection_task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])

        self._connection_task = None
        self.state = ConnectionState.CLOSED
        logger.info(f"TradeWebsocket disposed {self.steam_id}")

    def health_check(self) -> Dict[str, Any]:
        if self.state is ConnectionState.OPEN:
            status = "healthy"
        elif self.state is ConnectionState.CONNECTING:
            status = "degraded"
        else:
            status = "unhealthy"

        return {
            "component": "trade_websocket",
            "status": status,
            "state": self.state.value,
            "tries": self.tries,
            "stats": dict(self.stats),
        }

    async def _run_connection(self, previous: Optional[asyncio.Task]) -> None:
        """One connection attempt, from dial to close."""
        if previous is not None and not previous.done():
            previous.cancel()
            await asyncio.wait([previous])

        attempt = asyncio.current_task()
        self.stats['connection_attempts'] += 1
        logger.info(f"Connecting to {self.config.url} (attempt {self.stats['connection_attempts']})")

        try:
            websocket = await websockets.connect(
                self.config.url,
                open_timeout=self.config.open_timeout_seconds,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.stats['transport_errors'] += 1
            logger.error(f"TradeWebsocket error: {e}")
            self._handle_close(attempt)
            return

        self.websocket = websocket
        try:
            await self._handle_open(websocket)

            async for raw_message in websocket:
                self._handle_message(raw_message)

        except ConnectionClosed as e:
            logger.debug(f"TradeWebsocket connection closed: {e}")
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.stats['transport_errors'] += 1
            logger.error(f"TradeWebsocket error: {e}")
        finally:
            if self.websocket is websocket:
                self.websocket = None
            try:
                await websocket.close()
            except Exception as e:
                logger.debug(f"Error while closing trade socket: {e}")
            self._handle_close(attempt)

    async def _handle_open(self, websocket) -> None:
        self.state = ConnectionState.OPEN
        self.stats['connections'] += 1
        if self.config.reset_backoff_on_open:
            self.backoff.reset()
        logger.info(f"TradeWebsocket opened {self.steam_id}")

        self._stop_heartbeat()

        if not self.steam_id:
            logger.warning("No steam id configured, closing trade websocket")
            await websocket.close()
            return

        await websocket.send(json.dumps(self._auth_frame()))
        self._heartbeat_task = asyncio.create_task(self._heartbeat(websocket))

    def _auth_frame(self) -> Dict[str, Any]:
        return {
            "name": "auth",
            "steamid": self.steam_id,
            "apiKey": self.api_key,
            "tradeurl": self.trade_url,
            "source": self.config.client_source,
            "version": self.config.client_version,
        }

    async def _heartbeat(self, websocket) -> None:
        """Send a ping frame every heartbeat interval while the socket is open."""
        while True:
            await asyncio.sleep(self.config.heartbeat_interval_seconds)
            try:
                await websocket.send(json.dumps({"name": "ping"}))
                self.stats['pings_sent'] += 1
            except ConnectionClosed:
                # close path owns state changes
                return
            except Exception as e:
                self.stats['transport_errors'] += 1
                logger.error(f"TradeWebsocket heartbeat error: {e}")
                return

    def _handle_message(self, raw_message) -> None:
        """Parse one inbound frame and publish the matching event, if any."""
        self.stats['frames_received'] += 1

        try:
            frame = json.loads(raw_message)
        except (TypeError, ValueError):
            self._discard(raw_message)
            return

        if not isinstance(frame, dict):
            self._discard(raw_message)
            return

        name = frame.get('name')
        if name is not None and not isinstance(name, str):
            self._discard(raw_message)
            return

        event = route_trade_frame(name)
        if event is None:
            if name == 'pong':
                self.stats['pongs_received'] += 1
            else:
                self.stats['ignored_frames'] += 1
            return

        self.stats['events_emitted'] += 1
        self.emit(event, frame.get('data'))

    def _discard(self, raw_message) -> None:
        self.stats['malformed_frames'] += 1
        logger.debug(f"Discarding malformed trade frame: {str(raw_message)[:200]}")

    def _handle_close(self, attempt: Optional[asyncio.Task]) -> None:
        """Close path shared by failed dials and dropped sockets; runs once per attempt."""
        if attempt is not self._connection_task:
            # superseded by an explicit connect(), or already handled
            return
        self._connection_task = None

        self._stop_heartbeat()
        self.state = ConnectionState.CLOSED
        self.stats['disconnects'] += 1

        if self._disposed:
            return

        delay = self.backoff.next_delay()
        log_with_context(
            logger, logging.INFO, f"TradeWebsocket closed {self.steam_id}",
            steam_id=self.steam_id, tries=self.tries
        )

        if not self.has_credentials:
            logger.info("TradeWebsocket has no credentials, not reconnecting")
            return

        self._cancel_reconnect()
        loop = asyncio.get_running_loop()
        self._reconnect_handle = loop.call_later(delay, self._reconnect)
        logger.info(f"Reconnecting trade websocket in {delay:.1f}s")

    def _reconnect(self) -> None:
        self._reconnect_handle = None
        self.connect()

    def _stop_heartbeat(self) -> None:
        if self._heartbeat_task is not None:
            self._heartbeat_task.cancel()
            self._heartbeat_task = None

    def _cancel_reconnect(self) -> None:
        if self._reconnect_handle is not None:
            self._reconnect_handle.cancel()
            self._reconnect_handle = None
