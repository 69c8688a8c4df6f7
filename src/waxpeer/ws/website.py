"""
Website feed.

socket.io connection to waxpeer.com that streams catalogue changes
(new, updated and removed listings) and account updates.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import socketio
from socketio.exceptions import ConnectionError as SocketIOConnectionError

from ..config.settings import WebsiteSocketConfig
from ..utils.retry import LinearBackoff
from .emitter import EventEmitter
from .events import ConnectionState, SITE_EVENT_ROUTES, SiteEvent, WebsiteSubscription, route_site_frame

logger = logging.getLogger(__name__)


class WebsiteWebsocket(EventEmitter):
    """
    Push connection for site events.

    Authenticates with the api key in the ``authorization`` header and,
    on every connect, asks the server to enable each subscribed feed.
    Initial dial failures are retried with linear backoff; drops after
    that are handled by socket.io's own reconnection.
    """

    def __init__(self, api_key: str,
                 events: Iterable[Union[str, WebsiteSubscription]] = (),
                 config: Optional[WebsiteSocketConfig] = None,
                 auto_connect: bool = True,
                 client: Optional[socketio.AsyncClient] = None):
        super().__init__(SiteEvent)
        self.api_key = api_key
        self.events: List[str] = [WebsiteSubscription(e).value for e in events]
        self.config = config or WebsiteSocketConfig()
        self.backoff = LinearBackoff(self.config.reconnect_step_seconds)

        self.sio = client or socketio.AsyncClient(reconnection=True, logger=False, engineio_logger=False)
        self.state = ConnectionState.CLOSED
        self._connection_task: Optional[asyncio.Task] = None
        self._disposed = False

        # Statistics
        self.stats = {
            'connection_attempts': 0,
            'connections': 0,
            'disconnects': 0,
            'connect_errors': 0,
            'frames_received': 0,
            'events_emitted': 0,
        }

        self._register_handlers()

        if auto_connect:
            self.connect()

    @property
    def socket_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    def _register_handlers(self) -> None:
        self.sio.on('connect', self._on_connect)
        self.sio.on('disconnect', self._on_disconnect)
        self.sio.on('connect_error', self._on_connect_error)

        for frame_name in SITE_EVENT_ROUTES:
            self.sio.on(frame_name, self._make_forwarder(frame_name))

    def _make_forwarder(self, frame_name: str):
        async def forward(*args):
            if len(args) == 1:
                data = args[0]
            else:
                data = list(args) if args else None
            self._handle_frame(frame_name, data)
        return forward

    def connect(self) -> None:
        """Start dialing in the background."""
        if self._disposed:
            logger.warning("WebsiteWebsocket already disposed, not connecting")
            return
        if self._connection_task is not None and not self._connection_task.done():
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError("WebsiteWebsocket must be connected from within a running event loop") from None

        self._connection_task = loop.create_task(self._run_connection())

    async def dispose(self) -> None:
        """Disconnect and stop all retries."""
        self._disposed = True

        task = self._connection_task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])
        self._connection_task = None

        try:
            await self.sio.disconnect()
        except Exception as e:
            logger.debug(f"Error while disconnecting website socket: {e}")

        self.state = ConnectionState.CLOSED
        logger.info("WebsiteWebsocket disposed")

    def health_check(self) -> Dict[str, Any]:
        if self.state is ConnectionState.OPEN:
            status = "healthy"
        elif self.state is ConnectionState.CONNECTING:
            status = "degraded"
        else:
            status = "unhealthy"

        return {
            "component": "website_websocket",
            "status": status,
            "state": self.state.value,
            "subscriptions": list(self.events),
            "stats": dict(self.stats),
        }

    async def _run_connection(self) -> None:
        """Dial until the first successful connect."""
        while not self._disposed:
            self.state = ConnectionState.CONNECTING
            self.stats['connection_attempts'] += 1
            logger.info(f"Connecting to {self.config.url} (attempt {self.stats['connection_attempts']})")

            try:
                await self.sio.connect(
                    self.config.url,
                    headers={'authorization': self.api_key},
                    transports=list(self.config.transports),
                    socketio_path=self.config.socketio_path,
                )
                return
            except SocketIOConnectionError as e:
                # counted and logged by the connect_error handler
                self.state = ConnectionState.CLOSED
                delay = self.backoff.next_delay()
                logger.info(f"WebsiteWebsocket dial failed ({e}), retrying in {delay:.1f}s")
                await asyncio.sleep(delay)

    async def _on_connect(self) -> None:
        self.state = ConnectionState.OPEN
        self.stats['connections'] += 1

        for event in self.events:
            await self.sio.emit("event", {"name": event, "value": True})

        logger.info(f"WebsiteWebsocket connected, subscribed to {len(self.events)} feeds")

    async def _on_disconnect(self, *args) -> None:
        self.state = ConnectionState.CLOSED
        self.stats['disconnects'] += 1
        logger.info("WebsiteWebsocket disconnected")

    async def _on_connect_error(self, error: Any = None) -> None:
        self.state = ConnectionState.CLOSED
        self.stats['connect_errors'] += 1
        logger.error(f"connect_error {error}")

    def _handle_frame(self, frame_name: str, data: Any) -> None:
        """Republish one named socket.io frame under its domain event name."""
        self.stats['frames_received'] += 1

        event = route_site_frame(frame_name)
        if event is None:
            return

        self.stats['events_emitted'] += 1
        self.emit(event, data)
