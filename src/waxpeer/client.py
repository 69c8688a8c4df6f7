"""Client facade bundling the REST groups and the push channels."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from .config.settings import WaxpeerConfig
from .rest.buy_items import BuyItemsApi
from .rest.buy_orders import BuyOrdersApi
from .rest.merchant_deposit import MerchantDepositApi
from .rest.request import RequestExecutor
from .rest.sell_items import SellItemsApi
from .rest.steam import SteamApi
from .rest.user import UserApi
from .ws.events import WebsiteSubscription
from .ws.trade import TradeWebsocket
from .ws.website import WebsiteWebsocket

logger = logging.getLogger(__name__)


class Waxpeer:
    """
    Waxpeer API client.

    All REST groups share one HTTP session, so the local price limits
    apply per client. Sockets created through ``trade_socket`` and
    ``website_socket`` are disposed by ``close()``.

    Usage:
        async with Waxpeer(api_key) as wax:
            profile = await wax.user.get_profile()
            trades = wax.trade_socket(steam_id, trade_url)
            trades.on(TradeEvent.SEND_TRADE, on_trade)
    """

    def __init__(self, api_key: str, config: Optional[WaxpeerConfig] = None):
        self.api_key = api_key
        self.config = config or WaxpeerConfig()
        self.executor = RequestExecutor(api_key, self.config.api)

        self.user = UserApi(self.executor)
        self.steam = SteamApi(self.executor)
        self.buy_items = BuyItemsApi(self.executor)
        self.buy_orders = BuyOrdersApi(self.executor)
        self.sell_items = SellItemsApi(self.executor)
        self.merchant_deposit = MerchantDepositApi(self.executor)

        self.sockets: List[Union[TradeWebsocket, WebsiteWebsocket]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def trade_socket(self, steam_id: str, trade_url: str, auto_connect: bool = True) -> TradeWebsocket:
        """Open the trade websocket for ``steam_id``; must be called inside a running loop."""
        socket = TradeWebsocket(
            self.api_key, steam_id, trade_url,
            config=self.config.trade_socket,
            auto_connect=auto_connect
        )
        self.sockets.append(socket)
        return socket

    def website_socket(self, events: Iterable[Union[str, WebsiteSubscription]] = (),
                       auto_connect: bool = True) -> WebsiteWebsocket:
        """Open the website feed with the given subscriptions."""
        socket = WebsiteWebsocket(
            self.api_key, events,
            config=self.config.website_socket,
            auto_connect=auto_connect
        )
        self.sockets.append(socket)
        return socket

    async def close(self) -> None:
        """Dispose every socket and release the HTTP session."""
        for socket in self.sockets:
            await socket.dispose()
        self.sockets.clear()
        await self.executor.close()
        logger.info("Waxpeer client closed")

    def health_check(self) -> Dict[str, Any]:
        """Aggregate health of the push channels."""
        health_status = {
            "service": "waxpeer",
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": [socket.health_check() for socket in self.sockets]
        }

        component_statuses = [comp.get("status", "unknown") for comp in health_status["components"]]

        if any(status == "unhealthy" for status in component_statuses):
            health_status["status"] = "unhealthy"
        elif any(status == "degraded" for status in component_statuses):
            health_status["status"] = "degraded"

        return health_status
