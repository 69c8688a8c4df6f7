"""Tests for the client facade."""

import pytest

from waxpeer import Waxpeer
from waxpeer.ws.events import ConnectionState
from waxpeer.ws.trade import TradeWebsocket
from waxpeer.ws.website import WebsiteWebsocket


class TestWaxpeer:

    def test_groups_share_one_executor(self):
        wax = Waxpeer("key")

        groups = [wax.user, wax.steam, wax.buy_items, wax.buy_orders, wax.sell_items, wax.merchant_deposit]
        assert all(group.executor is wax.executor for group in groups)

    @pytest.mark.asyncio
    async def test_sockets_are_tracked_and_disposed(self):
        async with Waxpeer("key") as wax:
            trade = wax.trade_socket("76561198000000000", "https://trade.url", auto_connect=False)
            site = wax.website_socket(["add_item"], auto_connect=False)

            assert isinstance(trade, TradeWebsocket)
            assert isinstance(site, WebsiteWebsocket)
            assert trade.config is wax.config.trade_socket
            assert site.events == ["add_item"]
            assert wax.sockets == [trade, site]

        assert wax.sockets == []
        assert trade._disposed and site._disposed

    @pytest.mark.asyncio
    async def test_health_check_aggregates_sockets(self):
        wax = Waxpeer("key")
        assert wax.health_check()['status'] == "healthy"

        trade = wax.trade_socket("76561198000000000", "https://trade.url", auto_connect=False)
        trade.state = ConnectionState.CONNECTING
        assert wax.health_check()['status'] == "degraded"

        wax.website_socket(auto_connect=False)
        health = wax.health_check()
        assert health['status'] == "unhealthy"
        assert [c['component'] for c in health['components']] == ["trade_websocket", "website_websocket"]

        await wax.close()
