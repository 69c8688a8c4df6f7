"""Pytest configuration and shared fixtures."""

import asyncio
import json
from typing import Any, Dict, List

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from waxpeer.config.settings import ApiConfig, TradeSocketConfig

from tests.helpers import FakeTradeServer


@pytest_asyncio.fixture
async def trade_server():
    server = FakeTradeServer()
    await server.start()
    yield server
    await server.stop()


@pytest.fixture
def fast_trade_config(trade_server) -> TradeSocketConfig:
    """Trade socket config with short timings pointed at the local server."""
    return TradeSocketConfig(
        url=trade_server.url,
        heartbeat_interval_seconds=0.05,
        reconnect_step_seconds=0.2,
        open_timeout_seconds=2.0,
    )


@pytest_asyncio.fixture
async def api_server():
    """Local HTTP server recording every request made under /v1."""
    calls: List[Dict[str, Any]] = []

    async def handler(request: web.Request) -> web.Response:
        body = await request.json() if request.can_read_body else None
        calls.append({
            'method': request.method,
            'path': request.path,
            'query': request.query,
            'body': body,
        })

        tail = request.match_info['tail']
        if tail == 'fail':
            return web.json_response({'success': False, 'msg': 'internal'}, status=500)
        if tail == 'soft-fail':
            return web.json_response({'success': False, 'msg': 'wrong api key'})
        if tail == 'slow':
            await asyncio.sleep(1.0)
        return web.json_response({'success': True, 'path': request.path})

    app = web.Application()
    app.router.add_route('*', '/v1/{tail:.*}', handler)

    server = TestServer(app)
    await server.start_server()
    server.calls = calls
    yield server
    await server.close()


@pytest.fixture
def api_config(api_server) -> ApiConfig:
    return ApiConfig(base_url=str(api_server.make_url('/v1')), request_timeout_seconds=5.0)


@pytest.fixture
def sample_send_trade_frame() -> str:
    return json.dumps({
        'name': 'send-trade',
        'data': {
            'id': 1,
            'tradelink': 'https://steamcommunity.com/tradeoffer/new/?partner=1&token=abc',
            'items': [{'id': 2, 'item_id': 25120229838, 'name': 'AK-47 | Redline (Field-Tested)'}],
        },
    })
