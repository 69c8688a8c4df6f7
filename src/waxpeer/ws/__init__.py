"""Push channels: trade websocket and website feed."""

from .events import (
    ConnectionState,
    TradeEvent,
    SiteEvent,
    WebsiteSubscription,
    TRADE_EVENT_ROUTES,
    SITE_EVENT_ROUTES,
)
from .emitter import EventEmitter
from .trade import TradeWebsocket
from .website import WebsiteWebsocket

__all__ = [
    'ConnectionState',
    'TradeEvent',
    'SiteEvent',
    'WebsiteSubscription',
    'TRADE_EVENT_ROUTES',
    'SITE_EVENT_ROUTES',
    'EventEmitter',
    'TradeWebsocket',
    'WebsiteWebsocket',
]
