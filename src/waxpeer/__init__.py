"""
Waxpeer trading API client.

Provides async wrappers for the Waxpeer REST API (buying, selling, prices,
buy orders, merchant deposits, user profile) and two reconnecting push
channels: the trade websocket and the website (socket.io) feed.
"""

__version__ = "1.3.0"
__author__ = "Waxpeer Client Team"

from .client import Waxpeer
from .config.settings import WaxpeerConfig, load_config
from .exceptions import (
    WaxpeerError,
    RateLimitExceeded,
    WaxpeerRequestError,
    WaxpeerHTTPError,
)
from .ws.events import TradeEvent, SiteEvent, WebsiteSubscription, ConnectionState
from .ws.trade import TradeWebsocket
from .ws.website import WebsiteWebsocket

__all__ = [
    'Waxpeer',
    'WaxpeerConfig',
    'load_config',

    # Errors
    'WaxpeerError',
    'RateLimitExceeded',
    'WaxpeerRequestError',
    'WaxpeerHTTPError',

    # Push channels
    'TradeWebsocket',
    'WebsiteWebsocket',
    'TradeEvent',
    'SiteEvent',
    'WebsiteSubscription',
    'ConnectionState',
]
