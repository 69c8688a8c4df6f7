"""Event vocabularies and demultiplexing tables for the push channels."""

from enum import Enum
from typing import Dict, Optional


class ConnectionState(Enum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class TradeEvent(str, Enum):
    """Domain events published by the trade websocket."""
    SEND_TRADE = "send-trade"
    CANCEL_TRADE = "cancelTrade"
    ACCEPT_WITHDRAW = "accept_withdraw"


class SiteEvent(str, Enum):
    """Domain events published by the website feed."""
    HANDSHAKE = "handshake"
    ADD_ITEM = "add_item"
    UPDATE_ITEM = "update_item"
    UPDATED_ITEM = "updated_item"
    REMOVE_ITEM = "remove_item"
    CHANGE_USER = "change_user"


class WebsiteSubscription(str, Enum):
    """Feeds the website socket can ask the server to enable."""
    ADD_ITEM = "add_item"
    REMOVE = "remove"
    UPDATE_ITEM = "update_item"


# Inbound frame name -> published event. Anything not listed is dropped.
TRADE_EVENT_ROUTES: Dict[str, TradeEvent] = {
    "send-trade": TradeEvent.SEND_TRADE,
    "cancelTrade": TradeEvent.CANCEL_TRADE,
    "accept_withdraw": TradeEvent.ACCEPT_WITHDRAW,
}

# Heartbeat acknowledgements, consumed without publishing
TRADE_INTERNAL_FRAMES = frozenset(["pong"])

SITE_EVENT_ROUTES: Dict[str, SiteEvent] = {
    "handshake": SiteEvent.HANDSHAKE,
    "add_item": SiteEvent.ADD_ITEM,
    "update_item": SiteEvent.UPDATE_ITEM,
    "updated_item": SiteEvent.UPDATED_ITEM,
    "remove": SiteEvent.REMOVE_ITEM,
    "change_user": SiteEvent.CHANGE_USER,
}


def route_trade_frame(name: Optional[str]) -> Optional[TradeEvent]:
    """Published event for an inbound trade frame name, or None."""
    if not isinstance(name, str) or name in TRADE_INTERNAL_FRAMES:
        return None
    return TRADE_EVENT_ROUTES.get(name)


def route_site_frame(name: str) -> Optional[SiteEvent]:
    if not isinstance(name, str):
        return None
    return SITE_EVENT_ROUTES.get(name)
