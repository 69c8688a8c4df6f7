"""Buying endpoints: purchases, prices and trade status."""

from typing import Any, Dict, List, Optional, Union

from .request import RequestExecutor
from .types import DopplerPhase, Exterior, Game, Ids, as_list


class BuyItemsApi:
    """Purchase items and query prices."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def buy_item_with_name(self, name: str, price: int, token: str, partner: str,
                                 project_id: Optional[str] = None,
                                 game: Game = Game.CSGO) -> Dict[str, Any]:
        """
        Buy the cheapest listing of an item by name and send it to a
        trade link - ``/buy-one-p2p-name``.

        Args:
            name: Market name of the item
            price: Max price in 1/1000 USD
            token: Token part of the receiver's trade link
            partner: Partner part of the receiver's trade link
            project_id: Your own id for this purchase
            game: Game the item belongs to
        """
        return await self.executor.get("buy-one-p2p-name", {
            'name': name,
            'price': price,
            'token': token,
            'partner': partner,
            'project_id': project_id,
            'game': game,
        })

    async def buy_item_with_id(self, item_id: Union[int, str], price: int, token: str, partner: str,
                               project_id: Optional[str] = None) -> Dict[str, Any]:
        """Buy a listing by its item id - ``/buy-one-p2p``."""
        return await self.executor.get("buy-one-p2p", {
            'item_id': item_id,
            'price': price,
            'token': token,
            'partner': partner,
            'project_id': project_id,
        })

    async def get_prices(
        self,
        game: Game = Game.CSGO,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        search: Optional[str] = None,
        minified: int = 1,
        highest_offer: int = 0,
        single: int = 0,
    ) -> Dict[str, Any]:
        """
        Lowest prices for every listed item - ``/prices``.

        Limited locally to 60 calls per minute; the 61st call raises
        RateLimitExceeded without a request being sent.
        """
        self.executor.acquire_prices()
        return await self.executor.get("prices", {
            'game': game,
            'min_price': min_price,
            'max_price': max_price,
            'search': search or None,
            'minified': minified,
            'highest_offer': highest_offer,
            'single': single,
        })

    async def get_prices_dopplers(
        self,
        phase: DopplerPhase = DopplerPhase.ANY,
        exterior: Optional[Exterior] = None,
        weapon: Optional[str] = None,
        minified: int = 1,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        search: Optional[str] = None,
        single: int = 0,
    ) -> Dict[str, Any]:
        """Doppler prices by phase - ``/prices/dopplers``. Rate limited like ``get_prices``."""
        self.executor.acquire_prices_dopplers()
        return await self.executor.get("prices/dopplers", {
            'phase': phase,
            'exterior': exterior,
            'weapon': weapon,
            'minified': minified,
            'min_price': min_price,
            'max_price': max_price,
            'search': search or None,
            'single': single,
        })

    async def mass_info(self, names: List[str], game: Game = Game.CSGO) -> Dict[str, Any]:
        """Listings, buy orders and history for many items - ``/mass-info``."""
        return await self.executor.post("mass-info", {'name': names, 'sell': 1}, {'game': game})

    async def search_items(self, names: Union[str, List[str]], game: Game = Game.CSGO) -> Dict[str, Any]:
        """Listings matching exact item names - ``/search-items-by-name``."""
        query = [('game', game)] + [('names', n) for n in as_list(names)]
        return await self.executor.get("search-items-by-name", query)

    async def custom_trade_request(self, ids: Ids) -> Dict[str, Any]:
        """Trade status by your own project ids - ``/check-many-project-id``."""
        return await self.executor.get("check-many-project-id", [('id', i) for i in as_list(ids)])

    async def trade_request_status(self, ids: Ids) -> Dict[str, Any]:
        """Trade status by purchase ids - ``/check-many-steam``."""
        return await self.executor.get("check-many-steam", [('id', i) for i in as_list(ids)])

    async def check_item_availability(self, item_ids: Ids) -> Dict[str, Any]:
        """Whether listings are still for sale - ``/check-availability``."""
        return await self.executor.get("check-availability", [('item_id', i) for i in as_list(item_ids)])

    async def validate_trade_link(self, tradelink: str) -> Dict[str, Any]:
        """Check that a trade link can receive items - ``/check-tradelink``."""
        return await self.executor.post("check-tradelink", {'tradelink': tradelink})

    async def my_purchases(self, skip: int = 0, partner: Optional[str] = None,
                           token: Optional[str] = None) -> Dict[str, Any]:
        """Purchase history - ``/history``."""
        return await self.executor.get("history", {'skip': skip, 'partner': partner, 'token': token})
