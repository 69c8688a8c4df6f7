"""Steam catalogue endpoints."""

from typing import Any, Dict, Optional, Union

from .request import RequestExecutor
from .types import Exterior, Game, ItemsListOrderBy, SortOrder, SteamAppId


class SteamApi:

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_items_list(
        self,
        skip: int = 0,
        search: Optional[str] = None,
        brand: Optional[str] = None,
        order: SortOrder = SortOrder.DESC,
        order_by: ItemsListOrderBy = ItemsListOrderBy.PRICE,
        exterior: Optional[Exterior] = None,
        max_price: Optional[int] = None,
        min_price: Optional[int] = None,
        game: Game = Game.CSGO,
    ) -> Dict[str, Any]:
        """Items currently listed on the market - ``/get-items-list``."""
        return await self.executor.get("get-items-list", {
            'skip': skip,
            'search': search,
            'brand': brand,
            'order': order,
            'order_by': order_by,
            'exterior': exterior,
            'max_price': max_price,
            'min_price': min_price,
            'game': game,
        })

    async def get_steam_items(self, game: Union[SteamAppId, int] = SteamAppId.CSGO,
                              highest_offer: int = 0) -> Dict[str, Any]:
        """Steam item names with current prices - ``/get-steam-items``."""
        return await self.executor.get("get-steam-items", {'game': game, 'highest_offer': highest_offer})
